# e2e/travelblog_e2e/core/unique.py
from __future__ import annotations

import itertools
import time
import uuid

# 1回の pytest 実行で共通。タイトルの衝突防止用
RUN_ID = uuid.uuid4().hex[:8]

_counter = itertools.count(1)


def unique_email(prefix: str = "testuser", domain: str = "example.com") -> str:
    ms = int(time.time() * 1000)
    return f"{prefix}{ms}{uuid.uuid4().hex[:4]}@{domain}"


def unique_title(base: str) -> str:
    return f"{base} {RUN_ID}-{next(_counter)}"
