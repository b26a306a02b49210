from __future__ import annotations

from travelblog_e2e.core.text import clip


def assert_contains(observed: str, expected: str, what: str) -> None:
    if expected not in (observed or ""):
        raise AssertionError(f"{what}: expected to contain {expected!r}, observed {clip(observed)!r}")


def assert_not_contains(observed: str, unexpected: str, what: str) -> None:
    if unexpected in (observed or ""):
        raise AssertionError(f"{what}: expected NOT to contain {unexpected!r}, observed {clip(observed)!r}")
