# e2e/travelblog_e2e/core/url.py
from __future__ import annotations

from urllib.parse import urljoin

SIGNUP_PATH = "signup.php"
LOGIN_PATH = "login.php"
HOME_PATH = "index.php"
ADD_POST_PATH = "add_post.php"


def app_url(base_url: str, path: str) -> str:
    """
    base_url がパス付き（例: http://localhost/travel-blog）でも
    末尾に / を補ってから結合する。
    """
    if not base_url:
        raise ValueError("base_url is not configured (set TRAVELBLOG_BASE_URL)")
    base = base_url if base_url.endswith("/") else base_url + "/"
    return urljoin(base, path.lstrip("/"))
