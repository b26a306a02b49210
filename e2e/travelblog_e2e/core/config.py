# e2e/travelblog_e2e/core/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv

DEFAULT_SCENARIO_FILE = Path(__file__).resolve().parents[2] / "scenarios" / "scenarios.yaml"


def _env_true(name: str, default: bool = False) -> bool:
    v = os.getenv(name)
    if v is None:
        return default
    return v.strip().lower() in ("1", "true", "yes", "y", "on")


def _env_float(name: str, default: float) -> float:
    v = (os.getenv(name) or "").strip()
    if not v:
        return default
    try:
        return float(v)
    except ValueError:
        raise ValueError(f"{name} must be a number: {v!r}")


def _parse_viewport(raw: str) -> Tuple[int, int]:
    try:
        w, h = raw.lower().split("x", 1)
        return int(w), int(h)
    except ValueError:
        raise ValueError(f"PW_VIEWPORT must look like 1920x1080: {raw!r}")


@dataclass(frozen=True)
class Settings:
    base_url: Optional[str]
    user_email: str = "testuser1@example.com"
    user_password: str = "password"
    invalid_email: str = "invalid@example.com"
    invalid_password: str = "wrongpassword"
    signup_password: str = "password"

    wait_timeout_sec: float = 10.0
    poll_interval_sec: float = 0.2
    hold_sec: float = 1.0

    headless: bool = True
    channel: Optional[str] = None
    slow_mo_ms: int = 0
    viewport: Tuple[int, int] = (1920, 1080)
    trace: bool = True

    artifact_dir: Path = Path("artifacts")
    scenario_file: Path = DEFAULT_SCENARIO_FILE

    @property
    def timeout_ms(self) -> int:
        return int(self.wait_timeout_sec * 1000)


def load_settings(dotenv: bool = True) -> Settings:
    """
    環境変数（＋ .env）から Settings を作る。
    base_url が未設定ならブラウザを使うシナリオは skip される。
    """
    if dotenv:
        load_dotenv()

    base_url = (os.getenv("TRAVELBLOG_BASE_URL") or "").strip() or None

    return Settings(
        base_url=base_url,
        user_email=os.getenv("TRAVELBLOG_USER_EMAIL", "testuser1@example.com"),
        user_password=os.getenv("TRAVELBLOG_USER_PASSWORD", "password"),
        invalid_email=os.getenv("TRAVELBLOG_INVALID_EMAIL", "invalid@example.com"),
        invalid_password=os.getenv("TRAVELBLOG_INVALID_PASSWORD", "wrongpassword"),
        signup_password=os.getenv("TRAVELBLOG_SIGNUP_PASSWORD", "password"),
        wait_timeout_sec=_env_float("E2E_WAIT_TIMEOUT_SEC", 10.0),
        poll_interval_sec=_env_float("E2E_POLL_INTERVAL_SEC", 0.2),
        hold_sec=_env_float("E2E_HOLD_SEC", 1.0),
        headless=_env_true("PW_HEADLESS", default=True),
        channel=os.getenv("PW_CHANNEL") or None,  # "chrome" 等（任意）
        slow_mo_ms=int(os.getenv("PW_SLOWMO_MS", "0")),
        viewport=_parse_viewport(os.getenv("PW_VIEWPORT", "1920x1080")),
        trace=_env_true("PW_TRACE", default=True),
        artifact_dir=Path(os.getenv("ARTIFACT_DIR", "artifacts")),
        scenario_file=Path(os.getenv("SCENARIO_FILE") or DEFAULT_SCENARIO_FILE),
    )
