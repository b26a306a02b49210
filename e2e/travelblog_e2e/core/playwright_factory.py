from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from playwright.sync_api import sync_playwright, Browser, BrowserContext, Page, Playwright

from travelblog_e2e.core.config import Settings
from travelblog_e2e.core.errors import SessionStartError

logger = logging.getLogger(__name__)

LAUNCH_ARGS = ["--no-sandbox", "--disable-dev-shm-usage"]


@dataclass
class BrowserSession:
    """
    1シナリオ = 1セッション。起動途中で失敗した場合は一部が None のまま。
    """

    playwright: Optional[Playwright] = None
    browser: Optional[Browser] = None
    context: Optional[BrowserContext] = None
    page: Optional[Page] = None
    tracing: bool = False


def create_session(settings: Settings) -> BrowserSession:
    """
    毎回新規 browser + context（シナリオ間で cookie 等を共有しない）。
    起動できなければ SessionStartError。途中まで作ったものは閉じてから投げる。
    """
    session = BrowserSession()
    try:
        session.playwright = sync_playwright().start()

        launch_kwargs = {
            "headless": settings.headless,
            "slow_mo": settings.slow_mo_ms,
            "args": list(LAUNCH_ARGS),
        }
        if settings.channel:
            launch_kwargs["channel"] = settings.channel

        session.browser = session.playwright.chromium.launch(**launch_kwargs)

        width, height = settings.viewport
        session.context = session.browser.new_context(viewport={"width": width, "height": height})

        # タイムアウト統一
        session.context.set_default_timeout(settings.timeout_ms)
        session.context.set_default_navigation_timeout(settings.timeout_ms * 3)

        if settings.trace:
            session.context.tracing.start(screenshots=True, snapshots=True, sources=True)
            session.tracing = True

        session.page = session.context.new_page()
    except Exception as e:
        close_session(session)
        raise SessionStartError(f"Could not start browser session: {e}") from e

    logger.debug("browser session started (headless=%s, viewport=%s)", settings.headless, settings.viewport)
    return session


def close_session(session: Optional[BrowserSession], trace_path: Optional[Path] = None) -> None:
    """
    None / 部分的に起動したセッションでも安全に閉じる。
    """
    if session is None:
        return

    if session.tracing and session.context is not None:
        try:
            if trace_path is not None:
                session.context.tracing.stop(path=str(trace_path))
            else:
                session.context.tracing.stop()
        except Exception as e:
            logger.warning("trace stop failed: %s", e)
        session.tracing = False

    for name in ("context", "browser"):
        obj = getattr(session, name)
        if obj is None:
            continue
        try:
            obj.close()
        except Exception as e:
            logger.warning("%s close failed: %s", name, e)
        setattr(session, name, None)
    session.page = None

    if session.playwright is not None:
        try:
            session.playwright.stop()
        except Exception as e:
            logger.warning("playwright stop failed: %s", e)
        session.playwright = None
