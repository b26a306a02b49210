from __future__ import annotations

import logging
import time
from typing import Callable

from playwright.sync_api import ElementHandle, Error as PlaywrightError, Locator as PWLocator, Page

from travelblog_e2e.core.errors import WaitTimeoutError
from travelblog_e2e.core.locators import Locator

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SEC = 10.0
DEFAULT_INTERVAL_SEC = 0.2


def poll_until(
    predicate: Callable[[], bool],
    condition: str,
    timeout_sec: float = DEFAULT_TIMEOUT_SEC,
    interval_sec: float = DEFAULT_INTERVAL_SEC,
) -> None:
    """
    predicate が True になるまで poll する。timeout で WaitTimeoutError。
    最低1回は評価する。
    """
    logger.debug("waiting up to %.1fs: %s", timeout_sec, condition)
    end = time.time() + timeout_sec
    while True:
        try:
            if predicate():
                return
        except PlaywrightError as e:
            # 遷移中の detach / context 破棄。次の poll で再評価
            logger.debug("poll error (%s): %s", condition, e)
        if time.time() >= end:
            raise WaitTimeoutError(condition, timeout_sec)
        time.sleep(interval_sec)


def wait_visible(
    page: Page,
    loc: Locator,
    timeout_sec: float = DEFAULT_TIMEOUT_SEC,
    interval_sec: float = DEFAULT_INTERVAL_SEC,
) -> PWLocator:
    target = page.locator(loc.selector).first
    poll_until(target.is_visible, f"{loc} is visible", timeout_sec, interval_sec)
    return target


def wait_present(
    page: Page,
    loc: Locator,
    timeout_sec: float = DEFAULT_TIMEOUT_SEC,
    interval_sec: float = DEFAULT_INTERVAL_SEC,
) -> PWLocator:
    elements = page.locator(loc.selector)
    poll_until(lambda: elements.count() > 0, f"{loc} is present", timeout_sec, interval_sec)
    return elements


def _is_connected(handle: ElementHandle) -> bool:
    try:
        return bool(handle.evaluate("el => el.isConnected"))
    except PlaywrightError:
        # 遷移で実行コンテキストごと破棄された
        return False


def wait_detached(
    handle: ElementHandle,
    what: str,
    timeout_sec: float = DEFAULT_TIMEOUT_SEC,
    interval_sec: float = DEFAULT_INTERVAL_SEC,
) -> None:
    """
    クリックした要素が DOM から外れる（再描画・ページ遷移）まで待つ。
    """
    poll_until(lambda: not _is_connected(handle), f"{what} is detached", timeout_sec, interval_sec)


def wait_url_contains(
    page: Page,
    fragment: str,
    timeout_sec: float = DEFAULT_TIMEOUT_SEC,
    interval_sec: float = DEFAULT_INTERVAL_SEC,
) -> None:
    poll_until(lambda: fragment in (page.url or ""), f"URL contains {fragment!r}", timeout_sec, interval_sec)


def assert_url_stays(
    page: Page,
    fragment: str,
    hold_sec: float = 1.0,
    interval_sec: float = DEFAULT_INTERVAL_SEC,
) -> None:
    """
    固定 sleep の代わり：hold_sec の間、毎回の poll で URL が fragment を含み続けること。
    一度でも外れたら AssertionError（送信が通ってしまった）。
    """
    end = time.time() + hold_sec
    polls = 0
    while True:
        cur = page.url or ""
        polls += 1
        if fragment not in cur:
            raise AssertionError(
                f"URL left {fragment!r} after {polls} poll(s): expected to stay, observed {cur!r}"
            )
        if time.time() >= end:
            logger.debug("URL stayed on %r for %d polls", fragment, polls)
            return
        time.sleep(interval_sec)
