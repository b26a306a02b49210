# e2e/travelblog_e2e/core/cards.py
from __future__ import annotations

import logging
import time
from typing import List

from playwright.sync_api import ElementHandle, Error as PlaywrightError, Locator as PWLocator, Page

from travelblog_e2e.core.errors import NotFoundError, WaitTimeoutError
from travelblog_e2e.core.locators import by_text
from travelblog_e2e.core.text import clip, normalize_text
from travelblog_e2e.core.waits import DEFAULT_INTERVAL_SEC, DEFAULT_TIMEOUT_SEC, poll_until, wait_present
from travelblog_e2e.selectors import post_selectors as P

logger = logging.getLogger(__name__)


def card_texts(page: Page) -> List[str]:
    return [normalize_text(t) for t in page.locator(P.CARD.selector).all_inner_texts()]


def find_card(
    page: Page,
    title: str,
    timeout_sec: float = DEFAULT_TIMEOUT_SEC,
    interval_sec: float = DEFAULT_INTERVAL_SEC,
) -> PWLocator:
    """
    .card を DOM 順に走査し、テキストに title を含む最初のカードを返す。
    タイトルは実行ごとに一意なので先勝ちでよい。
    """
    try:
        cards = wait_present(page, P.CARD, timeout_sec, interval_sec)
    except WaitTimeoutError as e:
        raise NotFoundError("post card", title) from e

    n = cards.count()
    for i in range(n):
        card = cards.nth(i)
        text = normalize_text(card.inner_text())
        if title in text:
            logger.debug("card #%d/%d matches %r", i, n, title)
            return card
    logger.debug("no card among %d matches %r", n, title)
    raise NotFoundError("post card", title)


def click_card_action(
    page: Page,
    title: str,
    action_text: str,
    timeout_sec: float = DEFAULT_TIMEOUT_SEC,
    interval_sec: float = DEFAULT_INTERVAL_SEC,
) -> ElementHandle:
    """
    カード内のボタンを押す。押したカードの handle を返す（再描画待ち用）。
    """
    card = find_card(page, title, timeout_sec, interval_sec)
    control = card.locator(by_text("button", action_text).selector)
    if control.count() < 1:
        raise NotFoundError(f"{action_text!r} button in post card", title)
    handle = card.element_handle(timeout=int(timeout_sec * 1000))
    logger.info("click %r on card %r", action_text, title)
    control.first.click(timeout=int(timeout_sec * 1000))
    return handle


def assert_card_present(
    page: Page,
    title: str,
    timeout_sec: float = DEFAULT_TIMEOUT_SEC,
    interval_sec: float = DEFAULT_INTERVAL_SEC,
) -> None:
    try:
        find_card(page, title, timeout_sec, interval_sec)
    except NotFoundError:
        observed = card_texts(page)
        raise AssertionError(
            f"post cards: expected one containing {title!r}, observed {clip(repr(observed))}"
        ) from None


def _listed(page: Page, title: str) -> List[str]:
    return [t for t in card_texts(page) if title in t]


def assert_card_absent(
    page: Page,
    title: str,
    timeout_sec: float = DEFAULT_TIMEOUT_SEC,
    interval_sec: float = DEFAULT_INTERVAL_SEC,
    hold_sec: float = 1.0,
) -> None:
    """
    含むカードが消えるまで poll し、その後 hold_sec の間いなくなったままであること。
    再描画途中の一時的な空一覧は「不在」とみなさない。
    """
    try:
        poll_until(lambda: not _listed(page, title), f"no post card contains {title!r}", timeout_sec, interval_sec)
    except WaitTimeoutError:
        raise AssertionError(
            f"post cards: expected none containing {title!r}, observed {clip(repr(_listed(page, title)))}"
        ) from None

    end = time.time() + hold_sec
    while time.time() < end:
        time.sleep(interval_sec)
        try:
            observed = _listed(page, title)
        except PlaywrightError as e:
            logger.debug("card list not readable yet: %s", e)
            continue
        if observed:
            raise AssertionError(
                f"post cards: expected none containing {title!r}, observed {clip(repr(observed))} "
                f"(listed again within {hold_sec:g}s)"
            )
