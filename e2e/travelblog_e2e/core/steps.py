# e2e/travelblog_e2e/core/steps.py
from __future__ import annotations

import logging

from playwright.sync_api import ElementHandle, Locator as PWLocator, Page

from travelblog_e2e.core import cards, waits
from travelblog_e2e.core.config import Settings
from travelblog_e2e.core.expect import assert_contains
from travelblog_e2e.core.locators import Locator
from travelblog_e2e.core.url import app_url

logger = logging.getLogger(__name__)


class Steps:
    """
    navigate / wait / type / click / assert の薄いラッパー。
    ページ状態に依存する操作はすべて条件待ち（poll）してから行う。
    """

    def __init__(self, page: Page, settings: Settings) -> None:
        self.page = page
        self.settings = settings

    @property
    def timeout_sec(self) -> float:
        return self.settings.wait_timeout_sec

    @property
    def interval_sec(self) -> float:
        return self.settings.poll_interval_sec

    # --- navigate

    def goto(self, path: str) -> None:
        url = app_url(self.settings.base_url or "", path)
        logger.info("goto %s", url)
        self.page.goto(url)

    def back(self) -> None:
        logger.info("navigate back from %s", self.page.url)
        self.page.go_back()

    # --- wait

    def wait_visible(self, loc: Locator) -> PWLocator:
        return waits.wait_visible(self.page, loc, self.timeout_sec, self.interval_sec)

    def wait_present(self, loc: Locator) -> PWLocator:
        return waits.wait_present(self.page, loc, self.timeout_sec, self.interval_sec)

    def wait_url(self, fragment: str) -> None:
        waits.wait_url_contains(self.page, fragment, self.timeout_sec, self.interval_sec)

    def wait_detached(self, handle: ElementHandle, what: str) -> None:
        waits.wait_detached(handle, what, self.timeout_sec, self.interval_sec)

    def wait_loaded(self) -> None:
        self.page.wait_for_load_state(timeout=self.settings.timeout_ms)

    # --- input

    def type(self, loc: Locator, text: str) -> None:
        # fill は既存値をクリアしてから入力する
        self.wait_visible(loc).fill(text)

    def click(self, loc: Locator) -> None:
        self.wait_visible(loc).click(timeout=self.settings.timeout_ms)

    # --- assert

    def assert_page_contains(self, expected: str) -> None:
        assert_contains(self.page.content(), expected, "page content")

    def assert_url_contains(self, fragment: str) -> None:
        assert_contains(self.page.url, fragment, "current URL")

    def assert_url_stays(self, fragment: str) -> None:
        waits.assert_url_stays(self.page, fragment, self.settings.hold_sec, self.interval_sec)

    def assert_element_text_contains(self, loc: Locator, expected: str) -> None:
        el = self.wait_visible(loc)
        assert_contains(el.inner_text(), expected, f"text of {loc}")

    # --- cards (index.php の投稿一覧)

    def click_card_action(self, title: str, action_text: str) -> ElementHandle:
        return cards.click_card_action(self.page, title, action_text, self.timeout_sec, self.interval_sec)

    def assert_card_present(self, title: str) -> None:
        cards.assert_card_present(self.page, title, self.timeout_sec, self.interval_sec)

    def assert_card_absent(self, title: str) -> None:
        cards.assert_card_absent(self.page, title, self.timeout_sec, self.interval_sec, self.settings.hold_sec)
