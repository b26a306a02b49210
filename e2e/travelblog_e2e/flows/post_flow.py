# e2e/travelblog_e2e/flows/post_flow.py
from __future__ import annotations

import logging
from typing import Any, Dict

from travelblog_e2e.core.steps import Steps
from travelblog_e2e.core.types import Scenario
from travelblog_e2e.core.unique import unique_title
from travelblog_e2e.core.url import ADD_POST_PATH, HOME_PATH
from travelblog_e2e.selectors import post_selectors as P

logger = logging.getLogger(__name__)

DEFAULT_IMAGE_URL = "https://i.pinimg.com/564x/b5/51/48/b55148745359e070a098137fee59e3a2.jpg"


def _get_params(sc: Scenario) -> Dict[str, Any]:
    return sc.params if isinstance(sc.params, dict) else {}


def create_post(steps: Steps, title: str, image_url: str, content: str) -> None:
    logger.info("create post %r", title)
    steps.goto(ADD_POST_PATH)
    steps.type(P.TITLE_INPUT, title)
    steps.type(P.IMAGE_URL_INPUT, image_url)
    steps.type(P.CONTENT_INPUT, content)
    steps.click(P.POST_BLOG_BUTTON)
    steps.wait_url(HOME_PATH)


def _create_from_params(sc: Scenario, steps: Steps) -> str:
    params = _get_params(sc)
    title = unique_title(params.get("title", "Test Post"))
    create_post(
        steps,
        title,
        params.get("image_url", DEFAULT_IMAGE_URL),
        params.get("content", "Automated post content."),
    )
    return title


def run_create_post(sc: Scenario, steps: Steps) -> None:
    title = _create_from_params(sc, steps)
    steps.assert_page_contains(title)
    steps.assert_card_present(title)


def run_create_post_empty(sc: Scenario, steps: Steps) -> None:
    steps.goto(ADD_POST_PATH)
    steps.click(P.POST_BLOG_BUTTON)
    # 必須項目が空なら遷移しない
    steps.assert_url_stays(ADD_POST_PATH)


def run_edit_post(sc: Scenario, steps: Steps) -> None:
    params = _get_params(sc)
    title = _create_from_params(sc, steps)
    updated_title = unique_title(params.get("updated_title", "Edited Post"))

    steps.click_card_action(title, P.EDIT_ACTION_TEXT)

    steps.type(P.TITLE_INPUT, updated_title)
    steps.type(P.CONTENT_INPUT, params.get("updated_content", "Updated content after editing."))
    steps.click(P.UPDATE_POST_BUTTON)

    steps.wait_url(HOME_PATH)
    steps.assert_page_contains(updated_title)


def run_edit_post_cancel(sc: Scenario, steps: Steps) -> None:
    params = _get_params(sc)
    title = _create_from_params(sc, steps)
    updated_title = unique_title(params.get("updated_title", "Updated Title"))

    steps.click_card_action(title, P.EDIT_ACTION_TEXT)

    # 入力だけして保存しない
    steps.type(P.TITLE_INPUT, updated_title)
    steps.back()

    steps.wait_present(P.CARD)
    steps.assert_card_present(title)
    steps.assert_card_absent(updated_title)


def run_delete_post(sc: Scenario, steps: Steps) -> None:
    title = _create_from_params(sc, steps)

    # confirm() を出す実装でも削除を通す
    steps.page.once("dialog", lambda dialog: dialog.accept())
    clicked = steps.click_card_action(title, P.DELETE_ACTION_TEXT)

    # 一覧の再描画（押したカードの破棄）とロード完了を待ってから判定
    steps.wait_detached(clicked, f"deleted post card {title!r}")
    steps.wait_loaded()
    steps.wait_present(P.LIST_CONTAINER)
    steps.assert_card_absent(title)
