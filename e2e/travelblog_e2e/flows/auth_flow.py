# e2e/travelblog_e2e/flows/auth_flow.py
from __future__ import annotations

import logging
from typing import Optional

from travelblog_e2e.core.errors import WaitTimeoutError
from travelblog_e2e.core.steps import Steps
from travelblog_e2e.core.types import Scenario
from travelblog_e2e.core.unique import unique_email
from travelblog_e2e.core.url import HOME_PATH, LOGIN_PATH, SIGNUP_PATH
from travelblog_e2e.selectors import auth_selectors as A

logger = logging.getLogger(__name__)


def login(steps: Steps, email: Optional[str] = None, password: Optional[str] = None) -> None:
    """
    既知ユーザーでログインして index.php に着くまで待つ。
    requires_login のシナリオの前提条件としても使う。
    """
    s = steps.settings
    steps.goto(LOGIN_PATH)
    steps.type(A.EMAIL_INPUT, email if email is not None else s.user_email)
    steps.type(A.PASSWORD_INPUT, password if password is not None else s.user_password)
    steps.click(A.LOGIN_BUTTON)
    steps.wait_url(HOME_PATH)


def run_signup(sc: Scenario, steps: Steps) -> None:
    email = unique_email()
    logger.info("signup as %s", email)

    steps.goto(SIGNUP_PATH)
    steps.type(A.EMAIL_INPUT, email)
    steps.type(A.PASSWORD_INPUT, steps.settings.signup_password)
    steps.click(A.SIGNUP_BUTTON)

    steps.wait_url(LOGIN_PATH)
    steps.assert_page_contains(A.LOGIN_PAGE_MARKER)


def run_login(sc: Scenario, steps: Steps) -> None:
    login(steps)
    steps.assert_url_contains(HOME_PATH)


def run_login_invalid(sc: Scenario, steps: Steps) -> None:
    s = steps.settings
    error_text = sc.params.get("error_text", A.INVALID_CREDENTIALS_TEXT)

    steps.goto(LOGIN_PATH)
    steps.type(A.EMAIL_INPUT, s.invalid_email)
    steps.type(A.PASSWORD_INPUT, s.invalid_password)
    steps.click(A.LOGIN_BUTTON)

    steps.assert_element_text_contains(A.ERROR_MESSAGE, error_text)
    steps.assert_url_contains(LOGIN_PATH)


def run_login_empty(sc: Scenario, steps: Steps) -> None:
    steps.goto(LOGIN_PATH)
    steps.click(A.LOGIN_BUTTON)
    steps.assert_url_stays(LOGIN_PATH)


def run_logout(sc: Scenario, steps: Steps) -> None:
    steps.wait_url(HOME_PATH)
    steps.assert_page_contains(A.HOME_PAGE_MARKER)

    steps.click(A.LOGOUT_LINK)

    steps.wait_url(LOGIN_PATH)
    steps.assert_page_contains(A.LOGIN_PAGE_MARKER)


def run_logout_gate(sc: Scenario, steps: Steps) -> None:
    """
    ログアウト後に index.php を直接開くと login.php に戻されること。
    対象アプリが保証しているかは未確認（シナリオ側で xfail 扱い）。
    """
    run_logout(sc, steps)

    steps.goto(HOME_PATH)
    try:
        steps.wait_url(LOGIN_PATH)
    except WaitTimeoutError:
        raise AssertionError(
            f"home after logout: expected redirect to {LOGIN_PATH!r}, observed {steps.page.url!r}"
        ) from None
