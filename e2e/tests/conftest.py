import logging

import pytest
from dotenv import load_dotenv

from travelblog_e2e.core.config import Settings, load_settings
from travelblog_e2e.flows.runner import ScenarioRunner, summarize

logger = logging.getLogger(__name__)


@pytest.fixture(scope="session", autouse=True)
def _load_env():
    load_dotenv()


@pytest.fixture(scope="session")
def settings() -> Settings:
    return load_settings(dotenv=False)


@pytest.fixture(scope="session")
def e2e_settings(settings):
    """
    実ブラウザで対象アプリを叩くシナリオ用。URL 未設定なら skip。
    """
    if not settings.base_url:
        pytest.skip("TRAVELBLOG_BASE_URL is not set")
    return settings


@pytest.fixture(scope="session")
def scenario_results():
    """
    実シナリオの結果を集めて、最後に一覧をログに出す。
    """
    results = []
    yield results
    if results:
        logger.info("scenario summary\n%s", summarize(results))


@pytest.fixture()
def runner(e2e_settings):
    """
    シナリオごとの set_up / tear_down は run() が行う。
    """
    r = ScenarioRunner(e2e_settings)
    yield r
    r.tear_down()


@pytest.fixture()
def fast_settings(tmp_path) -> Settings:
    """
    fakes を使う unit test 用。待ち時間を短くしておく。
    """
    return Settings(
        base_url="http://travelblog.test:3000/",
        wait_timeout_sec=0.2,
        poll_interval_sec=0.01,
        hold_sec=0.05,
        trace=False,
        artifact_dir=tmp_path / "artifacts",
    )
