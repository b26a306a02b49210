# e2e/travelblog_e2e/flows/runner.py
from __future__ import annotations

import logging
import time
from datetime import datetime
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional

from playwright.sync_api import Page, TimeoutError as PlaywrightTimeoutError

from travelblog_e2e.core.artifacts import Artifacts
from travelblog_e2e.core.config import Settings
from travelblog_e2e.core.errors import NotFoundError, ScenarioConfigError, WaitTimeoutError
from travelblog_e2e.core.playwright_factory import BrowserSession, close_session, create_session
from travelblog_e2e.core.steps import Steps
from travelblog_e2e.core.types import Scenario, ScenarioResult
from travelblog_e2e.flows import auth_flow, post_flow

logger = logging.getLogger(__name__)

FlowFn = Callable[[Scenario, Steps], None]

FLOWS: Dict[str, FlowFn] = {
    "signup": auth_flow.run_signup,
    "login": auth_flow.run_login,
    "login_invalid": auth_flow.run_login_invalid,
    "login_empty": auth_flow.run_login_empty,
    "logout": auth_flow.run_logout,
    "logout_gate": auth_flow.run_logout_gate,
    "create_post": post_flow.run_create_post,
    "create_post_empty": post_flow.run_create_post_empty,
    "edit_post": post_flow.run_edit_post,
    "edit_post_cancel": post_flow.run_edit_post_cancel,
    "delete_post": post_flow.run_delete_post,
}


def run_scenario(sc: Scenario, page: Page, settings: Settings, artifacts: Artifacts) -> None:
    """
    シナリオ本体。失敗時はスクショ/HTMLを残してから例外をそのまま投げる。
    """
    flow = FLOWS.get(sc.flow)
    if flow is None:
        raise ScenarioConfigError(f"Unknown flow: {sc.flow}")

    steps = Steps(page, settings)
    try:
        if sc.requires_login:
            auth_flow.login(steps)
        flow(sc, steps)
    except Exception:
        artifacts.save_failure(page)
        raise


FAILURE_TYPES = (AssertionError, WaitTimeoutError, PlaywrightTimeoutError, NotFoundError)


def _error_kind(e: BaseException) -> str:
    if isinstance(e, (WaitTimeoutError, PlaywrightTimeoutError)):
        return "timeout"
    if isinstance(e, NotFoundError):
        return "not_found"
    if isinstance(e, AssertionError):
        return "assertion"
    return type(e).__name__


class ScenarioRunner:
    """
    シナリオを1件ずつ直列に実行する。
      - シナリオごとに set_up() で新しいブラウザ、終わったら必ず tear_down()
      - 1件の失敗は結果に記録し、次のシナリオは続行
      - ブラウザが起動できない場合（SessionStartError）は全体を止める
    """

    def __init__(
        self,
        settings: Settings,
        session_factory: Callable[[Settings], BrowserSession] = create_session,
        session_closer: Callable[..., None] = close_session,
    ) -> None:
        self.settings = settings
        self._session_factory = session_factory
        self._session_closer = session_closer
        self.session: Optional[BrowserSession] = None
        self._trace_path: Optional[Path] = None

    def set_up(self, scenario_id: str = "session") -> BrowserSession:
        self._trace_path = None
        if self.settings.trace:
            ts = datetime.now().strftime("%Y%m%d_%H%M%S")
            self._trace_path = self._artifacts(scenario_id).path(f"trace_{ts}.zip")
        self.session = self._session_factory(self.settings)
        return self.session

    def tear_down(self) -> None:
        # set_up 途中失敗・二重呼び出しでも安全
        session, self.session = self.session, None
        if session is None:
            return
        self._session_closer(session, self._trace_path)

    def _artifacts(self, scenario_id: str) -> Artifacts:
        return Artifacts(base_dir=self.settings.artifact_dir, scenario_id=scenario_id)

    def run(self, sc: Scenario) -> ScenarioResult:
        logger.info("scenario %s (%s) start", sc.id, sc.name)
        started = time.monotonic()
        try:
            session = self.set_up(sc.id)
            try:
                run_scenario(sc, session.page, self.settings, self._artifacts(sc.id))
            except Exception as e:
                result = ScenarioResult(
                    scenario_id=sc.id,
                    name=sc.name,
                    outcome="failed" if isinstance(e, FAILURE_TYPES) else "error",
                    error_kind=_error_kind(e),
                    message=str(e),
                    duration_sec=time.monotonic() - started,
                )
                logger.error("scenario %s %s: %s", sc.id, result.outcome, e)
                return result
        finally:
            self.tear_down()

        logger.info("scenario %s passed", sc.id)
        return ScenarioResult(
            scenario_id=sc.id,
            name=sc.name,
            outcome="passed",
            duration_sec=time.monotonic() - started,
        )

    def run_all(self, scenarios: Iterable[Scenario], only: Optional[Iterable[str]] = None) -> List[ScenarioResult]:
        selected = list(scenarios)
        if only is not None:
            wanted = set(only)
            unknown = wanted - {sc.id for sc in selected}
            if unknown:
                raise ScenarioConfigError(f"Unknown scenario id(s): {sorted(unknown)}")
            selected = [sc for sc in selected if sc.id in wanted]

        return [self.run(sc) for sc in selected]


def assert_scenario_passed(result: ScenarioResult) -> None:
    if not result.passed:
        raise AssertionError(
            f"Scenario {result.scenario_id} {result.outcome} [{result.error_kind}]: {result.message}"
        )


def summarize(results: Iterable[ScenarioResult]) -> str:
    results = list(results)
    lines = []
    for r in results:
        line = f"{r.outcome.upper():7} {r.scenario_id} ({r.duration_sec:.1f}s)"
        if not r.passed:
            line += f" [{r.error_kind}] {r.message}"
        lines.append(line)
    passed = sum(1 for r in results if r.passed)
    lines.append(f"{passed}/{len(results)} passed")
    return "\n".join(lines)
