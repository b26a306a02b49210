from dataclasses import dataclass, field
from typing import Literal, Optional, Dict, Any

FlowName = Literal[
    "signup",
    "login",
    "login_invalid",
    "login_empty",
    "create_post",
    "create_post_empty",
    "edit_post",
    "edit_post_cancel",
    "delete_post",
    "logout",
    "logout_gate",
]
Outcome = Literal["passed", "failed", "error"]


@dataclass(frozen=True)
class Scenario:
    id: str
    name: str
    flow: FlowName
    requires_login: bool = False
    params: Dict[str, Any] = field(default_factory=dict)
    xfail: Optional[str] = None


@dataclass(frozen=True)
class ScenarioResult:
    scenario_id: str
    name: str
    outcome: Outcome
    error_kind: Optional[str] = None
    message: Optional[str] = None
    duration_sec: float = 0.0

    @property
    def passed(self) -> bool:
        return self.outcome == "passed"
