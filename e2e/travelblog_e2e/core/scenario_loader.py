from __future__ import annotations

from pathlib import Path
from typing import List, Any, Dict, get_args

import yaml

from .errors import ScenarioConfigError
from .types import FlowName, Scenario

KNOWN_FLOWS = frozenset(get_args(FlowName))


def load_scenarios(path: str | Path) -> List[Scenario]:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Scenario file not found: {p.resolve()}")

    raw = yaml.safe_load(p.read_text(encoding="utf-8"))
    if not isinstance(raw, list):
        raise ScenarioConfigError("scenarios.yaml must be a list")

    out: List[Scenario] = []
    seen = set()
    for row in raw:
        if not isinstance(row, dict):
            raise ScenarioConfigError("Each scenario must be a dict")
        sc = _to_scenario(row)
        if sc.id in seen:
            raise ScenarioConfigError(f"Duplicate scenario id: {sc.id}")
        seen.add(sc.id)
        out.append(sc)
    return out


def _to_scenario(d: Dict[str, Any]) -> Scenario:
    required = ["id", "name", "flow"]
    for k in required:
        if k not in d:
            raise ScenarioConfigError(f"Missing key '{k}' in scenario: {d}")

    flow = str(d["flow"])
    if flow not in KNOWN_FLOWS:
        raise ScenarioConfigError(f"Unknown flow '{flow}' in scenario: {d.get('id')}")

    params = d.get("params")
    if params is None:
        params = {}
    if not isinstance(params, dict):
        raise ScenarioConfigError(f"params must be dict: {d.get('id')}")

    xfail = d.get("xfail")

    return Scenario(
        id=str(d["id"]),
        name=str(d["name"]),
        flow=flow,
        requires_login=bool(d.get("requires_login", False)),
        params=params,
        xfail=str(xfail) if xfail else None,
    )
