import pytest

from travelblog_e2e.core.config import load_settings
from travelblog_e2e.core.scenario_loader import load_scenarios
from travelblog_e2e.flows.runner import assert_scenario_passed

SCENARIOS = load_scenarios(load_settings().scenario_file)


def _param(sc):
    marks = [pytest.mark.e2e]
    if sc.xfail:
        marks.append(pytest.mark.xfail(reason=sc.xfail, strict=False))
    return pytest.param(sc, id=sc.id, marks=marks)


@pytest.mark.parametrize("sc", [_param(sc) for sc in SCENARIOS])
def test_scenario(sc, runner, scenario_results):
    result = runner.run(sc)
    scenario_results.append(result)
    assert_scenario_passed(result)
