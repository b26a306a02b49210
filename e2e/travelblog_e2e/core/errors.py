from __future__ import annotations


class WaitTimeoutError(TimeoutError):
    """待機条件が timeout 内に満たされなかった。"""

    def __init__(self, condition: str, timeout_sec: float):
        self.condition = condition
        self.timeout_sec = timeout_sec
        super().__init__(f"Condition not met within {timeout_sec:g}s: {condition}")


class NotFoundError(LookupError):
    """カードやボタンなど、あるはずの要素が見つからない。"""

    def __init__(self, what: str, target: str):
        self.what = what
        self.target = target
        super().__init__(f"{what} not found: {target!r}")


class SessionStartError(RuntimeError):
    pass


class ScenarioConfigError(ValueError):
    pass
