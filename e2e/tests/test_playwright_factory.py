import dataclasses

import pytest

from travelblog_e2e.core import playwright_factory as pf
from travelblog_e2e.core.errors import SessionStartError


class Recorder:
    def __init__(self):
        self.calls = []


class FakeTracing:
    def __init__(self, rec):
        self.rec = rec

    def start(self, **kwargs):
        self.rec.calls.append("tracing.start")

    def stop(self, path=None):
        self.rec.calls.append(("tracing.stop", path))


class FakeContext:
    def __init__(self, rec):
        self.rec = rec
        self.tracing = FakeTracing(rec)

    def set_default_timeout(self, ms):
        self.rec.calls.append(("timeout", ms))

    def set_default_navigation_timeout(self, ms):
        self.rec.calls.append(("nav_timeout", ms))

    def new_page(self):
        return "page"

    def close(self):
        self.rec.calls.append("context.close")


class FakeBrowser:
    def __init__(self, rec):
        self.rec = rec

    def new_context(self, **kwargs):
        self.rec.calls.append(("new_context", kwargs))
        return FakeContext(self.rec)

    def close(self):
        self.rec.calls.append("browser.close")


class FakeChromium:
    def __init__(self, rec, fail):
        self.rec = rec
        self.fail = fail

    def launch(self, **kwargs):
        self.rec.calls.append(("launch", kwargs))
        if self.fail:
            raise RuntimeError("Executable doesn't exist")
        return FakeBrowser(self.rec)


class FakePlaywright:
    def __init__(self, rec, fail):
        self.rec = rec
        self.chromium = FakeChromium(rec, fail)

    def stop(self):
        self.rec.calls.append("playwright.stop")


def _install(monkeypatch, fail=False):
    rec = Recorder()

    class Starter:
        def start(self):
            return FakePlaywright(rec, fail)

    monkeypatch.setattr(pf, "sync_playwright", lambda: Starter())
    return rec


def test_create_session_uses_fixed_options(monkeypatch, fast_settings):
    rec = _install(monkeypatch)
    session = pf.create_session(fast_settings)

    assert session.page == "page"
    launch = dict(rec.calls)["launch"]
    assert launch["headless"] is True
    assert launch["args"] == ["--no-sandbox", "--disable-dev-shm-usage"]
    assert "channel" not in launch
    assert dict(rec.calls)["new_context"] == {"viewport": {"width": 1920, "height": 1080}}
    assert ("timeout", 200) in rec.calls
    assert "tracing.start" not in rec.calls


def test_create_session_failure_cleans_up(monkeypatch, fast_settings):
    rec = _install(monkeypatch, fail=True)
    with pytest.raises(SessionStartError, match="Executable doesn't exist"):
        pf.create_session(fast_settings)
    assert rec.calls[-1] == "playwright.stop"


def test_close_session_is_null_safe():
    pf.close_session(None)
    pf.close_session(pf.BrowserSession())


def test_close_session_saves_trace_and_closes_everything(monkeypatch, fast_settings, tmp_path):
    rec = _install(monkeypatch)
    settings = dataclasses.replace(fast_settings, trace=True)
    session = pf.create_session(settings)
    trace = tmp_path / "trace.zip"

    pf.close_session(session, trace)
    pf.close_session(session, trace)

    assert rec.calls[-4:] == [("tracing.stop", str(trace)), "context.close", "browser.close", "playwright.stop"]
    assert session.playwright is None and session.browser is None and session.context is None
