import pytest

from hyprutils.scopeguard import ScopeGuard


def test_runs_function_on_exit():
    calls = []
    with ScopeGuard(lambda: calls.append("done")):
        assert calls == []
    assert calls == ["done"]


def test_runs_function_on_exception_and_propagates():
    calls = []
    with pytest.raises(RuntimeError):
        with ScopeGuard(lambda: calls.append("done")):
            raise RuntimeError("boom")
    assert calls == ["done"]


def test_none_function_does_not_swallow_exceptions():
    guard = ScopeGuard(None)
    error = KeyError("missing")
    assert not guard.__exit__(KeyError, error, None)
    with pytest.raises(KeyError) as excinfo:
        with ScopeGuard(None):
            raise error
    assert excinfo.value is error


def test_enter_returns_guard():
    guard = ScopeGuard(lambda: None)
    with guard as entered:
        assert entered is guard