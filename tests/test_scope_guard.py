import pytest

from concrete_utils.scope_guard import ExceptionScopeGuard, ScopeExit, ScopeGuard


class Counter:
    def __init__(self):
        self.calls = 0

    def __call__(self):
        self.calls += 1


def test_scope_exit_runs_function_once_on_exit():
    counter = Counter()
    with ScopeExit(counter):
        assert counter.calls == 0
    assert counter.calls == 1


def test_scope_exit_accepts_a_lambda():
    called = []
    with ScopeExit(lambda: called.append(True)):
        pass
    assert called == [True]


def test_scope_exit_release_cancels_execution():
    counter = Counter()
    with ScopeExit(counter) as subject:
        subject.release()
        assert subject.active is False
    assert counter.calls == 0


def test_scope_exit_can_be_moved_and_still_executes_once():
    counter = Counter()
    subject1 = ScopeExit(counter)
    with subject1.take() as subject2:
        assert subject1.active is False
        assert subject2.active is True
    subject1.close()
    assert counter.calls == 1


def test_scope_exit_take_of_released_guard_stays_released():
    counter = Counter()
    subject = ScopeExit(counter)
    subject.release()
    moved = subject.take()
    moved.close()
    assert counter.calls == 0


def test_scope_exit_close_is_idempotent():
    counter = Counter()
    subject = ScopeExit(counter)
    subject.close()
    subject.close()
    with subject:
        pass
    assert counter.calls == 1


def test_scope_exit_runs_on_exception_and_propagates():
    counter = Counter()
    with pytest.raises(RuntimeError):
        with ScopeExit(counter):
            raise RuntimeError("boom")
    assert counter.calls == 1


def test_scope_exit_rejects_non_callable():
    with pytest.raises(TypeError):
        ScopeExit(42)


def test_scope_guard_always_runs():
    counter = Counter()
    with ScopeGuard(counter):
        pass
    with pytest.raises(ValueError):
        with ScopeGuard(counter):
            raise ValueError("fail")
    assert counter.calls == 2


def test_scope_guard_rejects_non_callable():
    with pytest.raises(TypeError):
        ScopeGuard(None)


def test_exception_scope_guard_runs_only_on_exception():
    counter = Counter()
    with ExceptionScopeGuard(counter):
        pass
    assert counter.calls == 0
    with pytest.raises(KeyError):
        with ExceptionScopeGuard(counter):
            raise KeyError("missing")
    assert counter.calls == 1


def test_exception_scope_guard_rejects_non_callable():
    with pytest.raises(TypeError):
        ExceptionScopeGuard("not callable")