"""Context managers that run a finalization callable when a scope ends."""

from __future__ import annotations

from collections.abc import Callable
from types import TracebackType
from typing import Any


def _check_callable(function: Any) -> None:
    if not callable(function):
        raise TypeError(f"expected a callable, got {type(function).__name__}")


class ScopeExit:
    """Run ``exit_function`` once when the scope ends, unless released.

    The callable runs when the ``with`` block exits or when :meth:`close`
    is called, whichever comes first. Ownership of the pending call can be
    handed to a new guard with :meth:`take`.
    """

    def __init__(self, exit_function: Callable[[], Any]) -> None:
        _check_callable(exit_function)
        self._exit_function = exit_function
        self._active = True

    @property
    def active(self) -> bool:
        """True while the exit function is still pending."""
        return self._active

    def release(self) -> None:
        """Cancel the pending call of the exit function."""
        self._active = False

    def take(self) -> ScopeExit:
        """Move the pending call into a new guard and deactivate this one."""
        moved = ScopeExit(self._exit_function)
        moved._active = self._active
        self._active = False
        return moved

    def close(self) -> None:
        """Run the exit function now if it is still pending."""
        if self._active:
            self._active = False
            self._exit_function()

    def __enter__(self) -> ScopeExit:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class ScopeGuard:
    """Unconditionally run ``exit_function`` when the ``with`` block exits."""

    def __init__(self, exit_function: Callable[[], Any]) -> None:
        _check_callable(exit_function)
        self._exit_function = exit_function

    def __enter__(self) -> ScopeGuard:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._exit_function()


class ExceptionScopeGuard:
    """Run ``handler`` only if the ``with`` block exits with an exception.

    The exception is never suppressed.
    """

    def __init__(self, handler: Callable[[], Any]) -> None:
        _check_callable(handler)
        self._handler = handler

    def __enter__(self) -> ExceptionScopeGuard:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if exc_type is not None:
            self._handler()