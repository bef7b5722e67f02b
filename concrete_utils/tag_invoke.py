"""Customization points dispatched on the types of their arguments."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

_F = TypeVar("_F", bound=Callable[..., Any])


class CustomizationPoint:
    """A named operation whose implementations are registered per type.

    Calling the customization point dispatches to the implementation
    registered for the first argument whose type (or a base of it) has one.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._implementations: dict[type, Callable[..., Any]] = {}

    def register(self, cls: type) -> Callable[[_F], _F]:
        """Return a decorator registering an implementation for ``cls``."""
        if not isinstance(cls, type):
            raise TypeError(f"expected a class, got {type(cls).__name__}")

        def decorator(function: _F) -> _F:
            self._implementations[cls] = function
            return function

        return decorator

    def _find(self, args: tuple[Any, ...]) -> Callable[..., Any] | None:
        for argument in args:
            for klass in type(argument).__mro__:
                implementation = self._implementations.get(klass)
                if implementation is not None:
                    return implementation
        return None

    def __call__(self, *args: Any) -> Any:
        return tag_invoke(self, *args)

    def __repr__(self) -> str:
        return f"CustomizationPoint({self.name!r})"


def _resolve(tag: Any, args: tuple[Any, ...]) -> Callable[..., Any] | None:
    if isinstance(tag, CustomizationPoint):
        return tag._find(args)
    return None


def tag_invoke(tag: Any, *args: Any) -> Any:
    """Invoke the implementation of ``tag`` selected for ``args``."""
    implementation = _resolve(tag, args)
    if implementation is None:
        types = ", ".join(type(argument).__name__ for argument in args)
        raise TypeError(f"no implementation of {tag!r} for arguments ({types})")
    return implementation(*args)


def tag_invocable(tag: Any, *args: Any) -> bool:
    """Return True if ``tag_invoke(tag, *args)`` has an implementation."""
    return _resolve(tag, args) is not None