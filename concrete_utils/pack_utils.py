"""Positional argument selection."""

from __future__ import annotations

from typing import Any


def nth_param(n: int, *args: Any) -> Any:
    """Return the ``n``-th (zero-based) of the remaining arguments."""
    if not 0 <= n < len(args):
        raise IndexError(f"parameter index {n} out of range for {len(args)} arguments")
    return args[n]