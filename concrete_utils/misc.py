"""Helpers for building fixed-size byte arrays and sequences."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any


def make_byte_array(
    size: int, values: Iterable[int], default: int | None = None
) -> bytes:
    """Build ``size`` bytes from ``values``, each truncated to eight bits.

    Without ``default`` exactly ``size`` values are required; with it the
    remaining positions are filled with ``default``.
    """
    items = [value & 0xFF for value in values]
    if len(items) > size:
        raise ValueError(f"more than {size} array values have been specified")
    if len(items) < size:
        if default is None:
            raise ValueError(
                f"less than {size} array values have been specified; "
                "pass a default value if this is intended"
            )
        items.extend([default & 0xFF] * (size - len(items)))
    return bytes(items)


def sequence_init(
    init_fn: Callable[..., Any], length: int, *args: Any, count: int | None = None
) -> list[Any]:
    """Build a list of ``length`` items where item ``i`` is ``init_fn(*args, i)``.

    If ``count`` is given only the first ``count`` items are computed and
    the rest are zero.
    """
    if count is None:
        count = length
    if not 0 <= count <= length:
        raise ValueError(f"count must lie within [0, {length}], got {count}")
    return [init_fn(*args, index) for index in range(count)] + [0] * (length - count)