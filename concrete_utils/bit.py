"""Byte order reversal and endian-aware integer loading and storing."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from enum import Enum

_SUPPORTED_WIDTHS = frozenset({1, 2, 4, 8})


class Endian(Enum):
    """Byte order of a serialized integer."""

    BIG = "big"
    LITTLE = "little"
    NATIVE = sys.byteorder


def _check_width(width: int) -> None:
    if width not in _SUPPORTED_WIDTHS:
        raise ValueError(f"unsupported integer width: {width} bytes")


def endian_store(value: int, width: int, order: Endian) -> bytes:
    """Serialize ``value`` into ``width`` bytes in the given byte order.

    Negative values are stored in two's complement.
    """
    _check_width(width)
    return value.to_bytes(width, Endian(order).value, signed=value < 0)


def endian_load(data: Iterable[int], order: Endian, signed: bool = False) -> int:
    """Deserialize an integer from bytes stored in the given byte order."""
    raw = bytes(data)
    _check_width(len(raw))
    return int.from_bytes(raw, Endian(order).value, signed=signed)


def byteswap(value: int, width: int) -> int:
    """Reverse the byte order of a ``width``-byte integer.

    A negative input is treated as two's complement and the result is
    interpreted as signed as well.
    """
    signed = value < 0
    raw = endian_store(value, width, Endian.BIG)
    return endian_load(raw, Endian.LITTLE, signed=signed)