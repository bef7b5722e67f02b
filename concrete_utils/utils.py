"""Small general helpers."""

from __future__ import annotations

from enum import Enum
from typing import Any, NoReturn


def unreachable() -> NoReturn:
    """Signal that a code path believed impossible was reached."""
    raise AssertionError("unreachable code reached")


def to_underlying(value: Enum) -> Any:
    """Return the underlying value of an enumeration member."""
    if not isinstance(value, Enum):
        raise TypeError(f"expected an enum member, got {type(value).__name__}")
    return value.value


def _byte_value(value: int | bytes | bytearray) -> int:
    if isinstance(value, (bytes, bytearray)):
        if len(value) != 1:
            raise ValueError("expected exactly one byte")
        return value[0]
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value}")
    return value


def is_null_byte(value: int | bytes | bytearray) -> bool:
    """Return True if the byte is zero."""
    return _byte_value(value) == 0


def is_non_null_byte(value: int | bytes | bytearray) -> bool:
    """Return True if the byte is not zero."""
    return _byte_value(value) != 0