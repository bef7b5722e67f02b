"""Integer arithmetic helpers: ceiling division, rounding and modulo."""

from __future__ import annotations

_U64_MODULUS = 1 << 64


def _require_non_negative(**values: int) -> None:
    for name, value in values.items():
        if value < 0:
            raise ValueError(f"{name} must be non-negative, got {value}")


def _require_power_of_two(name: str, value: int) -> None:
    if value <= 0 or value & (value - 1):
        raise ValueError(f"{name} must be a positive power of two, got {value}")


def div_ceil(dividend: int, divisor: int) -> int:
    """Divide and round the quotient towards positive infinity."""
    return -(-dividend // divisor)


def round_up(value: int, multiple: int) -> int:
    """Round ``value`` up to the next multiple of ``multiple``."""
    return div_ceil(value, multiple) * multiple


def round_up_p2(value: int, power_of_2: int) -> int:
    """Round a non-negative ``value`` up to a multiple of a power of two."""
    _require_non_negative(value=value)
    _require_power_of_two("power_of_2", power_of_2)
    return (value + power_of_2 - 1) & ~(power_of_2 - 1)


def round_down(value: int, multiple: int) -> int:
    """Round a non-negative ``value`` down to a multiple of ``multiple``."""
    _require_non_negative(value=value, multiple=multiple)
    return (value // multiple) * multiple


def round_down_p2(value: int, power_of_2: int) -> int:
    """Round a non-negative ``value`` down to a multiple of a power of two."""
    _require_non_negative(value=value)
    _require_power_of_two("power_of_2", power_of_2)
    return value & ~(power_of_2 - 1)


def mod(k: int, n: int) -> int:
    """Modulo whose truncated remainder is shifted by ``n`` when negative.

    For a positive ``n`` the result always lies in ``[0, n)``.
    """
    if n == 0:
        raise ZeroDivisionError("integer modulo by zero")
    remainder = abs(k) % abs(n)
    if k < 0:
        remainder = -remainder
    if remainder < 0:
        remainder += n
    return remainder


def upow(x: int, e: int) -> int:
    """Raise ``x`` to the power ``e`` with unsigned 64-bit wrap-around."""
    _require_non_negative(x=x, e=e)
    return pow(x % _U64_MODULUS, e, _U64_MODULUS)