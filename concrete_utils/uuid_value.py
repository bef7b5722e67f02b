"""A 128-bit UUID value with parsing, formatting, ordering and hashing."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from functools import total_ordering

_U64_MASK = (1 << 64) - 1

STATE_SIZE = 16
FORMATTED_SIZE = 36

_PRIME64_1 = 0x9E3779B185EBCA87
_PRIME64_2 = 0xC2B2AE3D27D4EB4F
_PRIME64_3 = 0x165667B19E3779F9
_PRIME64_4 = 0x85EBCA77C2B2AE63
_PRIME64_5 = 0x27D4EB2F165667C5

# Offsets of the hex digits within the 36 character textual form.
_HIGH_DIGITS = (0, 1, 2, 3, 4, 5, 6, 7, 9, 10, 11, 12, 14, 15, 16, 17)
_LOW_DIGITS = (19, 20, 21, 22, 24, 25, 26, 27, 28, 29, 30, 31, 32, 33, 34, 35)

# Byte indices after which a hyphen is written.
_HYPHEN_AFTER = frozenset({3, 5, 7, 9})


class UuidVariant(Enum):
    """Layout variant encoded in the top bits of octet 8."""

    NCS = "ncs"
    RFC = "rfc"
    MICROSOFT = "microsoft"
    FUTURE = "future"


class UuidVersion(Enum):
    """Version encoded in the high nibble of octet 6."""

    UNKNOWN = -1
    NONE = 0
    TIME_BASED_GREGORIAN = 1
    DCE_SECURITY = 2
    NAME_BASED_MD5 = 3
    RANDOM_NUMBER_BASED = 4
    NAME_BASED_SHA1 = 5
    TIME_BASED_GREGORIAN_ORDERED = 6
    TIME_BASED_UNIX = 7
    VENDOR_SPECIFIC = 8


def _hex_digit(char: str) -> int:
    code = ord(char)
    maybe_decimal = code - ord("0")
    if 0 <= maybe_decimal <= 9:
        return maybe_decimal
    maybe_alpha = (code | 0x20) - ord("a")
    if 0 <= maybe_alpha <= 5:
        return 0xA + maybe_alpha
    raise ValueError(f"illegal hex digit: {char!r}")


def _digits_value(text: str, offsets: tuple[int, ...]) -> int:
    value = 0
    for offset in offsets:
        value = (value << 4) | _hex_digit(text[offset])
    return value


def _xxhash64_round(acc: int, lane: int) -> int:
    acc = (acc + lane * _PRIME64_2) & _U64_MASK
    acc = (acc << 31) & _U64_MASK
    return (acc * _PRIME64_1) & _U64_MASK


@total_ordering
class Uuid:
    """A UUID stored as two unsigned 64-bit halves in canonical order.

    ``high`` holds canonical octets 0-7 and ``low`` octets 8-15, both read
    big-endian. Values order by ``high`` then ``low``.
    """

    __slots__ = ("_high", "_low")

    state_size = STATE_SIZE

    def __init__(self, high: int = 0, low: int = 0) -> None:
        for name, half in (("high", high), ("low", low)):
            if not 0 <= half <= _U64_MASK:
                raise ValueError(f"{name} must fit into an unsigned 64-bit integer")
        self._high = high
        self._low = low

    @property
    def high(self) -> int:
        return self._high

    @property
    def low(self) -> int:
        return self._low

    @classmethod
    def parse(cls, text: str) -> Uuid:
        """Parse the 36 character form, optionally wrapped in braces."""
        if len(text) not in (FORMATTED_SIZE, FORMATTED_SIZE + 2):
            raise ValueError("couldn't parse uuid string due to illegal length")
        if len(text) == FORMATTED_SIZE + 2:
            if text[0] != "{" or text[-1] != "}":
                raise ValueError(
                    "couldn't parse the alternate uuid form due to illegal braces"
                )
            text = text[1:-1]
        return cls(_digits_value(text, _HIGH_DIGITS), _digits_value(text, _LOW_DIGITS))

    @classmethod
    def from_canonical(cls, data: bytes | bytearray | Iterable[int]) -> Uuid:
        """Build a UUID from its 16 canonical (network order) bytes."""
        raw = bytes(data)
        if len(raw) != STATE_SIZE:
            raise ValueError(f"expected {STATE_SIZE} bytes, got {len(raw)}")
        return cls(int.from_bytes(raw[:8], "big"), int.from_bytes(raw[8:], "big"))

    def canonical(self) -> bytes:
        """Return the 16 canonical (network order) bytes."""
        return self._high.to_bytes(8, "big") + self._low.to_bytes(8, "big")

    def __bytes__(self) -> bytes:
        return self.canonical()

    def is_nil(self) -> bool:
        """Return True if every bit is zero."""
        return self._high == 0 and self._low == 0

    def is_max(self) -> bool:
        """Return True if every bit is one."""
        return self._high == _U64_MASK and self._low == _U64_MASK

    def variant(self) -> UuidVariant:
        """Return the variant encoded in the value."""
        bits = self._low >> 61
        if bits < 0b100:
            return UuidVariant.NCS
        if bits < 0b110:
            return UuidVariant.RFC
        return UuidVariant.MICROSOFT if bits == 0b110 else UuidVariant.FUTURE

    def version(self) -> UuidVersion:
        """Return the version encoded in the value."""
        nibble = (self._high >> 12) & 0xF
        if nibble <= UuidVersion.VENDOR_SPECIFIC.value:
            return UuidVersion(nibble)
        return UuidVersion.UNKNOWN

    def __format__(self, spec: str) -> str:
        """Format with an optional ``#`` (braces) followed by ``x`` or ``X``."""
        rest = spec
        alternate = False
        upper = False
        if rest.startswith("#"):
            alternate = True
            rest = rest[1:]
        if rest.startswith("X"):
            upper = True
            rest = rest[1:]
        elif rest.startswith("x"):
            rest = rest[1:]
        if rest:
            raise ValueError(f"invalid format specifier for uuid: {spec!r}")
        return format_uuid(self, upper, alternate)

    def __str__(self) -> str:
        return format_uuid(self)

    def __repr__(self) -> str:
        return f"Uuid.parse({format_uuid(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Uuid):
            return NotImplemented
        return (self._high, self._low) == (other._high, other._low)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Uuid):
            return NotImplemented
        return (self._high, self._low) < (other._high, other._low)

    def __hash__(self) -> int:
        """An xxHash64-derived 64-bit hash of both halves."""
        acc = (_PRIME64_5 + 2 * 8) & _U64_MASK
        for lane in (self._high, self._low):
            acc ^= _xxhash64_round(0, lane)
            acc = ((acc << 27) & _U64_MASK) * _PRIME64_1 & _U64_MASK
            acc = (acc + _PRIME64_4) & _U64_MASK

        acc ^= acc >> 33
        acc = (acc * _PRIME64_2) & _U64_MASK
        acc ^= acc >> 29
        acc = (acc * _PRIME64_3) & _U64_MASK
        acc ^= acc >> 32
        return acc


def format_uuid(value: Uuid, upper: bool = False, alternate: bool = False) -> str:
    """Render ``value`` in the hyphenated hex form.

    ``upper`` selects upper case digits, ``alternate`` wraps the text in braces.
    """
    pieces: list[str] = []
    if alternate:
        pieces.append("{")
    hex_format = "02X" if upper else "02x"
    for index, octet in enumerate(value.canonical()):
        pieces.append(format(octet, hex_format))
        if index in _HYPHEN_AFTER:
            pieces.append("-")
    if alternate:
        pieces.append("}")
    return "".join(pieces)