"""Generation of random (version 4) UUIDs from a pluggable random engine."""

from __future__ import annotations

import random
from collections.abc import Callable
from typing import Any, Union

from .uuid_value import Uuid

_U64_MASK = (1 << 64) - 1
_PARTS_PER_UUID = 2

_VERSION_CLEAR_MASK = 0xFFFF_FFFF_FFFF_0FFF
_VERSION_4_BITS = 0x0000_0000_0000_4000
_VARIANT_CLEAR_MASK = 0x3FFF_FFFF_FFFF_FFFF
_VARIANT_RFC_BITS = 0x8000_0000_0000_0000

Engine = Union[random.Random, Callable[[], int]]


class RandomUuidV4Generator:
    """Produces RFC variant, version 4 UUIDs from 64-bit random draws.

    ``engine`` is either a :class:`random.Random` (64 bits are taken with
    ``getrandbits``) or a zero-argument callable returning an integer of
    which the low 64 bits are used. Without an engine a fresh
    :class:`random.Random` is created.
    """

    def __init__(self, engine: Engine | None = None) -> None:
        if engine is None:
            engine = random.Random()
        if not (isinstance(engine, random.Random) or callable(engine)):
            raise TypeError(
                f"engine must be a random.Random or a callable, "
                f"got {type(engine).__name__}"
            )
        self._engine = engine

    def _draw(self) -> int:
        if isinstance(self._engine, random.Random):
            return self._engine.getrandbits(64)
        return int(self._engine()) & _U64_MASK

    def __call__(self) -> Uuid:
        high = self._draw()
        low = self._draw()
        high = (high & _VERSION_CLEAR_MASK) | _VERSION_4_BITS
        low = (low & _VARIANT_CLEAR_MASK) | _VARIANT_RFC_BITS
        return Uuid(high, low)

    def base(self) -> Engine:
        """Return the underlying random engine."""
        return self._engine

    @classmethod
    def min(cls) -> Uuid:
        """The smallest UUID this generator can produce."""
        return Uuid.parse("00000000-0000-4000-8000-000000000000")

    @classmethod
    def max(cls) -> Uuid:
        """The largest UUID this generator can produce."""
        return Uuid.parse("ffffffff-ffff-4fff-bfff-ffffffffffff")

    def seed(self, seed: Any) -> None:
        """Reseed the underlying engine."""
        reseed = getattr(self._engine, "seed", None)
        if not callable(reseed):
            raise TypeError(
                f"engine of type {type(self._engine).__name__} cannot be seeded"
            )
        reseed(seed)

    def discard(self, z: int) -> None:
        """Advance the engine as if ``z`` UUIDs had been generated."""
        if z < 0:
            raise ValueError(f"cannot discard a negative count, got {z}")
        for _ in range(z * _PARTS_PER_UUID):
            self._draw()