"""The pseudo-random generator a host uses for connect identifiers."""

from __future__ import annotations

import time
from collections.abc import Iterator
from typing import Optional

_MASK = 0xFFFFFFFF
_INCREMENT = 0x6D2B79F5


def _rotate_right(value: int, shift: int) -> int:
    value &= _MASK
    return ((value >> shift) | (value << (32 - shift))) & _MASK


def _now_millis() -> int:
    return int(time.time() * 1000) % _MASK


class HostRandom:
    """A 32-bit generator seeded once and advanced on every draw.

    Without an explicit seed, one is derived from the object's identity and
    the current time, the way a host seeds itself when none is configured.
    """

    __slots__ = ("seed",)

    def __init__(self, seed: Optional[int] = None) -> None:
        if seed is None:
            seed = (id(self) + _now_millis()) & _MASK
            seed = _rotate_right(seed, 16)
        elif not isinstance(seed, int) or isinstance(seed, bool):
            raise TypeError(f"seed must be an int, not {type(seed).__name__}")
        elif not 0 <= seed <= _MASK:
            raise ValueError(f"seed out of 32-bit range: {seed}")
        self.seed = seed

    def next(self) -> int:
        """Advance the state and return the next 32-bit value."""
        self.seed = (self.seed + _INCREMENT) & _MASK
        n = self.seed
        n = ((n ^ (n >> 15)) * (n | 1)) & _MASK
        n ^= (n + (((n ^ (n >> 7)) * (n | 61)) & _MASK)) & _MASK
        return n ^ (n >> 14)

    def __iter__(self) -> Iterator[int]:
        while True:
            yield self.next()

    def __repr__(self) -> str:
        return f"HostRandom(seed={self.seed:#010x})"