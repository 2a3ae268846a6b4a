"""Seed utilities for deterministic procedural generation.

Every function here is a pure function of its arguments, bit-for-bit
reproducible by any implementation that follows the same 32-bit unsigned
wraparound arithmetic:

- ``seed_to_uint32`` — FNV-1a over UTF-16 code units
- ``create_rng``     — mulberry32 stream seeded from a seed string
- ``noise2d_signed`` — stateless coordinate hash noise in [-1, 1]
- ``chunk_seed``     — sub-seed for an integer-addressed spatial partition
"""

from __future__ import annotations

import math
import secrets
from typing import Sequence, TypeVar

T = TypeVar("T")

_MASK32 = 0xFFFFFFFF

FNV_OFFSET_BASIS = 0x811C9DC5
FNV_PRIME = 0x01000193


def _imul(a: int, b: int) -> int:
    """32-bit wraparound multiply, unsigned result."""
    return ((a & _MASK32) * (b & _MASK32)) & _MASK32


def _utf16_code_units(text: str):
    data = text.encode("utf-16-le")
    for i in range(0, len(data), 2):
        yield data[i] | (data[i + 1] << 8)


def seed_to_uint32(seed: str) -> int:
    """Hash an arbitrary seed string into a uint32 (FNV-1a 32-bit)."""
    h = FNV_OFFSET_BASIS
    for unit in _utf16_code_units(seed):
        h ^= unit
        h = _imul(h, FNV_PRIME)
    return h


def create_seed_string() -> str:
    """Return a fresh random seed string (base 36 of 64 random bits)."""
    acc = int.from_bytes(secrets.token_bytes(8), "big")
    if acc == 0:
        return "0"
    digits = "0123456789abcdefghijklmnopqrstuvwxyz"
    out: list[str] = []
    while acc:
        acc, rem = divmod(acc, 36)
        out.append(digits[rem])
    return "".join(reversed(out))


class Rng:
    """Small fast deterministic RNG (mulberry32).

    The 32-bit state is owned exclusively by this instance.
    """

    __slots__ = ("_state",)

    def __init__(self, seed: str) -> None:
        self._state = seed_to_uint32(seed)

    def next_float(self) -> float:
        """Return a float in [0, 1)."""
        self._state = (self._state + 0x6D2B79F5) & _MASK32
        t = self._state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & _MASK32
        return ((t ^ (t >> 14)) & _MASK32) / 4294967296

    def int(self, min_inclusive: float, max_inclusive: float) -> int:
        """Return an integer in [ceil(min), floor(max)].

        An empty range returns ``ceil(min)`` without consuming a draw.
        """
        lo = math.ceil(min_inclusive)
        hi = math.floor(max_inclusive)
        if hi < lo:
            return lo
        return lo + math.floor(self.next_float() * (hi - lo + 1))

    def pick(self, items: Sequence[T]) -> T:
        return items[self.int(0, len(items) - 1)]

    def shuffle(self, items: list[T]) -> list[T]:
        """In-place Fisher-Yates shuffle driven by this stream; returns *items*."""
        for i in range(len(items) - 1, 0, -1):
            j = self.int(0, i)
            items[i], items[j] = items[j], items[i]
        return items


def create_rng(seed: str) -> Rng:
    return Rng(seed)


def noise2d_signed(seed: str, x: int, y: int, salt: int = 0) -> float:
    """2D hash noise in [-1, 1] from integer coordinates and a salt.

    Not smooth noise: adjacent coordinates are uncorrelated. Good enough for
    boundary jitter.
    """
    h = seed_to_uint32(seed) ^ (salt & _MASK32)
    h ^= _imul(int(x), 0x9E3779B1)
    h ^= _imul(int(y), 0x85EBCA6B)
    h = _imul(h ^ (h >> 16), 0x7FEB352D)
    h = _imul(h ^ (h >> 15), 0x846CA68B)
    h = (h ^ (h >> 16)) & _MASK32
    return (h / 0xFFFFFFFF) * 2 - 1


def chunk_seed(world_seed: str, q: int, r: int, salt: str = "") -> str:
    """Derive the seed string of the chunk at axial chunk coordinate (q, r)."""
    return f"{world_seed}:{salt}:{int(q)}:{int(r)}"
