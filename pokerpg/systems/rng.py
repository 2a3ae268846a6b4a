"""Domain-separated deterministic RNG using xxhash.

Used where the engine wants replayable randomness without threading a
stateful stream through every call site (e.g. seeded enemy selection).

Formula: RNG_Value = Hash(Seed, Domain, Key, Index)
"""

from __future__ import annotations

import struct

import xxhash

from pokerpg.core.enums import Domain


class DeterministicRNG:
    """Stateless domain-separated pseudo-random number generator.

    Each call is a pure function of (seed, domain, key, index) — no
    internal mutable state, so the same question always gets the same
    answer regardless of call order.
    """

    __slots__ = ("_seed",)

    _MAX_UINT64 = (1 << 64) - 1

    def __init__(self, seed: int) -> None:
        self._seed = seed

    @property
    def seed(self) -> int:
        return self._seed

    def _hash(self, domain: Domain, key: str, index: int) -> int:
        payload = (
            struct.pack("<qi", self._seed, int(domain))
            + key.encode("utf-8")
            + struct.pack("<q", index)
        )
        return xxhash.xxh64(payload).intdigest()

    def next_float(self, domain: Domain, key: str, index: int) -> float:
        """Return a deterministic float in [0.0, 1.0)."""
        return self._hash(domain, key, index) / (self._MAX_UINT64 + 1)

    def next_int(self, domain: Domain, key: str, index: int, low: int, high: int) -> int:
        """Return a deterministic integer in [low, high] inclusive."""
        f = self.next_float(domain, key, index)
        return low + int(f * (high - low + 1))
