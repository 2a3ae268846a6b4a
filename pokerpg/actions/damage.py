"""Damage calculation strategy pattern.

Abstract DamageCalculator with one concrete prototype formula. To add a
new formula (type effectiveness, crits, ...):
  1. Create a new DamageCalculator subclass.
  2. Pass it to ``CombatSession`` / ``EncounterManager``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pokerpg.config import EngineConfig
    from pokerpg.core.models import BaseStats


# ---------------------------------------------------------------------------
# Abstract calculator
# ---------------------------------------------------------------------------

class DamageCalculator(ABC):
    """Base class for damage formulas.

    Implementations must be pure: the same stats always give the same
    damage, with no randomness.
    """

    @abstractmethod
    def compute(self, attacker: BaseStats, defender: BaseStats) -> int:
        """Damage dealt by one attack of *attacker* on *defender*."""


# ---------------------------------------------------------------------------
# Prototype formula
# ---------------------------------------------------------------------------

class PrototypeDamageCalculator(DamageCalculator):
    """``max(min_damage, atk - def // defense_divisor)``.

    No crits, no type effectiveness, no misses.
    """

    __slots__ = ("min_damage", "defense_divisor")

    def __init__(self, min_damage: int = 1, defense_divisor: int = 2) -> None:
        self.min_damage = min_damage
        self.defense_divisor = max(1, defense_divisor)

    @classmethod
    def from_config(cls, config: EngineConfig) -> PrototypeDamageCalculator:
        return cls(min_damage=config.min_damage, defense_divisor=config.defense_divisor)

    def compute(self, attacker: BaseStats, defender: BaseStats) -> int:
        raw = attacker.atk - defender.def_ // self.defense_divisor
        return max(self.min_damage, raw)
