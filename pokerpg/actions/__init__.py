"""Combat actions: damage formulas."""

from pokerpg.actions.damage import DamageCalculator, PrototypeDamageCalculator

__all__ = ["DamageCalculator", "PrototypeDamageCalculator"]
