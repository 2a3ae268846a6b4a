"""Enumerations used throughout the engine."""

from __future__ import annotations

from enum import Enum, IntEnum, unique


@unique
class Side(str, Enum):
    """The two sides of a fight."""

    PLAYER = "player"
    ENEMY = "enemy"

    @property
    def opponent(self) -> Side:
        return Side.ENEMY if self is Side.PLAYER else Side.PLAYER


@unique
class Domain(IntEnum):
    """RNG domains for deterministic randomness isolation."""

    ENEMY_SELECTION = 0
    ENCOUNTER = 1


@unique
class Rarity(str, Enum):
    """Encounter-pool rarity buckets."""

    COMMON = "COMMON"
    UNCOMMON = "UNCOMMON"
    RARE = "RARE"


@unique
class BiomeType(str, Enum):
    """Broad biome families."""

    FOREST = "FOREST"
    PLAINS = "PLAINS"
    MOUNTAIN = "MOUNTAIN"


@unique
class PokemonType(str, Enum):
    """Elemental types. Carried as data only; combat ignores them."""

    NORMAL = "normal"
    FIRE = "fire"
    WATER = "water"
    ELECTRIC = "electric"
    GRASS = "grass"
    ICE = "ice"
    FIGHTING = "fighting"
    POISON = "poison"
    GROUND = "ground"
    FLYING = "flying"
    PSYCHIC = "psychic"
    BUG = "bug"
    ROCK = "rock"
    GHOST = "ghost"
    DRAGON = "dragon"
    DARK = "dark"
    STEEL = "steel"
    FAIRY = "fairy"


@unique
class CombatEventType(str, Enum):
    """Kinds of entries in the combat log."""

    SYSTEM = "system"
    COMBAT_START = "combat_start"
    ATTACK = "attack"
    COMBAT_END = "combat_end"


@unique
class RunnerState(IntEnum):
    """Tick runner lifecycle."""

    STOPPED = 0
    RUNNING = 1
