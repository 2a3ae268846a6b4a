"""Core data models, static registries and read-only snapshots."""

from pokerpg.core.enums import BiomeType, Domain, PokemonType, Rarity, Side
from pokerpg.core.models import BaseStats, Combatant, HexCoord, HexTile, PokemonTemplate
from pokerpg.core.biomes import BIOME_REGISTRY, BiomeConfig
from pokerpg.core.pokemon import DEFAULT_PLAYER_POKEMON, POKEMON_REGISTRY
from pokerpg.core.snapshot import EncounterSnapshot, WorldSnapshot

__all__ = [
    "BIOME_REGISTRY",
    "BaseStats",
    "BiomeConfig",
    "BiomeType",
    "Combatant",
    "DEFAULT_PLAYER_POKEMON",
    "Domain",
    "EncounterSnapshot",
    "HexCoord",
    "HexTile",
    "POKEMON_REGISTRY",
    "PokemonTemplate",
    "PokemonType",
    "Rarity",
    "Side",
    "WorldSnapshot",
]
