"""Biome definitions — static reference data consumed by the engine.

Biomes are data-driven: a tile's biome is a free-form id backed by
``BiomeConfig.id``. The generator only needs the ids; the encounter layer
reads the pools and thresholds.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from pokerpg.core.enums import BiomeType, Rarity


@dataclass(frozen=True, slots=True)
class LevelRange:
    min: int
    max: int


@dataclass(frozen=True, slots=True)
class BiomeConfig:
    """Immutable biome definition."""

    id: str
    name: str
    type: BiomeType
    color: str
    encounter_pool: Mapping[Rarity, tuple[str, ...]]   # rarity -> pokemon ids
    clear_threshold: int                                # fights to clear a tile
    travel_threshold: int
    level_range: LevelRange
    rarity_level_bonus: Mapping[Rarity, int] = field(
        default_factory=lambda: MappingProxyType({r: 0 for r in Rarity})
    )


BIOME_REGISTRY: dict[str, BiomeConfig] = {}


def _biome(
    biome_id: str,
    name: str,
    biome_type: BiomeType,
    color: str,
    common: tuple[str, ...],
    uncommon: tuple[str, ...],
    rare: tuple[str, ...],
    clear_threshold: int,
    travel_threshold: int,
    levels: tuple[int, int],
    bonus: tuple[int, int, int],
) -> BiomeConfig:
    b = BiomeConfig(
        id=biome_id,
        name=name,
        type=biome_type,
        color=color,
        encounter_pool=MappingProxyType({
            Rarity.COMMON: common,
            Rarity.UNCOMMON: uncommon,
            Rarity.RARE: rare,
        }),
        clear_threshold=clear_threshold,
        travel_threshold=travel_threshold,
        level_range=LevelRange(*levels),
        rarity_level_bonus=MappingProxyType({
            Rarity.COMMON: bonus[0],
            Rarity.UNCOMMON: bonus[1],
            Rarity.RARE: bonus[2],
        }),
    )
    BIOME_REGISTRY[b.id] = b
    return b


VERDANT_FOREST = _biome(
    "verdant-forest", "Verdant Forest", BiomeType.FOREST, "#8B5E3C",
    common=("tissemboule", "hoothoot", "lepidonille", "paras"),
    uncommon=("grainipiot", "croquine"),
    rare=("scarhino",),
    clear_threshold=10, travel_threshold=5, levels=(4, 7), bonus=(0, 2, 4),
)

WINDSWEPT_PLAINS = _biome(
    "windswept-plains", "Windswept Plains", BiomeType.PLAINS, "#A8A878",
    common=("zigzaton", "doduo", "gourmelet", "moumouton"),
    uncommon=("voltoutou", "crikzik"),
    rare=("tauros",),
    clear_threshold=10, travel_threshold=5, levels=(2, 5), bonus=(0, 1, 3),
)

CANARO_MOUNTAINS = _biome(
    "canaro-mountains", "Canaro Mountains", BiomeType.MOUNTAIN, "#B8A038",
    common=("machoc", "selutin", "furaiglon", "khelocrok"),
    uncommon=("cabriolaine", "nodulithe"),
    rare=("airmure",),
    clear_threshold=10, travel_threshold=5, levels=(6, 10), bonus=(0, 2, 5),
)

MISTY_SWAMP = _biome(
    "misty-swamp", "Misty Swamp", BiomeType.FOREST, "#4A5D23",
    common=("wooper", "stunky", "croagunk", "gulpin"),
    uncommon=("quagsire", "toxicroak"),
    rare=("drapion",),
    clear_threshold=8, travel_threshold=4, levels=(5, 9), bonus=(0, 2, 5),
)

SCORCHED_DESERT = _biome(
    "scorched-desert", "Scorched Desert", BiomeType.PLAINS, "#D4A574",
    common=("sandshrew", "trapinch", "cacnea", "hippopotas"),
    uncommon=("sandslash", "maractus"),
    rare=("garchomp",),
    clear_threshold=12, travel_threshold=6, levels=(8, 12), bonus=(0, 3, 6),
)

VOLCANIC_CRATER = _biome(
    "volcanic-crater", "Volcanic Crater", BiomeType.MOUNTAIN, "#8B0000",
    common=("slugma", "numel", "torkoal", "heatmor"),
    uncommon=("magcargo", "camerupt"),
    rare=("magmortar",),
    clear_threshold=15, travel_threshold=8, levels=(10, 15), bonus=(0, 4, 7),
)

BIOME_IDS: tuple[str, ...] = tuple(BIOME_REGISTRY)


def get_biome(biome_id: str) -> BiomeConfig | None:
    return BIOME_REGISTRY.get(biome_id)
