"""Enemy pools and enemy selection for encounters."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Mapping, Sequence

from pokerpg.core.biomes import BIOME_REGISTRY, BiomeConfig
from pokerpg.core.enums import Domain, Rarity
from pokerpg.core.models import PokemonTemplate
from pokerpg.core.pokemon import DEFAULT_PLAYER_POKEMON, POKEMON_REGISTRY
from pokerpg.systems.rng import DeterministicRNG

# Copies of each pool entry per rarity
RARITY_WEIGHT: dict[Rarity, int] = {
    Rarity.COMMON: 7,
    Rarity.UNCOMMON: 2,
    Rarity.RARE: 1,
}


def fallback_enemy_pool(
    pokemon: Mapping[str, PokemonTemplate] = POKEMON_REGISTRY,
    player_id: str = DEFAULT_PLAYER_POKEMON.id,
) -> list[PokemonTemplate]:
    """Every registered template except the player's."""
    return [p for p in pokemon.values() if p.id != player_id]


def create_enemy_pool_for_biome(
    biome_id: str,
    biomes: Mapping[str, BiomeConfig] = BIOME_REGISTRY,
    pokemon: Mapping[str, PokemonTemplate] = POKEMON_REGISTRY,
    player_id: str = DEFAULT_PLAYER_POKEMON.id,
) -> list[PokemonTemplate]:
    """Rarity-weighted pool for a biome.

    Each entry appears ``RARITY_WEIGHT[rarity]`` times. Unknown pokemon ids
    are skipped; an unknown biome or an empty result falls back to
    ``fallback_enemy_pool``.
    """
    cfg = biomes.get(biome_id)
    if cfg is None:
        return fallback_enemy_pool(pokemon, player_id)

    out: list[PokemonTemplate] = []
    for rarity, entries in cfg.encounter_pool.items():
        weight = max(1, RARITY_WEIGHT.get(rarity, 1))
        for pokemon_id in entries:
            template = pokemon.get(pokemon_id)
            if template is None:
                continue
            out.extend([template] * weight)

    return out or fallback_enemy_pool(pokemon, player_id)


# ---------------------------------------------------------------------------
# Selection policies
# ---------------------------------------------------------------------------

class EnemySelector(ABC):
    """Chooses the enemy template for one fight of an encounter."""

    @abstractmethod
    def select(
        self,
        pool: Sequence[PokemonTemplate],
        hex_id: str,
        fight_index: int,
        previous: PokemonTemplate | None = None,
    ) -> PokemonTemplate:
        """Pick one template from a non-empty *pool*."""


class RandomEnemySelector(EnemySelector):
    """Uniform unseeded pick. Not replayable."""

    __slots__ = ("_random",)

    def __init__(self, rng: random.Random | None = None) -> None:
        self._random = rng or random.Random()

    def select(self, pool, hex_id, fight_index, previous=None):
        if not pool:
            raise ValueError("enemy pool is empty")
        return self._random.choice(pool)


class SeededEnemySelector(EnemySelector):
    """Deterministic pick keyed by (hex id, fight index).

    With ``anti_repeat`` the previous fight's species is re-rolled away
    from when the pool holds anything else.
    """

    __slots__ = ("_rng", "_anti_repeat")

    _MAX_REROLLS = 8

    def __init__(self, rng: DeterministicRNG, anti_repeat: bool = False) -> None:
        self._rng = rng
        self._anti_repeat = anti_repeat

    def select(self, pool, hex_id, fight_index, previous=None):
        if not pool:
            raise ValueError("enemy pool is empty")
        idx = self._rng.next_int(Domain.ENEMY_SELECTION, hex_id, fight_index, 0, len(pool) - 1)
        choice = pool[idx]
        if not self._anti_repeat or previous is None or choice.id != previous.id:
            return choice

        others = [p for p in pool if p.id != previous.id]
        if not others:
            return choice
        for attempt in range(1, self._MAX_REROLLS + 1):
            idx = self._rng.next_int(
                Domain.ENEMY_SELECTION, hex_id, fight_index * 1000 + attempt, 0, len(pool) - 1,
            )
            if pool[idx].id != previous.id:
                return pool[idx]
        # Weighted rerolls kept hitting the same species
        idx = self._rng.next_int(Domain.ENCOUNTER, hex_id, fight_index, 0, len(others) - 1)
        return others[idx]
