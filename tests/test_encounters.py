"""Enemy pools, selection policies and the static registries."""

from __future__ import annotations

import random
from collections import Counter
from dataclasses import replace

import pytest

from pokerpg.config import EngineConfig
from pokerpg.core.biomes import BIOME_IDS, BIOME_REGISTRY, get_biome
from pokerpg.core.enums import Rarity
from pokerpg.core.pokemon import DEFAULT_PLAYER_POKEMON, POKEMON_REGISTRY, get_pokemon
from pokerpg.engine.factory import build_selector
from pokerpg.systems.encounters import (
    RandomEnemySelector,
    SeededEnemySelector,
    create_enemy_pool_for_biome,
    fallback_enemy_pool,
)
from pokerpg.systems.rng import DeterministicRNG


class TestRegistries:

    def test_every_biome_pool_entry_is_registered(self):
        for biome in BIOME_REGISTRY.values():
            for entries in biome.encounter_pool.values():
                for pokemon_id in entries:
                    assert get_pokemon(pokemon_id) is not None, pokemon_id

    def test_biome_ids_and_lookup(self):
        assert len(BIOME_IDS) == 6
        assert get_biome("verdant-forest").clear_threshold == 10
        assert get_biome("nowhere") is None

    def test_player_template(self):
        assert DEFAULT_PLAYER_POKEMON.id == "player-001"
        assert DEFAULT_PLAYER_POKEMON.base_stats.spd == 45


class TestEnemyPools:

    def test_rarity_weighting(self):
        pool = create_enemy_pool_for_biome("verdant-forest")
        biome = BIOME_REGISTRY["verdant-forest"]
        counts = Counter(p.id for p in pool)
        for pokemon_id in biome.encounter_pool[Rarity.COMMON]:
            assert counts[pokemon_id] == 7
        for pokemon_id in biome.encounter_pool[Rarity.UNCOMMON]:
            assert counts[pokemon_id] == 2
        for pokemon_id in biome.encounter_pool[Rarity.RARE]:
            assert counts[pokemon_id] == 1

    def test_unknown_biome_falls_back(self):
        pool = create_enemy_pool_for_biome("nowhere")
        assert len(pool) == len(POKEMON_REGISTRY) - 1
        assert DEFAULT_PLAYER_POKEMON not in pool

    def test_unknown_pokemon_ids_skipped(self):
        biome = replace(
            BIOME_REGISTRY["verdant-forest"],
            encounter_pool={Rarity.COMMON: ("ghost-id",), Rarity.UNCOMMON: (), Rarity.RARE: ("paras",)},
        )
        pool = create_enemy_pool_for_biome("custom", {"custom": biome})
        assert [p.id for p in pool] == ["paras"]

    def test_empty_result_falls_back(self):
        biome = replace(BIOME_REGISTRY["verdant-forest"], encounter_pool={Rarity.COMMON: ("ghost-id",)})
        pool = create_enemy_pool_for_biome("custom", {"custom": biome})
        assert pool == fallback_enemy_pool()

    def test_fallback_excludes_player(self):
        assert all(p.id != "player-001" for p in fallback_enemy_pool())


class TestSelectors:

    def setup_method(self):
        self.pool = create_enemy_pool_for_biome("windswept-plains")

    def test_random_selector_picks_from_pool(self):
        selector = RandomEnemySelector(random.Random(7))
        for i in range(20):
            assert selector.select(self.pool, "q0-r0", i) in self.pool

    def test_empty_pool_rejected(self):
        with pytest.raises(ValueError):
            RandomEnemySelector().select([], "q0-r0", 1)
        with pytest.raises(ValueError):
            SeededEnemySelector(DeterministicRNG(1)).select([], "q0-r0", 1)

    def test_seeded_selector_is_deterministic(self):
        a = SeededEnemySelector(DeterministicRNG(42))
        b = SeededEnemySelector(DeterministicRNG(42))
        picks_a = [a.select(self.pool, "q3-r-1", i).id for i in range(1, 30)]
        picks_b = [b.select(self.pool, "q3-r-1", i).id for i in range(1, 30)]
        assert picks_a == picks_b

    def test_seeded_selector_order_independent(self):
        sel = SeededEnemySelector(DeterministicRNG(42))
        forward = [sel.select(self.pool, "h", i).id for i in range(1, 10)]
        backward = [sel.select(self.pool, "h", i).id for i in reversed(range(1, 10))]
        assert forward == list(reversed(backward))

    def test_anti_repeat_avoids_previous_species(self):
        plain = SeededEnemySelector(DeterministicRNG(9))
        anti = SeededEnemySelector(DeterministicRNG(9), anti_repeat=True)
        for i in range(1, 40):
            previous = plain.select(self.pool, "q0-r0", i)
            assert anti.select(self.pool, "q0-r0", i, previous).id != previous.id

    def test_anti_repeat_with_single_species(self):
        only = [POKEMON_REGISTRY["paras"]] * 3
        anti = SeededEnemySelector(DeterministicRNG(9), anti_repeat=True)
        assert anti.select(only, "q0-r0", 2, only[0]).id == "paras"

    def test_build_selector(self):
        assert isinstance(build_selector(EngineConfig()), RandomEnemySelector)
        assert isinstance(build_selector(EngineConfig(enemy_selection="seeded")), SeededEnemySelector)
        with pytest.raises(ValueError):
            build_selector(EngineConfig(enemy_selection="roulette"))
