"""Composition root: builds a fully wired ``EngineLoop``."""

from __future__ import annotations

import logging
from typing import Mapping

from pokerpg.config import EngineConfig
from pokerpg.core.biomes import BIOME_REGISTRY, BiomeConfig
from pokerpg.core.models import PokemonTemplate
from pokerpg.core.pokemon import DEFAULT_PLAYER_POKEMON, POKEMON_REGISTRY
from pokerpg.engine.encounter_manager import EncounterManager
from pokerpg.engine.engine_loop import EngineLoop
from pokerpg.engine.tick_runner import TickRunner
from pokerpg.engine.world_manager import WorldManager
from pokerpg.systems.encounters import EnemySelector, RandomEnemySelector, SeededEnemySelector
from pokerpg.systems.generation_config import DEFAULT_WORLD_GENERATION, WorldGenerationConfig
from pokerpg.systems.generator import GenerationResult, generate_world
from pokerpg.systems.rng import DeterministicRNG

logger = logging.getLogger(__name__)


def build_selector(config: EngineConfig) -> EnemySelector:
    if config.enemy_selection == "seeded":
        return SeededEnemySelector(DeterministicRNG(config.enemy_selection_seed), config.enemy_anti_repeat)
    if config.enemy_selection != "random":
        raise ValueError(f"Unknown enemy selection policy: {config.enemy_selection!r}")
    return RandomEnemySelector()


def build_engine(
    config: EngineConfig | None = None,
    generation: WorldGenerationConfig | GenerationResult | None = None,
    selector: EnemySelector | None = None,
    biomes: Mapping[str, BiomeConfig] = BIOME_REGISTRY,
    pokemon: Mapping[str, PokemonTemplate] = POKEMON_REGISTRY,
) -> EngineLoop:
    """Generate (or reuse) a world and wire every engine component."""
    config = config or EngineConfig()

    if isinstance(generation, GenerationResult):
        result = generation
    else:
        result = generate_world(generation or DEFAULT_WORLD_GENERATION, tuple(biomes))

    player = pokemon.get(config.player_pokemon_id)
    if player is None:
        logger.warning("Unknown player pokemon %r; using default", config.player_pokemon_id)
        player = DEFAULT_PLAYER_POKEMON

    return EngineLoop(
        config=config,
        runner=TickRunner(config),
        world=WorldManager(result.tiles),
        encounters=EncounterManager(config, selector or build_selector(config)),
        player_template=player,
        biomes=biomes,
        pokemon=pokemon,
    )
