"""Engine loop orchestrator.

Wires ``TickRunner`` ticks to ``EncounterManager`` and ``WorldManager``,
and re-broadcasts throughput, world snapshots, encounter snapshots and log
lines to subscribers. Holds no simulation rules of its own.
"""

from __future__ import annotations

import logging
from typing import Callable, Mapping

from pokerpg.config import EngineConfig
from pokerpg.core.biomes import BiomeConfig
from pokerpg.core.models import PokemonTemplate
from pokerpg.core.snapshot import EncounterSnapshot, WorldSnapshot
from pokerpg.engine.encounter_manager import EncounterManager
from pokerpg.engine.listeners import ListenerRegistry, Subscription
from pokerpg.engine.tick_runner import TickContext, TickRunner
from pokerpg.engine.world_manager import WorldManager
from pokerpg.systems.encounters import create_enemy_pool_for_biome

logger = logging.getLogger(__name__)


class EngineLoop:
    """Composition of runner, encounter manager and world manager."""

    def __init__(
        self,
        config: EngineConfig,
        runner: TickRunner,
        world: WorldManager,
        encounters: EncounterManager,
        player_template: PokemonTemplate,
        biomes: Mapping[str, BiomeConfig],
        pokemon: Mapping[str, PokemonTemplate],
    ) -> None:
        self._config = config
        self._runner = runner
        self._world = world
        self._encounters = encounters
        self._player_template = player_template
        self._biomes = biomes
        self._pokemon = pokemon

        self._started = False
        self._runner_subs: list[Subscription] = []

        self._tps_listeners: ListenerRegistry[float] = ListenerRegistry()
        self._world_listeners: ListenerRegistry[WorldSnapshot] = ListenerRegistry()
        self._encounter_listeners: ListenerRegistry[EncounterSnapshot | None] = ListenerRegistry()
        self._log_listeners: ListenerRegistry[str] = ListenerRegistry()

    # -- Properties --------------------------------------------------------

    @property
    def runner(self) -> TickRunner:
        return self._runner

    @property
    def started(self) -> bool:
        return self._started

    # -- Lifecycle ---------------------------------------------------------

    def start(self) -> None:
        """Emit initial snapshots, subscribe to the runner, start it. Idempotent."""
        if self._started:
            return
        self._started = True

        self._emit_world()
        self._emit_encounter()

        self._runner_subs = [
            self._runner.subscribe_tps(self._tps_listeners.emit),
            self._runner.subscribe_tick(self._on_tick),
        ]
        self._runner.start()
        logger.info("Engine loop started (%d tiles)", len(self._world))

    def stop(self) -> None:
        if not self._started:
            return
        self._started = False
        for sub in self._runner_subs:
            sub.cancel()
        self._runner_subs = []
        self._runner.stop()
        logger.info("Engine loop stopped")

    # -- Subscriptions -----------------------------------------------------

    def on_tps(self, listener: Callable[[float], None]) -> Subscription:
        return self._tps_listeners.subscribe(listener)

    def on_world(self, listener: Callable[[WorldSnapshot], None]) -> Subscription:
        return self._world_listeners.subscribe(listener)

    def on_encounter(self, listener: Callable[[EncounterSnapshot | None], None]) -> Subscription:
        return self._encounter_listeners.subscribe(listener)

    def on_log(self, listener: Callable[[str], None]) -> Subscription:
        return self._log_listeners.subscribe(listener)

    # -- Snapshot getters --------------------------------------------------

    def get_world_snapshot(self) -> WorldSnapshot:
        return self._world.get_snapshot()

    def get_encounter_snapshot(self) -> EncounterSnapshot | None:
        return self._encounters.get_snapshot()

    # -- Intents -----------------------------------------------------------

    def on_hex_clicked(self, hex_id: str) -> bool:
        """Explore a hex and open an encounter on it. Returns False if nothing changed."""
        if not self._world.explore(hex_id):
            return False

        self._emit_world()
        self._emit_log(f"Hex explored ({hex_id})")

        biome_id = self._world.get_biome(hex_id)
        biome = self._biomes.get(biome_id) if biome_id else None
        fights = biome.clear_threshold if biome else self._config.fights_to_clear_hex
        pool = create_enemy_pool_for_biome(
            biome_id or "", self._biomes, self._pokemon, self._player_template.id,
        )

        self._encounters.create_encounter(hex_id, self._player_template, pool, fights)
        self._emit_encounter()
        self._emit_log(f"Encounter created ({hex_id})")
        return True

    def start_combat(self) -> bool:
        if not self._encounters.start_combat():
            return False
        self._emit_encounter()
        self._emit_log("Combat started")
        return True

    def close_encounter(self) -> bool:
        if not self._encounters.close_encounter():
            return False
        self._emit_encounter()
        self._emit_log("Encounter closed")
        return True

    # -- Tick --------------------------------------------------------------

    def _on_tick(self, ctx: TickContext) -> None:
        result = self._encounters.on_tick(ctx.dt_ms / 1000.0)
        for line in result.log_lines:
            self._emit_log(line)

        if result.cleared_hex_id is not None:
            self._world.mark_cleared(result.cleared_hex_id)
            self._emit_world()
            self._emit_log(f"Hex cleared ({result.cleared_hex_id})")
            logger.info("Tick %d: hex %s cleared", ctx.tick_index, result.cleared_hex_id)

        self._emit_encounter()

    def _emit_world(self) -> None:
        if len(self._world_listeners):
            self._world_listeners.emit(self._world.get_snapshot())

    def _emit_encounter(self) -> None:
        if len(self._encounter_listeners):
            self._encounter_listeners.emit(self._encounters.get_snapshot())

    def _emit_log(self, message: str) -> None:
        self._log_listeners.emit(message)
