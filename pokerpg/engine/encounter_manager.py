"""Encounter lifecycle: one active encounter, fights chained on victory.

The player combatant is created once per encounter and reused across every
chained fight, so damage carries over between fights. Enemy choice goes
through an ``EnemySelector``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from pokerpg.actions.damage import DamageCalculator, PrototypeDamageCalculator
from pokerpg.config import EngineConfig
from pokerpg.core.gauge import GaugeTuning
from pokerpg.core.models import Combatant, PokemonTemplate
from pokerpg.core.snapshot import CombatantView, EncounterResultView, EncounterSnapshot
from pokerpg.engine.combat import CombatSession
from pokerpg.engine.combat_log import CombatLog, CombatLogEvent, format_event
from pokerpg.systems.encounters import EnemySelector, RandomEnemySelector, fallback_enemy_pool

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class EncounterTickResult:
    log_lines: tuple[str, ...] = ()
    cleared_hex_id: str | None = None


_IDLE = EncounterTickResult()


@dataclass(slots=True)
class Encounter:
    hex_id: str
    fight_index: int
    fight_target: int
    enemy_pool: tuple[PokemonTemplate, ...]
    player: Combatant
    enemy: Combatant
    combat: CombatSession
    running: bool = False


class EncounterManager:
    """Owns the active encounter and its combat log."""

    __slots__ = ("_config", "_tuning", "_damage", "_selector", "_log", "_cursor", "_encounter")

    def __init__(
        self,
        config: EngineConfig | None = None,
        selector: EnemySelector | None = None,
        damage: DamageCalculator | None = None,
    ) -> None:
        self._config = config or EngineConfig()
        self._tuning = GaugeTuning.from_config(self._config)
        self._damage = damage or PrototypeDamageCalculator.from_config(self._config)
        self._selector = selector or RandomEnemySelector()
        self._log = CombatLog()
        self._cursor = 0
        self._encounter: Encounter | None = None

    # -- Queries -----------------------------------------------------------

    @property
    def has_encounter(self) -> bool:
        return self._encounter is not None

    @property
    def running(self) -> bool:
        return self._encounter is not None and self._encounter.running

    @property
    def log_events(self) -> tuple[CombatLogEvent, ...]:
        return self._log.events

    def get_snapshot(self) -> EncounterSnapshot | None:
        enc = self._encounter
        if enc is None:
            return None
        result = enc.combat.result
        return EncounterSnapshot(
            hex_id=enc.hex_id,
            fight_index=enc.fight_index,
            fight_target=enc.fight_target,
            running=enc.running,
            ended=enc.combat.ended,
            result=EncounterResultView(result.victory, result.ticks) if result else None,
            player=CombatantView.from_combatant(enc.player),
            enemy=CombatantView.from_combatant(enc.enemy),
        )

    # -- Intents -----------------------------------------------------------

    def create_encounter(
        self,
        hex_id: str,
        player_template: PokemonTemplate,
        enemy_pool: Sequence[PokemonTemplate],
        fights_to_clear: int,
    ) -> None:
        """Replace any current encounter with a fresh one (not yet running)."""
        pool = tuple(enemy_pool) or tuple(fallback_enemy_pool(player_id=player_template.id))
        target = max(1, int(fights_to_clear))

        # Each encounter gets its own log; system numbering continues
        self._log = CombatLog(first_sequence=self._log.system_sequence)
        self._cursor = 0
        self._log.system(f"Encounter at {hex_id}: {target} fights")

        player = Combatant.from_template(player_template, self._tuning)
        enemy = self._spawn_enemy(pool, hex_id, 1, None)
        self._encounter = Encounter(
            hex_id=hex_id,
            fight_index=1,
            fight_target=target,
            enemy_pool=pool,
            player=player,
            enemy=enemy,
            combat=self._new_session(player, enemy),
        )
        logger.debug("Encounter created at %s: %s vs %s", hex_id, player.name, enemy.name)

    def start_combat(self) -> bool:
        enc = self._encounter
        if enc is None or enc.running or enc.combat.ended:
            return False
        enc.running = True
        return True

    def close_encounter(self) -> bool:
        if self._encounter is None:
            return False
        logger.debug("Encounter closed at %s", self._encounter.hex_id)
        self._encounter = None
        return True

    # -- Simulation --------------------------------------------------------

    def on_tick(self, dt_seconds: float | None = None) -> EncounterTickResult:
        """Advance the running fight by one tick."""
        enc = self._encounter
        if enc is None or not enc.running:
            return _IDLE

        dt = self._config.tick_duration_seconds if dt_seconds is None else dt_seconds
        result = enc.combat.tick(dt)
        lines = self._drain_log()

        if result is None:
            return EncounterTickResult(lines) if lines else _IDLE

        if not result.victory:
            enc.running = False
            logger.debug("Defeat at %s (fight %d/%d)", enc.hex_id, enc.fight_index, enc.fight_target)
            return EncounterTickResult(lines + ("Defeat",))

        next_index = enc.fight_index + 1
        if next_index > enc.fight_target:
            enc.running = False
            logger.debug("Hex %s cleared after %d fights", enc.hex_id, enc.fight_target)
            return EncounterTickResult(lines, cleared_hex_id=enc.hex_id)

        # Chain: new enemy, same player instance
        enc.fight_index = next_index
        enc.enemy = self._spawn_enemy(enc.enemy_pool, enc.hex_id, next_index, enc.enemy.template)
        enc.combat = self._new_session(enc.player, enc.enemy)
        return EncounterTickResult(
            lines + (f"Enemy defeated. Next fight {enc.fight_index}/{enc.fight_target}",)
        )

    # -- Internals ---------------------------------------------------------

    def _spawn_enemy(
        self,
        pool: Sequence[PokemonTemplate],
        hex_id: str,
        fight_index: int,
        previous: PokemonTemplate | None,
    ) -> Combatant:
        template = self._selector.select(pool, hex_id, fight_index, previous)
        return Combatant.from_template(template, self._tuning)

    def _new_session(self, player: Combatant, enemy: Combatant) -> CombatSession:
        return CombatSession(player, enemy, self._log.writer(), self._tuning, self._damage)

    def _drain_log(self) -> tuple[str, ...]:
        events = self._log.events_since(self._cursor)
        self._cursor += len(events)
        return tuple(format_event(e) for e in events)
