"""Gauge-based (ATB-style) combat session between two combatants.

Per tick:
  1. Each living combatant gains ``gauge_gain_per_tick``.
  2. Up to ``max_actions_per_tick`` times, while both are alive and one is
     ready (gauge >= gauge_max): the ready side acts; if both are ready the
     higher gauge acts and an exact tie goes to the player. The actor spends
     ``gauge_max`` (overflow carries) and attacks once.
  3. A defender reaching 0 HP ends the session immediately.

Once ended, a session never changes again and ``tick()`` returns the
cached result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pokerpg.actions.damage import DamageCalculator, PrototypeDamageCalculator
from pokerpg.core.enums import Side
from pokerpg.core.gauge import GaugeTuning
from pokerpg.core.models import Combatant
from pokerpg.engine.combat_log import (
    AttackEvent,
    CombatEndEvent,
    CombatLog,
    CombatLogWriter,
    CombatStartEvent,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CombatResult:
    winner: Side
    duration_seconds: float
    ticks: int

    @property
    def victory(self) -> bool:
        return self.winner == Side.PLAYER


class CombatSession:
    """One fight. Owns no combatant lifetimes; the player may outlive it."""

    __slots__ = (
        "player", "enemy", "_tuning", "_damage", "_log",
        "_elapsed_seconds", "_tick_count", "_result",
    )

    def __init__(
        self,
        player: Combatant,
        enemy: Combatant,
        log: CombatLogWriter | None = None,
        tuning: GaugeTuning | None = None,
        damage: DamageCalculator | None = None,
    ) -> None:
        self.player = player
        self.enemy = enemy
        self._tuning = tuning or GaugeTuning()
        self._damage = damage or PrototypeDamageCalculator()
        self._log = log or CombatLog().writer()

        self._elapsed_seconds = 0.0
        self._tick_count = 0
        self._result: CombatResult | None = None

        self._log.push(CombatStartEvent(tick=0, elapsed_seconds=0.0))

    @property
    def ended(self) -> bool:
        return self._result is not None

    @property
    def result(self) -> CombatResult | None:
        return self._result

    @property
    def tick_count(self) -> int:
        return self._tick_count

    def tick(self, dt_seconds: float) -> CombatResult | None:
        """Advance one tick. Returns the result once the fight has ended."""
        if self._result is not None:
            return self._result

        self._tick_count += 1
        self._elapsed_seconds += dt_seconds

        self.player.charge()
        self.enemy.charge()

        for _ in range(self._tuning.max_actions_per_tick):
            if not (self.player.alive and self.enemy.alive):
                break
            actor = self._next_actor()
            if actor is None:
                break

            attacker, defender = self._pair(actor)
            attacker.consume_gauge()
            self._resolve_attack(actor, attacker, defender)
            if not defender.alive:
                return self._end(actor)

        return None

    def _next_actor(self) -> Side | None:
        player_ready = self.player.ready
        enemy_ready = self.enemy.ready
        if player_ready and enemy_ready:
            # Exact tie goes to the player
            return Side.ENEMY if self.enemy.gauge > self.player.gauge else Side.PLAYER
        if player_ready:
            return Side.PLAYER
        if enemy_ready:
            return Side.ENEMY
        return None

    def _pair(self, side: Side) -> tuple[Combatant, Combatant]:
        if side == Side.PLAYER:
            return self.player, self.enemy
        return self.enemy, self.player

    def _resolve_attack(self, side: Side, attacker: Combatant, defender: Combatant) -> None:
        dmg = self._damage.compute(attacker.template.base_stats, defender.template.base_stats)
        hp_after = defender.receive_damage(dmg)
        self._log.push(AttackEvent(
            tick=self._tick_count,
            elapsed_seconds=self._elapsed_seconds,
            attacker=side,
            defender=side.opponent,
            damage=dmg,
            defender_hp_after=hp_after,
        ))

    def _end(self, winner: Side) -> CombatResult:
        self._result = CombatResult(
            winner=winner,
            duration_seconds=self._elapsed_seconds,
            ticks=self._tick_count,
        )
        self._log.push(CombatEndEvent(
            tick=self._tick_count,
            elapsed_seconds=self._elapsed_seconds,
            winner=winner,
        ))
        logger.debug(
            "Combat ended: %s vs %s, winner=%s after %d ticks",
            self.player.name, self.enemy.name, winner.value, self._tick_count,
        )
        return self._result
