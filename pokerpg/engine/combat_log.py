"""Append-only combat log.

Events are frozen and never read back by the simulation; the log exists
for debugging, determinism diffs and UI display.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from pokerpg.core.enums import CombatEventType, Side


@dataclass(frozen=True, slots=True)
class SystemEvent:
    sequence: int
    message: str
    type: CombatEventType = CombatEventType.SYSTEM


@dataclass(frozen=True, slots=True)
class CombatStartEvent:
    tick: int
    elapsed_seconds: float
    type: CombatEventType = CombatEventType.COMBAT_START


@dataclass(frozen=True, slots=True)
class AttackEvent:
    tick: int
    elapsed_seconds: float
    attacker: Side
    defender: Side
    damage: int
    defender_hp_after: int
    type: CombatEventType = CombatEventType.ATTACK


@dataclass(frozen=True, slots=True)
class CombatEndEvent:
    tick: int
    elapsed_seconds: float
    winner: Side
    type: CombatEventType = CombatEventType.COMBAT_END


CombatLogEvent = Union[SystemEvent, CombatStartEvent, AttackEvent, CombatEndEvent]


def format_event(event: CombatLogEvent) -> str:
    """Human-readable one-line rendering of an event."""
    if isinstance(event, AttackEvent):
        return (
            f"t={event.tick} {event.attacker.value}->{event.defender.value} "
            f"dmg={event.damage} hp={event.defender_hp_after}"
        )
    if isinstance(event, CombatEndEvent):
        return f"t={event.tick} end winner={event.winner.value}"
    if isinstance(event, CombatStartEvent):
        return f"t={event.tick} start"
    return f"#{event.sequence} {event.message}"


class CombatLog:
    """Ordered list of combat events. Only ever appended to."""

    __slots__ = ("_events", "_system_sequence")

    def __init__(self, first_sequence: int = 0) -> None:
        self._events: list[CombatLogEvent] = []
        self._system_sequence = first_sequence

    def __len__(self) -> int:
        return len(self._events)

    @property
    def events(self) -> tuple[CombatLogEvent, ...]:
        return tuple(self._events)

    @property
    def system_sequence(self) -> int:
        return self._system_sequence

    def events_since(self, cursor: int) -> tuple[CombatLogEvent, ...]:
        return tuple(self._events[cursor:])

    def append(self, event: CombatLogEvent) -> None:
        self._events.append(event)

    def system(self, message: str) -> SystemEvent:
        self._system_sequence += 1
        event = SystemEvent(self._system_sequence, message)
        self._events.append(event)
        return event

    def writer(self) -> CombatLogWriter:
        return CombatLogWriter(self)


class CombatLogWriter:
    """Write-only view handed to combat sessions."""

    __slots__ = ("_log",)

    def __init__(self, log: CombatLog) -> None:
        self._log = log

    def push(self, event: CombatLogEvent) -> None:
        self._log.append(event)
