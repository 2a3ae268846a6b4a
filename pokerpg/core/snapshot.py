"""Immutable read views of world and encounter state for external consumers."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Iterable, Mapping

from pokerpg.core.models import HexCoord

if TYPE_CHECKING:
    from pokerpg.core.models import Combatant, HexTile


@dataclass(frozen=True, slots=True)
class HexTileView:
    id: str
    biome: str
    coord: HexCoord
    explored: bool
    cleared: bool

    @classmethod
    def from_tile(cls, tile: HexTile) -> HexTileView:
        return cls(tile.id, tile.biome, tile.coord, tile.explored, tile.cleared)


@dataclass(frozen=True, slots=True)
class WorldSnapshot:
    """Stable-order tile ids plus a read-only id -> view mapping."""

    ids: tuple[str, ...]
    by_id: Mapping[str, HexTileView]

    @classmethod
    def from_tiles(cls, tiles: Iterable[HexTile]) -> WorldSnapshot:
        views = {t.id: HexTileView.from_tile(t) for t in tiles}
        return cls(ids=tuple(views), by_id=MappingProxyType(views))

    def __len__(self) -> int:
        return len(self.ids)

    def tiles(self) -> tuple[HexTileView, ...]:
        return tuple(self.by_id[i] for i in self.ids)


@dataclass(frozen=True, slots=True)
class CombatantView:
    name: str
    level: int
    spd: int
    hp: int
    hp_max: int
    gauge: float
    gauge_max: float
    gauge_gain_per_tick: float

    @classmethod
    def from_combatant(cls, c: Combatant) -> CombatantView:
        return cls(
            name=c.name,
            level=c.template.level,
            spd=c.template.base_stats.spd,
            hp=c.current_hp,
            hp_max=c.hp_max,
            gauge=c.gauge,
            gauge_max=c.gauge_max,
            gauge_gain_per_tick=c.gauge_gain_per_tick,
        )


@dataclass(frozen=True, slots=True)
class EncounterResultView:
    victory: bool
    ticks: int


@dataclass(frozen=True, slots=True)
class EncounterSnapshot:
    hex_id: str
    fight_index: int
    fight_target: int
    running: bool
    ended: bool
    result: EncounterResultView | None
    player: CombatantView
    enemy: CombatantView
