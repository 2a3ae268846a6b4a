"""Pydantic response models for the REST API."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from pokerpg.systems.presets import WorldGenerationPreset

if TYPE_CHECKING:
    from pokerpg.core.snapshot import CombatantView, EncounterSnapshot, HexTileView


# --- World ---

class HexTileSchema(BaseModel):
    id: str
    biome: str
    q: int
    r: int
    explored: bool = False
    cleared: bool = False

    @classmethod
    def from_view(cls, view: HexTileView) -> HexTileSchema:
        return cls(
            id=view.id, biome=view.biome, q=view.coord.q, r=view.coord.r,
            explored=view.explored, cleared=view.cleared,
        )


class WorldResponse(BaseModel):
    count: int
    explored: int
    cleared: int
    tiles: list[HexTileSchema]


class ClickResponse(BaseModel):
    hex_id: str
    changed: bool
    tile: HexTileSchema


# --- Encounter ---

class CombatantSchema(BaseModel):
    name: str
    level: int
    spd: int
    hp: int
    hp_max: int
    gauge: float
    gauge_max: float
    gauge_gain_per_tick: float

    @classmethod
    def from_view(cls, view: CombatantView) -> CombatantSchema:
        return cls(
            name=view.name, level=view.level, spd=view.spd,
            hp=view.hp, hp_max=view.hp_max,
            gauge=view.gauge, gauge_max=view.gauge_max,
            gauge_gain_per_tick=view.gauge_gain_per_tick,
        )


class EncounterResultSchema(BaseModel):
    victory: bool
    ticks: int


class EncounterSchema(BaseModel):
    hex_id: str
    fight_index: int
    fight_target: int
    running: bool
    ended: bool
    result: EncounterResultSchema | None = None
    player: CombatantSchema
    enemy: CombatantSchema

    @classmethod
    def from_snapshot(cls, snap: EncounterSnapshot) -> EncounterSchema:
        return cls(
            hex_id=snap.hex_id,
            fight_index=snap.fight_index,
            fight_target=snap.fight_target,
            running=snap.running,
            ended=snap.ended,
            result=(
                EncounterResultSchema(victory=snap.result.victory, ticks=snap.result.ticks)
                if snap.result else None
            ),
            player=CombatantSchema.from_view(snap.player),
            enemy=CombatantSchema.from_view(snap.enemy),
        )


class EncounterResponse(BaseModel):
    encounter: EncounterSchema | None = None


# --- Logs ---

class LogLineSchema(BaseModel):
    sequence: int
    tick: int
    message: str


class LogsResponse(BaseModel):
    lines: list[LogLineSchema]
    last_sequence: int = 0


# --- Control ---

class ControlResponse(BaseModel):
    status: str
    message: str
    tick: int = 0


# --- Stats ---

class RunnerStatsResponse(BaseModel):
    running: bool
    target_tps: int
    current_tps: float
    total_ticks: int
    simulated_time_ms: float
    last_real_delta_ms: float


# --- Config ---

class EngineConfigResponse(BaseModel):
    tick_rate: int
    max_ticks_per_frame: int
    gauge_max_base_ticks: int
    gauge_max_multiplier: float
    gauge_base_gain_per_tick: float
    gauge_speed_gain_multiplier: float
    speed_log_denominator: float
    max_actions_per_tick: int
    min_damage: int
    defense_divisor: int
    fights_to_clear_hex: int
    player_pokemon_id: str
    enemy_selection: str
    generation: WorldGenerationPreset


# --- World generation preview ---

class VoronoiSiteSchema(BaseModel):
    q: int
    r: int
    biome: str


class ChunkMappingSchema(BaseModel):
    chunk_id: str
    hex_ids: list[str] = Field(default_factory=list)


class WorldgenPreviewResponse(BaseModel):
    seed: str
    count: int
    tiles: list[HexTileSchema]
    sites: list[VoronoiSiteSchema] = Field(default_factory=list)
    chunks: list[ChunkMappingSchema] = Field(default_factory=list)
