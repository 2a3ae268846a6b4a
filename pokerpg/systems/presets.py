"""Pydantic models for the generation-config preset JSON (import/export shape).

Field names use the exported camelCase aliases; Python code may populate
them by attribute name too. ``to_config()`` / ``from_config()`` convert to
and from the engine's frozen dataclasses.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from pokerpg.core.models import HexCoord
from pokerpg.systems.generation_config import (
    GENERATOR_TYPE,
    CenteredVoronoiNoiseConfig,
    ChunkConfig,
    GeneratorConfig,
    GeneratorOverride,
    VoronoiNoiseOverride,
    WorldGenerationConfig,
)


GeneratorType = Literal["centered_voronoi_noise_v1"]


class _PresetModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class VoronoiNoisePreset(_PresetModel):
    max_distance: float = Field(8, alias="maxDistance")
    coverage: float = 0.75
    points_count: int = Field(12, alias="pointsCount")
    sites_max_distance: float = Field(6, alias="sitesMaxDistance")
    jitter: float = 0.35
    min_site_distance: float | None = Field(None, alias="minSiteDistance")
    max_site_sample_attempts: int | None = Field(None, alias="maxSiteSampleAttempts")

    def to_config(self) -> CenteredVoronoiNoiseConfig:
        return CenteredVoronoiNoiseConfig(
            max_distance=self.max_distance,
            coverage=self.coverage,
            points_count=self.points_count,
            sites_max_distance=self.sites_max_distance,
            jitter=self.jitter,
            min_site_distance=self.min_site_distance,
            max_site_sample_attempts=self.max_site_sample_attempts,
        )

    @classmethod
    def from_config(cls, cfg: CenteredVoronoiNoiseConfig) -> VoronoiNoisePreset:
        return cls(
            max_distance=cfg.max_distance,
            coverage=cfg.coverage,
            points_count=cfg.points_count,
            sites_max_distance=cfg.sites_max_distance,
            jitter=cfg.jitter,
            min_site_distance=cfg.min_site_distance,
            max_site_sample_attempts=cfg.max_site_sample_attempts,
        )


class VoronoiNoiseOverridePreset(_PresetModel):
    max_distance: float | None = Field(None, alias="maxDistance")
    coverage: float | None = None
    points_count: int | None = Field(None, alias="pointsCount")
    sites_max_distance: float | None = Field(None, alias="sitesMaxDistance")
    jitter: float | None = None
    min_site_distance: float | None = Field(None, alias="minSiteDistance")
    max_site_sample_attempts: int | None = Field(None, alias="maxSiteSampleAttempts")

    def to_config(self) -> VoronoiNoiseOverride:
        return VoronoiNoiseOverride(**self.model_dump())

    @classmethod
    def from_config(cls, cfg: VoronoiNoiseOverride) -> VoronoiNoiseOverridePreset:
        return cls(
            max_distance=cfg.max_distance,
            coverage=cfg.coverage,
            points_count=cfg.points_count,
            sites_max_distance=cfg.sites_max_distance,
            jitter=cfg.jitter,
            min_site_distance=cfg.min_site_distance,
            max_site_sample_attempts=cfg.max_site_sample_attempts,
        )


class GeneratorPreset(_PresetModel):
    type: GeneratorType = GENERATOR_TYPE
    centered_voronoi_noise: VoronoiNoisePreset = Field(
        default_factory=VoronoiNoisePreset, alias="centeredVoronoiNoise"
    )

    def to_config(self) -> GeneratorConfig:
        return GeneratorConfig(type=self.type, centered_voronoi_noise=self.centered_voronoi_noise.to_config())

    @classmethod
    def from_config(cls, cfg: GeneratorConfig) -> GeneratorPreset:
        return cls(
            type=cfg.type,
            centered_voronoi_noise=VoronoiNoisePreset.from_config(cfg.centered_voronoi_noise),
        )


class GeneratorOverridePreset(_PresetModel):
    type: GeneratorType | None = None
    centered_voronoi_noise: VoronoiNoiseOverridePreset | None = Field(None, alias="centeredVoronoiNoise")

    def to_config(self) -> GeneratorOverride:
        noise = self.centered_voronoi_noise
        return GeneratorOverride(type=self.type, centered_voronoi_noise=noise.to_config() if noise else None)

    @classmethod
    def from_config(cls, cfg: GeneratorOverride) -> GeneratorOverridePreset:
        noise = cfg.centered_voronoi_noise
        return cls(
            type=cfg.type,
            centered_voronoi_noise=VoronoiNoiseOverridePreset.from_config(noise) if noise else None,
        )


class ChunkCoordPreset(_PresetModel):
    q: int
    r: int


class ChunkPreset(_PresetModel):
    id: str
    coord: ChunkCoordPreset
    biome_list: list[str] = Field(default_factory=list, alias="biomeList")
    custom_generator: GeneratorOverridePreset | None = Field(None, alias="customGenerator")

    def to_config(self) -> ChunkConfig:
        return ChunkConfig(
            id=self.id,
            coord=HexCoord(self.coord.q, self.coord.r),
            biome_list=tuple(self.biome_list),
            custom_generator=self.custom_generator.to_config() if self.custom_generator else None,
        )

    @classmethod
    def from_config(cls, cfg: ChunkConfig) -> ChunkPreset:
        return cls(
            id=cfg.id,
            coord=ChunkCoordPreset(q=cfg.coord.q, r=cfg.coord.r),
            biome_list=list(cfg.biome_list),
            custom_generator=(
                GeneratorOverridePreset.from_config(cfg.custom_generator) if cfg.custom_generator else None
            ),
        )


class WorldGenerationPreset(_PresetModel):
    """The generation config exactly as exported / imported by the map tool."""

    seed: str = "dev"
    chunk_radius: int = Field(8, alias="chunkRadius")
    chunks: list[ChunkPreset] = Field(default_factory=list)
    base_generator: GeneratorPreset = Field(default_factory=GeneratorPreset, alias="baseGenerator")

    def to_config(self) -> WorldGenerationConfig:
        return WorldGenerationConfig(
            seed=self.seed,
            chunk_radius=self.chunk_radius,
            chunks=tuple(c.to_config() for c in self.chunks),
            base_generator=self.base_generator.to_config(),
        )

    @classmethod
    def from_config(cls, cfg: WorldGenerationConfig) -> WorldGenerationPreset:
        return cls(
            seed=cfg.seed,
            chunk_radius=cfg.chunk_radius,
            chunks=[ChunkPreset.from_config(c) for c in cfg.chunks],
            base_generator=GeneratorPreset.from_config(cfg.base_generator),
        )

    def to_json_dict(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)
