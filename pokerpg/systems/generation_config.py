"""World generation configuration.

The dataclasses here mirror the exported preset JSON field-for-field (the
JSON uses camelCase, see ``pokerpg.systems.presets``), so re-supplying an
exported preset reproduces the same world.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace

from pokerpg.core.models import HexCoord

GENERATOR_TYPE = "centered_voronoi_noise_v1"
CHUNK_SEED_SALT = "continental"


@dataclass(frozen=True, slots=True)
class CenteredVoronoiNoiseConfig:
    """Parameters of the centered Voronoi + hash-noise generator."""

    max_distance: float = 8          # candidate boundary (hex steps from centre)
    coverage: float = 0.75           # target radius = floor(coverage * max_distance)
    points_count: int = 12           # Voronoi sites
    sites_max_distance: float = 6    # sites spawn within this distance
    jitter: float = 0.35             # hash-noise strength; 0 => pure Voronoi
    min_site_distance: float | None = None         # None => heuristic
    max_site_sample_attempts: int | None = None    # None => 600


@dataclass(frozen=True, slots=True)
class VoronoiNoiseOverride:
    """Partial ``CenteredVoronoiNoiseConfig``; ``None`` means inherit."""

    max_distance: float | None = None
    coverage: float | None = None
    points_count: int | None = None
    sites_max_distance: float | None = None
    jitter: float | None = None
    min_site_distance: float | None = None
    max_site_sample_attempts: int | None = None


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    type: str = GENERATOR_TYPE
    centered_voronoi_noise: CenteredVoronoiNoiseConfig = field(default_factory=CenteredVoronoiNoiseConfig)


@dataclass(frozen=True, slots=True)
class GeneratorOverride:
    type: str | None = None
    centered_voronoi_noise: VoronoiNoiseOverride | None = None


@dataclass(frozen=True, slots=True)
class ChunkConfig:
    """One spatial partition of the world."""

    id: str
    coord: HexCoord
    biome_list: tuple[str, ...]
    custom_generator: GeneratorOverride | None = None


@dataclass(frozen=True, slots=True)
class WorldGenerationConfig:
    seed: str = "dev"
    chunk_radius: int = 8
    chunks: tuple[ChunkConfig, ...] = ()
    base_generator: GeneratorConfig = field(default_factory=GeneratorConfig)

    def with_seed(self, seed: str) -> WorldGenerationConfig:
        return replace(self, seed=seed)


DEFAULT_WORLD_GENERATION = WorldGenerationConfig(
    seed="dev",
    chunk_radius=8,
    chunks=(),
    base_generator=GeneratorConfig(
        type=GENERATOR_TYPE,
        centered_voronoi_noise=CenteredVoronoiNoiseConfig(
            max_distance=8,
            coverage=0.75,
            points_count=12,
            sites_max_distance=6,
            jitter=0.35,
            min_site_distance=2,
            max_site_sample_attempts=1200,
        ),
    ),
)


def merge_noise_config(
    base: CenteredVoronoiNoiseConfig,
    override: VoronoiNoiseOverride | None,
) -> CenteredVoronoiNoiseConfig:
    if override is None:
        return base
    changes = {
        f.name: getattr(override, f.name)
        for f in fields(override)
        if getattr(override, f.name) is not None
    }
    return replace(base, **changes) if changes else base


def merge_generator_config(
    base: GeneratorConfig,
    override: GeneratorOverride | None,
) -> GeneratorConfig:
    """Resolve a chunk's generator config: override fields win, absent fields inherit."""
    if override is None:
        return base
    return GeneratorConfig(
        type=override.type if override.type is not None else base.type,
        centered_voronoi_noise=merge_noise_config(
            base.centered_voronoi_noise, override.centered_voronoi_noise
        ),
    )
