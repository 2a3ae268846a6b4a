"""World generator: connected organic hex blob with Voronoi biomes.

For each region (one per chunk, or a single un-chunked region):

1. Candidate pool = full hexagon of radius ``max_distance`` (clamped to the
   chunk radius).
2. Voronoi sites placed from the region seed.
3. Best-first growth from the origin keyed by shape score, ties broken by
   tile id, until ``1 + 3R(R+1)`` tiles with ``R = floor(coverage * radius)``.
4. Biome of every accepted tile from the jittered nearest-site lookup.

Chunks are translated into global coordinates by a fixed axial offset so
they tile without overlap.
"""

from __future__ import annotations

import heapq
import logging
import math
from dataclasses import dataclass
from typing import Callable, Mapping, Sequence

from pokerpg.core.biomes import BIOME_IDS
from pokerpg.core.models import ORIGIN, HexCoord, HexTile, coords_in_radius, tiles_for_radius
from pokerpg.systems.generation_config import (
    CHUNK_SEED_SALT,
    DEFAULT_WORLD_GENERATION,
    ChunkConfig,
    GeneratorConfig,
    WorldGenerationConfig,
    merge_generator_config,
)
from pokerpg.systems.seed import chunk_seed
from pokerpg.systems.voronoi import VoronoiContext, biome_at, create_sites, shape_score

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ChunkHexMapping:
    chunk_id: str
    hex_ids: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class GenerationResult:
    """Generated tiles plus debug context.

    ``tiles`` are in selection order, chunk by chunk. ``voronoi`` is the
    context of the first non-empty region (for overlays).
    """

    tiles: tuple[HexTile, ...]
    voronoi: VoronoiContext | None
    chunk_mappings: tuple[ChunkHexMapping, ...]

    @property
    def tile_ids(self) -> tuple[str, ...]:
        return tuple(t.id for t in self.tiles)


# ---------------------------------------------------------------------------
# Blob growth
# ---------------------------------------------------------------------------

def grow_connected_blob(
    candidates: Mapping[str, HexCoord],
    start_id: str,
    target_count: int,
    score_for: Callable[[HexCoord], float],
) -> list[str]:
    """Best-first expansion over the candidate pool.

    Pops the lowest (score, id) frontier entry, accepts it and pushes its
    unseen in-pool neighbours. Returns accepted ids in selection order;
    every id after the first is adjacent to an earlier one.
    """
    if start_id not in candidates:
        start_id = ORIGIN.local_id
        if start_id not in candidates:
            return []

    heap: list[tuple[float, str]] = [(score_for(candidates[start_id]), start_id)]
    seen = {start_id}
    out: list[str] = []

    while heap and len(out) < target_count:
        _, node_id = heapq.heappop(heap)
        out.append(node_id)
        for n in candidates[node_id].neighbors():
            nid = n.local_id
            if nid in seen or nid not in candidates:
                continue
            seen.add(nid)
            heapq.heappush(heap, (score_for(n), nid))

    return out


# ---------------------------------------------------------------------------
# Regions and chunks
# ---------------------------------------------------------------------------

def chunk_offset(chunk_coord: HexCoord, chunk_radius: int) -> HexCoord:
    """Global axial offset of a chunk centre."""
    r = chunk_radius + 1
    return HexCoord(
        chunk_coord.q * (2 * r - 1) + chunk_coord.r * r,
        chunk_coord.q * -(r - 1) + chunk_coord.r * -(2 * r - 1),
    )


def _candidate_radius(generator: GeneratorConfig, chunk_radius: int) -> int:
    clamped = min(generator.centered_voronoi_noise.max_distance, chunk_radius)
    return max(0, math.floor(clamped))


def generate_region(
    seed: str,
    biomes: Sequence[str],
    generator: GeneratorConfig,
    chunk_radius: int,
) -> tuple[list[tuple[HexCoord, str]], VoronoiContext]:
    """Grow one region around the local origin.

    Returns (local coordinate, biome) pairs in selection order and the
    Voronoi context used.
    """
    radius = _candidate_radius(generator, chunk_radius)
    ctx = create_sites(seed, biomes, radius, generator.centered_voronoi_noise)
    noise_cfg = generator.centered_voronoi_noise

    candidates = {c.local_id: c for c in coords_in_radius(radius)}
    coverage = max(0.0, min(1.0, noise_cfg.coverage))
    target_radius = max(0, math.floor(coverage * radius))
    target = max(1, min(tiles_for_radius(target_radius), len(candidates)))

    selected = grow_connected_blob(
        candidates,
        ORIGIN.local_id,
        target,
        lambda c: shape_score(ctx, c),
    )
    return [(candidates[i], biome_at(ctx, candidates[i])) for i in selected], ctx


def generate_chunk(
    chunk: ChunkConfig,
    config: WorldGenerationConfig,
    fallback_biomes: Sequence[str] = BIOME_IDS,
) -> tuple[list[HexTile], VoronoiContext]:
    generator = merge_generator_config(config.base_generator, chunk.custom_generator)
    seed = chunk_seed(config.seed, chunk.coord.q, chunk.coord.r, CHUNK_SEED_SALT)
    biomes = chunk.biome_list or tuple(fallback_biomes)
    if not chunk.biome_list:
        logger.warning("Chunk %s has an empty biome list; using all biomes", chunk.id)

    local, ctx = generate_region(seed, biomes, generator, config.chunk_radius)
    offset = chunk_offset(chunk.coord, config.chunk_radius)

    tiles: list[HexTile] = []
    for coord, biome in local:
        g = coord + offset
        tiles.append(HexTile(id=f"{chunk.id}-{g.local_id}", coord=g, biome=biome))

    logger.debug("Chunk %s: %d tiles (seed=%s)", chunk.id, len(tiles), seed)
    return tiles, ctx


def generate_world(
    config: WorldGenerationConfig = DEFAULT_WORLD_GENERATION,
    biomes: Sequence[str] = BIOME_IDS,
) -> GenerationResult:
    """Generate the world described by *config*.

    With no chunks, a single region is grown around the origin from the
    world seed using *biomes*, with plain ``q{q}-r{r}`` ids.
    """
    if not config.chunks:
        local, ctx = generate_region(config.seed, biomes, config.base_generator, config.chunk_radius)
        tiles = tuple(HexTile(id=c.local_id, coord=c, biome=b) for c, b in local)
        logger.info("Generated world seed=%r: %d tiles", config.seed, len(tiles))
        return GenerationResult(
            tiles=tiles,
            voronoi=ctx if tiles else None,
            chunk_mappings=(),
        )

    all_tiles: list[HexTile] = []
    mappings: list[ChunkHexMapping] = []
    voronoi: VoronoiContext | None = None

    for chunk in config.chunks:
        tiles, ctx = generate_chunk(chunk, config, biomes)
        all_tiles.extend(tiles)
        mappings.append(ChunkHexMapping(chunk.id, tuple(t.id for t in tiles)))
        if voronoi is None and tiles:
            voronoi = ctx

    logger.info(
        "Generated world seed=%r: %d chunks, %d tiles",
        config.seed, len(config.chunks), len(all_tiles),
    )
    return GenerationResult(tiles=tuple(all_tiles), voronoi=voronoi, chunk_mappings=tuple(mappings))
