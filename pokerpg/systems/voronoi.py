"""Centered Voronoi sites with hash-noise jitter.

The same site set drives two things:

- the world *shape* (``shape_score``), a nearest-site distance with a fixed
  noise salt, used to grow the connected blob of tiles
- the *biome* of each tile (``biome_at``), a nearest-site lookup with a
  per-site noise salt so region boundaries look organic
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from pokerpg.core.models import HexCoord
from pokerpg.systems.generation_config import CenteredVoronoiNoiseConfig
from pokerpg.systems.seed import Rng, create_rng, noise2d_signed

SHAPE_NOISE_SALT = 1337
DEFAULT_SAMPLE_ATTEMPTS = 600
MIN_SAMPLE_ATTEMPTS = 50


@dataclass(frozen=True, slots=True)
class VoronoiSite:
    coord: HexCoord
    biome: str


@dataclass(frozen=True, slots=True)
class VoronoiContext:
    """Sites plus the parameters needed to score coordinates against them."""

    sites: tuple[VoronoiSite, ...]
    jitter: float
    seed: str


def create_sites(
    seed: str,
    biomes: Sequence[str],
    world_max_distance: int,
    config: CenteredVoronoiNoiseConfig,
) -> VoronoiContext:
    """Place ``points_count`` sites around the origin.

    Rejection sampling keeps sites at least ``min_site_distance`` apart for a
    bounded number of attempts; any sites still missing afterwards are placed
    without the spacing constraint.
    """
    if not biomes:
        raise ValueError("Voronoi site placement needs at least one biome")

    rng = create_rng(seed)
    jitter = max(0.0, config.jitter)
    sites_max = max(0, min(world_max_distance, math.floor(config.sites_max_distance)))
    points_count = max(1, math.floor(config.points_count))

    if config.min_site_distance is not None:
        min_site_distance = config.min_site_distance
    else:
        min_site_distance = max(1, math.floor(sites_max / max(1.0, math.sqrt(points_count))))

    attempts_cfg = config.max_site_sample_attempts
    max_attempts = max(
        MIN_SAMPLE_ATTEMPTS,
        math.floor(attempts_cfg if attempts_cfg is not None else DEFAULT_SAMPLE_ATTEMPTS),
    )

    shuffled = rng.shuffle(list(biomes))
    sites: list[VoronoiSite] = []

    attempts = 0
    while len(sites) < points_count and attempts < max_attempts:
        attempts += 1
        candidate = _random_coord_in_radius(rng, sites_max)
        if any(candidate.distance(s.coord) < min_site_distance for s in sites):
            continue
        sites.append(VoronoiSite(candidate, shuffled[len(sites) % len(shuffled)]))

    # Spacing budget exhausted: top up unconstrained
    while len(sites) < points_count:
        candidate = _random_coord_in_radius(rng, sites_max)
        sites.append(VoronoiSite(candidate, shuffled[len(sites) % len(shuffled)]))

    return VoronoiContext(sites=tuple(sites), jitter=jitter, seed=seed)


def shape_score(ctx: VoronoiContext, coord: HexCoord) -> float:
    """World-shape score; lower is included earlier when growing the blob."""
    best = math.inf
    for site in ctx.sites:
        d = coord.distance(site.coord)
        if d < best:
            best = d
    if ctx.jitter == 0:
        return best
    return best + noise2d_signed(ctx.seed, coord.q, coord.r, SHAPE_NOISE_SALT) * ctx.jitter


def biome_at(ctx: VoronoiContext, coord: HexCoord) -> str:
    """Biome of the nearest site, each site scored with its own noise salt."""
    best: VoronoiSite | None = None
    best_score = math.inf
    for i, site in enumerate(ctx.sites):
        score: float = coord.distance(site.coord)
        if ctx.jitter != 0:
            score += noise2d_signed(ctx.seed, coord.q, coord.r, i) * ctx.jitter
        if score < best_score:
            best_score = score
            best = site
    return (best or ctx.sites[0]).biome


def _random_coord_in_radius(rng: Rng, radius: int) -> HexCoord:
    # q uniform, then r uniform within the hexagon's valid range for that q
    n = max(0, radius)
    q = rng.int(-n, n)
    r = rng.int(max(-n, -q - n), min(n, -q + n))
    return HexCoord(q, r)
