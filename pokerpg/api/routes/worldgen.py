"""World generation presets: default config and side-effect-free previews."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from pokerpg.api.schemas import (
    ChunkMappingSchema,
    HexTileSchema,
    VoronoiSiteSchema,
    WorldgenPreviewResponse,
)
from pokerpg.core.snapshot import HexTileView
from pokerpg.systems.generation_config import DEFAULT_WORLD_GENERATION
from pokerpg.systems.generator import generate_world
from pokerpg.systems.presets import WorldGenerationPreset

router = APIRouter()


@router.get("/worldgen/default")
def get_default_preset() -> JSONResponse:
    """The default generation config in the exported preset JSON shape."""
    return JSONResponse(WorldGenerationPreset.from_config(DEFAULT_WORLD_GENERATION).to_json_dict())


@router.post("/worldgen/preview", response_model=WorldgenPreviewResponse)
def preview(preset: WorldGenerationPreset) -> WorldgenPreviewResponse:
    """Generate a world from *preset* without touching the live engine."""
    result = generate_world(preset.to_config())
    sites = result.voronoi.sites if result.voronoi else ()
    return WorldgenPreviewResponse(
        seed=preset.seed,
        count=len(result.tiles),
        tiles=[HexTileSchema.from_view(HexTileView.from_tile(t)) for t in result.tiles],
        sites=[VoronoiSiteSchema(q=s.coord.q, r=s.coord.r, biome=s.biome) for s in sites],
        chunks=[ChunkMappingSchema(chunk_id=m.chunk_id, hex_ids=list(m.hex_ids)) for m in result.chunk_mappings],
    )
