"""World tiles: GET /api/v1/world, per-hex lookup and the click intent."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from pokerpg.api.dependencies import get_engine_host
from pokerpg.api.engine_host import EngineHost
from pokerpg.api.schemas import ClickResponse, HexTileSchema, WorldResponse

router = APIRouter()


@router.get("/world", response_model=WorldResponse)
def get_world(host: EngineHost = Depends(get_engine_host)) -> WorldResponse:
    snap = host.world_snapshot()
    tiles = [HexTileSchema.from_view(v) for v in snap.tiles()]
    return WorldResponse(
        count=len(tiles),
        explored=sum(1 for t in tiles if t.explored),
        cleared=sum(1 for t in tiles if t.cleared),
        tiles=tiles,
    )


@router.get("/world/hexes/{hex_id}", response_model=HexTileSchema)
def get_hex(hex_id: str, host: EngineHost = Depends(get_engine_host)) -> HexTileSchema:
    view = host.get_tile(hex_id)
    if view is None:
        raise HTTPException(status_code=404, detail=f"Hex {hex_id!r} not found.")
    return HexTileSchema.from_view(view)


@router.post("/world/hexes/{hex_id}/click", response_model=ClickResponse)
def click_hex(hex_id: str, host: EngineHost = Depends(get_engine_host)) -> ClickResponse:
    if host.get_tile(hex_id) is None:
        raise HTTPException(status_code=404, detail=f"Hex {hex_id!r} not found.")
    changed = host.click_hex(hex_id)
    view = host.get_tile(hex_id)
    return ClickResponse(hex_id=hex_id, changed=changed, tile=HexTileSchema.from_view(view))
