"""Active encounter: GET /api/v1/encounter and the start / close intents."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from pokerpg.api.dependencies import get_engine_host
from pokerpg.api.engine_host import EngineHost
from pokerpg.api.schemas import ControlResponse, EncounterResponse, EncounterSchema

router = APIRouter()


@router.get("/encounter", response_model=EncounterResponse)
def get_encounter(host: EngineHost = Depends(get_engine_host)) -> EncounterResponse:
    snap = host.encounter_snapshot()
    return EncounterResponse(encounter=EncounterSchema.from_snapshot(snap) if snap else None)


@router.post("/encounter/start", response_model=ControlResponse)
def start_combat(host: EngineHost = Depends(get_engine_host)) -> ControlResponse:
    tick = host.stats().total_ticks
    if not host.start_combat():
        return ControlResponse(status="noop", message="No startable encounter.", tick=tick)
    return ControlResponse(status="ok", message="Combat started.", tick=tick)


@router.post("/encounter/close", response_model=ControlResponse)
def close_encounter(host: EngineHost = Depends(get_engine_host)) -> ControlResponse:
    tick = host.stats().total_ticks
    if not host.close_encounter():
        return ControlResponse(status="noop", message="No encounter to close.", tick=tick)
    return ControlResponse(status="ok", message="Encounter closed.", tick=tick)
