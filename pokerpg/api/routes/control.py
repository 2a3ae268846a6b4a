"""Engine lifecycle and runner statistics."""

from __future__ import annotations

from enum import Enum

from fastapi import APIRouter, Depends

from pokerpg.api.dependencies import get_engine_host
from pokerpg.api.engine_host import EngineHost
from pokerpg.api.schemas import ControlResponse, RunnerStatsResponse

router = APIRouter()


class ControlAction(str, Enum):
    start = "start"
    stop = "stop"


@router.post("/control/{action}", response_model=ControlResponse)
def control(
    action: ControlAction,
    host: EngineHost = Depends(get_engine_host),
) -> ControlResponse:
    tick = host.stats().total_ticks

    match action:
        case ControlAction.start:
            if not host.start():
                return ControlResponse(status="noop", message="Already running.", tick=tick)
            return ControlResponse(status="ok", message="Engine started.", tick=tick)

        case ControlAction.stop:
            if not host.stop():
                return ControlResponse(status="noop", message="Not running.", tick=tick)
            return ControlResponse(status="ok", message="Engine stopped.", tick=host.stats().total_ticks)


@router.get("/stats", response_model=RunnerStatsResponse)
def get_stats(host: EngineHost = Depends(get_engine_host)) -> RunnerStatsResponse:
    s = host.stats()
    return RunnerStatsResponse(
        running=host.running,
        target_tps=s.target_tps,
        current_tps=s.current_tps,
        total_ticks=s.total_ticks,
        simulated_time_ms=s.simulated_time_ms,
        last_real_delta_ms=s.last_real_delta_ms,
    )
