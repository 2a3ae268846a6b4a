"""GET /api/v1/logs — human-readable engine log lines (polled by UI)."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from pokerpg.api.dependencies import get_engine_host
from pokerpg.api.engine_host import EngineHost
from pokerpg.api.schemas import LogLineSchema, LogsResponse

router = APIRouter()


@router.get("/logs", response_model=LogsResponse)
def get_logs(
    since: int | None = Query(None, ge=0, description="Return lines after this sequence number"),
    limit: int = Query(100, ge=1, le=2000),
    host: EngineHost = Depends(get_engine_host),
) -> LogsResponse:
    log = host.event_log
    lines = log.since(since)[:limit] if since is not None else log.latest(limit)
    return LogsResponse(
        lines=[LogLineSchema(sequence=line.sequence, tick=line.tick, message=line.message) for line in lines],
        last_sequence=lines[-1].sequence if lines else (since or 0),
    )
