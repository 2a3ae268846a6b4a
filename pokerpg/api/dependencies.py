"""FastAPI dependency injection — provides the EngineHost instance."""

from __future__ import annotations

from pokerpg.api.engine_host import EngineHost

_engine_host: EngineHost | None = None


def set_engine_host(host: EngineHost | None) -> None:
    global _engine_host
    _engine_host = host


def get_engine_host() -> EngineHost:
    if _engine_host is None:
        raise RuntimeError("EngineHost not initialized — server not started correctly.")
    return _engine_host
