"""FastAPI application factory with lifespan management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pokerpg.api.dependencies import set_engine_host
from pokerpg.api.engine_host import EngineHost
from pokerpg.api.routes import api_router
from pokerpg.config import EngineConfig
from pokerpg.systems.generation_config import WorldGenerationConfig
from pokerpg.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(
    config: EngineConfig | None = None,
    generation: WorldGenerationConfig | None = None,
    autostart: bool = True,
) -> FastAPI:
    """Build and return the fully-configured FastAPI application."""
    if config is None:
        config = EngineConfig()

    _config = config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        setup_logging(_config.log_level)
        host = EngineHost(_config, generation)
        set_engine_host(host)
        if autostart:
            host.start()
        logger.info("API server started — engine %s.", "running" if autostart else "idle")
        yield
        host.stop()
        set_engine_host(None)
        logger.info("API server shutting down.")

    app = FastAPI(
        title="Poke RPG Engine",
        description=(
            "Deterministic incremental-RPG simulation core — local host API.\n\n"
            "## API Groups\n\n"
            "- **World** — Generated hex tiles and the explore (click) intent\n"
            "- **Encounter** — Active encounter snapshot, start / close intents\n"
            "- **Logs** — Human-readable engine log lines\n"
            "- **Control** — Engine lifecycle and tick runner statistics\n"
            "- **Config** — Read-only engine and world generation configuration\n"
            "- **Worldgen** — Generation presets and side-effect-free previews\n"
        ),
        version="0.1.0",
        lifespan=lifespan,
    )

    # CORS: allow any origin in dev
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)
    return app
