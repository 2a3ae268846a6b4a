"""Versioned API route modules."""

from fastapi import APIRouter

from pokerpg.api.routes.config import router as config_router
from pokerpg.api.routes.control import router as control_router
from pokerpg.api.routes.encounter import router as encounter_router
from pokerpg.api.routes.logs import router as logs_router
from pokerpg.api.routes.world import router as world_router
from pokerpg.api.routes.worldgen import router as worldgen_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(world_router, tags=["World"])
api_router.include_router(encounter_router, tags=["Encounter"])
api_router.include_router(logs_router, tags=["Logs"])
api_router.include_router(control_router, tags=["Control"])
api_router.include_router(config_router, tags=["Config"])
api_router.include_router(worldgen_router, tags=["Worldgen"])

__all__ = ["api_router"]
