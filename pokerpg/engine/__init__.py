"""Engine layer: tick runner, combat, encounter and world managers, orchestration."""

from pokerpg.engine.combat import CombatResult, CombatSession
from pokerpg.engine.encounter_manager import EncounterManager
from pokerpg.engine.engine_loop import EngineLoop
from pokerpg.engine.factory import build_engine
from pokerpg.engine.tick_runner import TickContext, TickRunner
from pokerpg.engine.world_manager import WorldManager

__all__ = [
    "CombatResult",
    "CombatSession",
    "EncounterManager",
    "EngineLoop",
    "TickContext",
    "TickRunner",
    "WorldManager",
    "build_engine",
]
