"""GET /api/v1/config — expose engine and world generation configuration."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from pokerpg.api.dependencies import get_engine_host
from pokerpg.api.engine_host import EngineHost
from pokerpg.api.schemas import EngineConfigResponse
from pokerpg.systems.presets import WorldGenerationPreset

router = APIRouter()


@router.get("/config", response_model=EngineConfigResponse)
def get_config(host: EngineHost = Depends(get_engine_host)) -> EngineConfigResponse:
    cfg = host.config
    return EngineConfigResponse(
        tick_rate=cfg.tick_rate,
        max_ticks_per_frame=cfg.max_ticks_per_frame,
        gauge_max_base_ticks=cfg.gauge_max_base_ticks,
        gauge_max_multiplier=cfg.gauge_max_multiplier,
        gauge_base_gain_per_tick=cfg.gauge_base_gain_per_tick,
        gauge_speed_gain_multiplier=cfg.gauge_speed_gain_multiplier,
        speed_log_denominator=cfg.speed_log_denominator,
        max_actions_per_tick=cfg.max_actions_per_tick,
        min_damage=cfg.min_damage,
        defense_divisor=cfg.defense_divisor,
        fights_to_clear_hex=cfg.fights_to_clear_hex,
        player_pokemon_id=cfg.player_pokemon_id,
        enemy_selection=cfg.enemy_selection,
        generation=WorldGenerationPreset.from_config(host.generation),
    )
