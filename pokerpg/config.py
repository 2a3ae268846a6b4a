"""Engine configuration with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EngineConfig:
    """Immutable configuration for the engine runtime."""

    # Timing
    tick_rate: int = 20                    # simulation ticks per second
    max_ticks_per_frame: int = 10          # catch-up budget per clock frame
    tps_sample_window_ms: float = 1000.0   # throughput sampling window

    # Gauge (ATB) tuning
    gauge_base_gain_per_tick: float = 1.0
    gauge_speed_gain_multiplier: float = 1.5
    speed_log_denominator: float = 20.0    # larger => speed matters less
    gauge_max_base_ticks: int = 40         # 40 ticks = 2 s at 20 TPS
    gauge_max_multiplier: float = 1.0
    max_actions_per_tick: int = 10         # runaway-loop guard

    # Damage (prototype formula: atk - def // divisor)
    min_damage: int = 1
    defense_divisor: int = 2

    # Encounters
    fights_to_clear_hex: int = 5           # fallback when the biome has no threshold
    player_pokemon_id: str = "player-001"

    # Enemy selection: "random" (unseeded placeholder) or "seeded"
    enemy_selection: str = "random"
    enemy_selection_seed: int = 42
    enemy_anti_repeat: bool = False

    # Host (API frame clock)
    frame_interval_seconds: float = 1 / 60
    log_buffer_size: int = 2000

    # Logging
    log_level: str = "INFO"

    @property
    def effective_tick_rate(self) -> int:
        """``tick_rate`` clamped to at least one tick per second."""
        return max(1, self.tick_rate)

    @property
    def tick_duration_ms(self) -> float:
        return 1000.0 / self.effective_tick_rate

    @property
    def tick_duration_seconds(self) -> float:
        return 1.0 / self.effective_tick_rate
