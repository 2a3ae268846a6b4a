"""Gauge (ATB) tuning and the speed-derived per-combatant constants."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pokerpg.config import EngineConfig


@dataclass(frozen=True, slots=True)
class GaugeTuning:
    base_gain_per_tick: float = 1.0
    speed_gain_multiplier: float = 1.5
    speed_log_denominator: float = 20.0
    gauge_max_base_ticks: int = 40
    gauge_max_multiplier: float = 1.0
    max_actions_per_tick: int = 10

    @classmethod
    def from_config(cls, config: EngineConfig) -> GaugeTuning:
        return cls(
            base_gain_per_tick=config.gauge_base_gain_per_tick,
            speed_gain_multiplier=config.gauge_speed_gain_multiplier,
            speed_log_denominator=config.speed_log_denominator,
            gauge_max_base_ticks=config.gauge_max_base_ticks,
            gauge_max_multiplier=config.gauge_max_multiplier,
            max_actions_per_tick=max(1, config.max_actions_per_tick),
        )

    def gauge_max(self, speed: int) -> float:
        """Threshold to act. Speed-independent in the current tuning."""
        return self.gauge_max_base_ticks * self.gauge_max_multiplier

    def gain_per_tick(self, speed: int) -> float:
        """Base gain plus a log curve of speed (diminishing returns)."""
        denominator = self.speed_log_denominator if self.speed_log_denominator > 0 else 1.0
        speed_term = math.log1p(max(0, speed) / denominator)
        return self.base_gain_per_tick + self.speed_gain_multiplier * speed_term
