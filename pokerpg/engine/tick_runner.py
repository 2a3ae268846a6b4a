"""Fixed-timestep tick runner.

Converts a variable-rate external clock (``on_frame(timestamp_ms)``) into
a fixed-rate sequence of simulation ticks:

- The first frame after ``start()`` only initialises the clocks.
- Real elapsed time is clamped to ``max_ticks_per_frame * tick_duration``
  so a long gap cannot trigger an unbounded burst.
- When the per-frame budget is exhausted the leftover accumulated time is
  dropped rather than replayed.

This is the only component that looks at clock timestamps; everything
downstream sees ``TickContext`` only.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from pokerpg.config import EngineConfig
from pokerpg.core.enums import RunnerState
from pokerpg.engine.listeners import ListenerRegistry, Subscription

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_index: int      # monotonic, starts at 1
    dt_ms: float         # always the fixed tick duration
    sim_time_ms: float   # simulated, not wall, time


@dataclass(frozen=True, slots=True)
class RunnerStats:
    target_tps: int
    current_tps: float
    total_ticks: int
    simulated_time_ms: float
    last_real_delta_ms: float   # unclamped


class TickRunner:
    """Fixed-step accumulator driven by an external frame clock."""

    __slots__ = (
        "_config", "_state",
        "_last_timestamp_ms", "_accumulator_ms",
        "_tick_index", "_sim_time_ms", "_last_real_delta_ms",
        "_tps_sample_start_ms", "_ticks_since_sample", "_current_tps",
        "_tick_listeners", "_tps_listeners",
    )

    def __init__(self, config: EngineConfig | None = None) -> None:
        self._config = config or EngineConfig()
        self._state = RunnerState.STOPPED

        self._last_timestamp_ms: float | None = None
        self._accumulator_ms = 0.0

        self._tick_index = 0
        self._sim_time_ms = 0.0
        self._last_real_delta_ms = 0.0

        self._tps_sample_start_ms: float | None = None
        self._ticks_since_sample = 0
        self._current_tps = 0.0

        self._tick_listeners: ListenerRegistry[TickContext] = ListenerRegistry()
        self._tps_listeners: ListenerRegistry[float] = ListenerRegistry()

    # -- Properties --------------------------------------------------------

    @property
    def running(self) -> bool:
        return self._state == RunnerState.RUNNING

    @property
    def tick_duration_ms(self) -> float:
        return self._config.tick_duration_ms

    @property
    def tick_index(self) -> int:
        return self._tick_index

    # -- Lifecycle ---------------------------------------------------------

    def start(self) -> None:
        """Start accepting frames. Safe to call while running."""
        if self._state == RunnerState.RUNNING:
            return
        self._state = RunnerState.RUNNING
        logger.info("Tick runner started (%d TPS)", self._config.effective_tick_rate)

    def stop(self) -> None:
        """Stop and reset clocks so the next start does not fast-forward."""
        if self._state == RunnerState.STOPPED:
            return
        self._state = RunnerState.STOPPED
        self._last_timestamp_ms = None
        self._accumulator_ms = 0.0
        self._tps_sample_start_ms = None
        self._ticks_since_sample = 0
        logger.info("Tick runner stopped at tick %d", self._tick_index)

    # -- Subscriptions -----------------------------------------------------

    def subscribe_tick(self, fn: Callable[[TickContext], None]) -> Subscription:
        return self._tick_listeners.subscribe(fn)

    def subscribe_tps(self, fn: Callable[[float], None]) -> Subscription:
        """Throughput updates, about once per sample window."""
        return self._tps_listeners.subscribe(fn)

    def get_stats(self) -> RunnerStats:
        return RunnerStats(
            target_tps=self._config.effective_tick_rate,
            current_tps=self._current_tps,
            total_ticks=self._tick_index,
            simulated_time_ms=self._sim_time_ms,
            last_real_delta_ms=self._last_real_delta_ms,
        )

    # -- Clock -------------------------------------------------------------

    def on_frame(self, timestamp_ms: float) -> int:
        """Feed one external clock frame. Returns the number of ticks run."""
        if self._state != RunnerState.RUNNING:
            return 0

        if self._last_timestamp_ms is None:
            self._last_timestamp_ms = timestamp_ms
            self._tps_sample_start_ms = timestamp_ms
            return 0

        tick_ms = self._config.tick_duration_ms
        budget = max(1, self._config.max_ticks_per_frame)

        real_delta = max(0.0, timestamp_ms - self._last_timestamp_ms)
        self._last_real_delta_ms = real_delta
        self._last_timestamp_ms = timestamp_ms

        self._accumulator_ms += min(real_delta, budget * tick_ms)

        ticks = 0
        while self._accumulator_ms >= tick_ms and ticks < budget:
            self._accumulator_ms -= tick_ms
            self._step(tick_ms)
            ticks += 1
            # A listener may stop the runner mid-frame
            if self._state != RunnerState.RUNNING:
                return ticks

        if ticks >= budget:
            self._accumulator_ms = 0.0

        self._maybe_emit_tps(timestamp_ms)
        return ticks

    def _step(self, tick_ms: float) -> None:
        self._tick_index += 1
        self._sim_time_ms += tick_ms
        self._ticks_since_sample += 1
        self._tick_listeners.emit(TickContext(self._tick_index, tick_ms, self._sim_time_ms))

    def _maybe_emit_tps(self, now_ms: float) -> None:
        if self._tps_sample_start_ms is None:
            self._tps_sample_start_ms = now_ms
            self._ticks_since_sample = 0
            return

        elapsed_ms = now_ms - self._tps_sample_start_ms
        if elapsed_ms < self._config.tps_sample_window_ms:
            return

        tps = self._ticks_since_sample / (elapsed_ms / 1000.0)
        self._current_tps = tps
        self._tps_listeners.emit(tps)
        self._tps_sample_start_ms = now_ms
        self._ticks_since_sample = 0
