"""EngineHost — runs the engine's frame clock on a background thread.

The engine core is single-threaded; every call into it (frame, intent,
snapshot read) goes through one lock, so the core still sees strictly
sequential calls. Snapshots handed out are immutable.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import TYPE_CHECKING

from pokerpg.engine.factory import build_engine
from pokerpg.systems.generation_config import DEFAULT_WORLD_GENERATION, WorldGenerationConfig
from pokerpg.systems.seed import create_seed_string
from pokerpg.utils.event_log import EventLog

if TYPE_CHECKING:
    from pokerpg.config import EngineConfig
    from pokerpg.core.snapshot import EncounterSnapshot, HexTileView, WorldSnapshot
    from pokerpg.engine.tick_runner import RunnerStats

logger = logging.getLogger(__name__)


class EngineHost:
    """Owns one ``EngineLoop`` and drives it from wall-clock frames."""

    def __init__(
        self,
        config: EngineConfig,
        generation: WorldGenerationConfig | None = None,
    ) -> None:
        self.config = config
        # Without a configured world every session rolls a fresh seed
        self.generation = generation or DEFAULT_WORLD_GENERATION.with_seed(create_seed_string())

        self._lock = threading.RLock()
        self._engine = build_engine(config, self.generation)
        self._event_log = EventLog(config.log_buffer_size)
        self._engine.on_log(self._record_log)

        # Serialises start/stop; the frame thread only ever takes _lock
        self._lifecycle_lock = threading.Lock()
        self._thread: threading.Thread | None = None
        self._stop_requested = threading.Event()

    # -- public properties --

    @property
    def running(self) -> bool:
        with self._lock:
            return self._engine.started

    @property
    def event_log(self) -> EventLog:
        return self._event_log

    # -- lifecycle --

    def start(self) -> bool:
        with self._lifecycle_lock:
            with self._lock:
                if self._engine.started:
                    return False
                self._engine.start()
            # Each frame thread gets its own stop flag so a late stop never
            # reaches a newer thread
            self._stop_requested = threading.Event()
            self._thread = threading.Thread(
                target=self._run_loop, args=(self._stop_requested,), name="engine-frames", daemon=True,
            )
            self._thread.start()
        logger.info("EngineHost started (frame interval %.4fs)", self.config.frame_interval_seconds)
        return True

    def stop(self) -> bool:
        with self._lifecycle_lock:
            with self._lock:
                if not self._engine.started:
                    return False
            self._stop_requested.set()
            if self._thread and self._thread.is_alive():
                self._thread.join(timeout=5.0)
            self._thread = None
            with self._lock:
                self._engine.stop()
        logger.info("EngineHost stopped.")
        return True

    @property
    def frame_thread_alive(self) -> bool:
        with self._lifecycle_lock:
            return self._thread is not None and self._thread.is_alive()

    # -- snapshot access --

    def world_snapshot(self) -> WorldSnapshot:
        with self._lock:
            return self._engine.get_world_snapshot()

    def get_tile(self, hex_id: str) -> HexTileView | None:
        return self.world_snapshot().by_id.get(hex_id)

    def encounter_snapshot(self) -> EncounterSnapshot | None:
        with self._lock:
            return self._engine.get_encounter_snapshot()

    def stats(self) -> RunnerStats:
        with self._lock:
            return self._engine.runner.get_stats()

    # -- intents --

    def click_hex(self, hex_id: str) -> bool:
        with self._lock:
            return self._engine.on_hex_clicked(hex_id)

    def start_combat(self) -> bool:
        with self._lock:
            return self._engine.start_combat()

    def close_encounter(self) -> bool:
        with self._lock:
            return self._engine.close_encounter()

    # -- internals --

    def _record_log(self, message: str) -> None:
        self._event_log.append(message, tick=self._engine.runner.tick_index)

    def _run_loop(self, stop_requested: threading.Event) -> None:
        """Background thread main loop."""
        logger.info("Frame thread started.")
        while not stop_requested.is_set():
            with self._lock:
                self._engine.runner.on_frame(time.perf_counter() * 1000.0)
            time.sleep(self.config.frame_interval_seconds)
        logger.info("Frame thread exited.")
