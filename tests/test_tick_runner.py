"""Fixed-timestep tick runner and listener registries."""

from __future__ import annotations

import unittest

from pokerpg.config import EngineConfig
from pokerpg.engine.listeners import ListenerRegistry
from pokerpg.engine.tick_runner import TickContext, TickRunner


class TestListenerRegistry(unittest.TestCase):

    def test_emits_in_subscription_order(self):
        reg: ListenerRegistry[int] = ListenerRegistry()
        calls = []
        reg.subscribe(lambda v: calls.append(("a", v)))
        reg.subscribe(lambda v: calls.append(("b", v)))
        reg.emit(1)
        self.assertEqual(calls, [("a", 1), ("b", 1)])

    def test_cancel_is_idempotent(self):
        reg: ListenerRegistry[int] = ListenerRegistry()
        calls = []
        sub = reg.subscribe(calls.append)
        sub.cancel()
        sub()
        self.assertFalse(sub.active)
        reg.emit(5)
        self.assertEqual(calls, [])
        self.assertEqual(len(reg), 0)

    def test_unsubscribe_during_emit(self):
        reg: ListenerRegistry[int] = ListenerRegistry()
        calls = []
        subs = []

        def first(v):
            calls.append("first")
            subs[1].cancel()

        subs.append(reg.subscribe(first))
        subs.append(reg.subscribe(lambda v: calls.append("second")))
        reg.emit(0)
        reg.emit(0)
        # The snapshot taken for the first emit still includes "second"
        self.assertEqual(calls, ["first", "second", "first"])


class TestTickRunner(unittest.TestCase):

    def setUp(self):
        self.runner = TickRunner(EngineConfig(tick_rate=20, max_ticks_per_frame=10))
        self.ticks: list[TickContext] = []
        self.runner.subscribe_tick(self.ticks.append)

    def test_ignores_frames_while_stopped(self):
        self.assertEqual(self.runner.on_frame(0), 0)
        self.assertEqual(self.runner.on_frame(1000), 0)
        self.assertEqual(self.ticks, [])

    def test_first_frame_only_initialises(self):
        self.runner.start()
        self.assertEqual(self.runner.on_frame(5000), 0)
        self.assertEqual(self.ticks, [])

    def test_fixed_step_contexts(self):
        self.runner.start()
        self.runner.on_frame(0)
        self.assertEqual(self.runner.on_frame(100), 2)
        self.assertEqual(
            self.ticks,
            [TickContext(1, 50.0, 50.0), TickContext(2, 50.0, 100.0)],
        )

    def test_accumulates_partial_ticks(self):
        self.runner.start()
        self.runner.on_frame(0)
        self.assertEqual(self.runner.on_frame(30), 0)
        self.assertEqual(self.runner.on_frame(60), 1)
        self.assertEqual(self.runner.on_frame(100), 1)
        self.assertEqual(self.runner.tick_index, 2)

    def test_long_gap_is_clamped_and_leftover_dropped(self):
        self.runner.start()
        self.runner.on_frame(0)
        self.runner.on_frame(100)
        self.assertEqual(self.runner.on_frame(10_000), 10)
        self.assertEqual(self.runner.get_stats().last_real_delta_ms, 9900)
        # No backlog replayed on the next frame
        self.assertEqual(self.runner.on_frame(10_010), 0)
        self.assertEqual(self.runner.tick_index, 12)

    def test_backwards_clock_runs_nothing(self):
        self.runner.start()
        self.runner.on_frame(1000)
        self.assertEqual(self.runner.on_frame(900), 0)

    def test_stop_resets_clock(self):
        self.runner.start()
        self.runner.on_frame(0)
        self.assertEqual(self.runner.on_frame(75), 1)
        self.runner.stop()
        self.runner.start()
        self.assertEqual(self.runner.on_frame(1000), 0)
        # The 25 ms left over before stop() is gone
        self.assertEqual(self.runner.on_frame(1040), 0)
        self.assertEqual(self.runner.on_frame(1050), 1)
        self.assertEqual(self.runner.tick_index, 2)

    def test_listener_can_stop_runner_mid_frame(self):
        self.runner.subscribe_tick(lambda ctx: self.runner.stop() if ctx.tick_index == 3 else None)
        self.runner.start()
        self.runner.on_frame(0)
        self.assertEqual(self.runner.on_frame(500), 3)
        self.assertFalse(self.runner.running)

    def test_tps_sampling(self):
        samples: list[float] = []
        self.runner.subscribe_tps(samples.append)
        self.runner.start()
        self.runner.on_frame(0)
        for t in range(50, 1001, 50):
            self.runner.on_frame(t)
        self.assertEqual(samples, [20.0])
        self.assertEqual(self.runner.get_stats().current_tps, 20.0)

    def test_stats(self):
        self.runner.start()
        self.runner.on_frame(0)
        self.runner.on_frame(250)
        stats = self.runner.get_stats()
        self.assertEqual(stats.target_tps, 20)
        self.assertEqual(stats.total_ticks, 5)
        self.assertEqual(stats.simulated_time_ms, 250.0)
        self.assertEqual(stats.last_real_delta_ms, 250)

    def test_start_is_idempotent(self):
        self.runner.start()
        self.runner.on_frame(0)
        self.runner.start()
        self.assertEqual(self.runner.on_frame(50), 1)


class TestTickRateClamp(unittest.TestCase):

    def test_non_positive_rate_runs_at_one_tps(self):
        for rate in (0, -5):
            config = EngineConfig(tick_rate=rate)
            self.assertEqual(config.tick_duration_ms, 1000.0)
            self.assertEqual(config.tick_duration_seconds, 1.0)

            runner = TickRunner(config)
            runner.start()
            runner.on_frame(0)
            self.assertEqual(runner.on_frame(100), 0)
            self.assertEqual(runner.on_frame(1000), 1)
            self.assertEqual(runner.get_stats().target_tps, 1)


if __name__ == "__main__":
    unittest.main()
