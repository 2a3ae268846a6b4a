"""Host API: routes, engine host threading, and the log buffer."""

import os
import sys
import threading
import time
import unittest

from fastapi.testclient import TestClient

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from pokerpg.api.app import create_app
from pokerpg.api.dependencies import get_engine_host, set_engine_host
from pokerpg.api.engine_host import EngineHost
from pokerpg.config import EngineConfig
from pokerpg.systems.generation_config import DEFAULT_WORLD_GENERATION
from pokerpg.systems.presets import WorldGenerationPreset
from pokerpg.utils.event_log import EventLog
from tests.helpers.combat_arena import SMALL_WORLD


class _ClientTestCase(unittest.TestCase):
    """Idle engine (no background frames) over the small test world."""

    autostart = False

    def setUp(self):
        app = create_app(EngineConfig(log_level="WARNING"), SMALL_WORLD, autostart=self.autostart)
        self.client = TestClient(app)
        self.client.__enter__()
        self.addCleanup(self.client.__exit__, None, None, None)


class TestWorldRoutes(_ClientTestCase):

    def test_world(self):
        resp = self.client.get("/api/v1/world")
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["count"], 19)
        self.assertEqual(data["explored"], 0)
        self.assertEqual(data["tiles"][0]["id"], "q0-r0")
        self.assertEqual({"id", "biome", "q", "r", "explored", "cleared"}, set(data["tiles"][0]))

    def test_single_hex(self):
        resp = self.client.get("/api/v1/world/hexes/q0-r0")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["q"], 0)
        self.assertEqual(self.client.get("/api/v1/world/hexes/nope").status_code, 404)

    def test_click(self):
        first = self.client.post("/api/v1/world/hexes/q0-r0/click").json()
        self.assertTrue(first["changed"])
        self.assertTrue(first["tile"]["explored"])
        second = self.client.post("/api/v1/world/hexes/q0-r0/click").json()
        self.assertFalse(second["changed"])
        self.assertEqual(self.client.get("/api/v1/world").json()["explored"], 1)

    def test_click_unknown_hex(self):
        self.assertEqual(self.client.post("/api/v1/world/hexes/q99-r0/click").status_code, 404)


class TestEncounterRoutes(_ClientTestCase):

    def test_no_encounter(self):
        self.assertIsNone(self.client.get("/api/v1/encounter").json()["encounter"])
        self.assertEqual(self.client.post("/api/v1/encounter/start").json()["status"], "noop")
        self.assertEqual(self.client.post("/api/v1/encounter/close").json()["status"], "noop")

    def test_encounter_flow(self):
        self.client.post("/api/v1/world/hexes/q0-r0/click")
        enc = self.client.get("/api/v1/encounter").json()["encounter"]
        self.assertEqual(enc["hex_id"], "q0-r0")
        self.assertEqual(enc["fight_index"], 1)
        self.assertFalse(enc["running"])
        self.assertEqual(enc["player"]["name"], "Sprout")
        self.assertEqual(enc["player"]["gauge_max"], 40)

        self.assertEqual(self.client.post("/api/v1/encounter/start").json()["status"], "ok")
        self.assertTrue(self.client.get("/api/v1/encounter").json()["encounter"]["running"])
        self.assertEqual(self.client.post("/api/v1/encounter/close").json()["status"], "ok")
        self.assertIsNone(self.client.get("/api/v1/encounter").json()["encounter"])


class TestLogRoutes(_ClientTestCase):

    def test_logs_after_intents(self):
        self.client.post("/api/v1/world/hexes/q0-r0/click")
        data = self.client.get("/api/v1/logs").json()
        messages = [line["message"] for line in data["lines"]]
        self.assertEqual(messages, ["Hex explored (q0-r0)", "Encounter created (q0-r0)"])
        self.assertEqual(data["last_sequence"], 2)

    def test_since_cursor(self):
        self.client.post("/api/v1/world/hexes/q0-r0/click")
        self.client.post("/api/v1/encounter/start")
        data = self.client.get("/api/v1/logs", params={"since": 2}).json()
        self.assertEqual([line["message"] for line in data["lines"]], ["Combat started"])
        empty = self.client.get("/api/v1/logs", params={"since": 3}).json()
        self.assertEqual(empty["lines"], [])
        self.assertEqual(empty["last_sequence"], 3)

    def test_invalid_limit(self):
        self.assertEqual(self.client.get("/api/v1/logs", params={"limit": 0}).status_code, 422)


class TestControlRoutes(_ClientTestCase):

    def test_idle_stats(self):
        stats = self.client.get("/api/v1/stats").json()
        self.assertFalse(stats["running"])
        self.assertEqual(stats["target_tps"], 20)
        self.assertEqual(stats["total_ticks"], 0)

    def test_start_stop(self):
        self.assertEqual(self.client.post("/api/v1/control/start").json()["status"], "ok")
        self.assertEqual(self.client.post("/api/v1/control/start").json()["status"], "noop")
        self.assertTrue(self.client.get("/api/v1/stats").json()["running"])
        self.assertEqual(self.client.post("/api/v1/control/stop").json()["status"], "ok")
        self.assertEqual(self.client.post("/api/v1/control/stop").json()["status"], "noop")
        self.assertFalse(self.client.get("/api/v1/stats").json()["running"])

    def test_unknown_action(self):
        self.assertEqual(self.client.post("/api/v1/control/pause").status_code, 422)


class TestConfigRoutes(_ClientTestCase):

    def test_engine_config(self):
        data = self.client.get("/api/v1/config").json()
        self.assertEqual(data["tick_rate"], 20)
        self.assertEqual(data["player_pokemon_id"], "player-001")
        self.assertEqual(data["generation"]["seed"], "arena")

    def test_default_preset_is_camel_case(self):
        data = self.client.get("/api/v1/worldgen/default").json()
        self.assertEqual(data["chunkRadius"], 8)
        self.assertEqual(data["baseGenerator"]["centeredVoronoiNoise"]["pointsCount"], 12)

    def test_preview_default(self):
        payload = WorldGenerationPreset.from_config(DEFAULT_WORLD_GENERATION).to_json_dict()
        data = self.client.post("/api/v1/worldgen/preview", json=payload).json()
        self.assertEqual(data["count"], 127)
        self.assertEqual(len(data["sites"]), 12)
        self.assertEqual(data["chunks"], [])

    def test_preview_chunks(self):
        payload = {
            "seed": "preview",
            "chunkRadius": 3,
            "chunks": [
                {"id": "a", "coord": {"q": 0, "r": 0}, "biomeList": ["misty-swamp"]},
                {"id": "b", "coord": {"q": 1, "r": 0}, "biomeList": ["volcanic-crater"]},
            ],
        }
        data = self.client.post("/api/v1/worldgen/preview", json=payload).json()
        self.assertEqual([c["chunk_id"] for c in data["chunks"]], ["a", "b"])
        self.assertEqual(data["count"], sum(len(c["hex_ids"]) for c in data["chunks"]))

    def test_preview_rejects_unknown_generator(self):
        resp = self.client.post("/api/v1/worldgen/preview", json={"baseGenerator": {"type": "perlin"}})
        self.assertEqual(resp.status_code, 422)

    def test_preview_does_not_touch_live_world(self):
        self.client.post("/api/v1/worldgen/preview", json={"seed": "other"})
        self.assertEqual(self.client.get("/api/v1/world").json()["count"], 19)


class TestEngineHost(unittest.TestCase):

    def test_background_frames_advance_ticks(self):
        host = EngineHost(EngineConfig(), SMALL_WORLD)
        self.assertTrue(host.start())
        try:
            deadline = time.monotonic() + 3.0
            while host.stats().total_ticks == 0 and time.monotonic() < deadline:
                time.sleep(0.02)
            self.assertGreater(host.stats().total_ticks, 0)
        finally:
            self.assertTrue(host.stop())
        self.assertFalse(host.running)

    def test_intents_while_running(self):
        host = EngineHost(EngineConfig(), SMALL_WORLD)
        host.start()
        try:
            self.assertTrue(host.click_hex("q0-r0"))
            self.assertTrue(host.start_combat())
            self.assertIsNotNone(host.encounter_snapshot())
        finally:
            host.stop()
        self.assertGreaterEqual(len(host.event_log), 3)

    def test_concurrent_start_stop_leaves_consistent_state(self):
        host = EngineHost(EngineConfig(), SMALL_WORLD)
        barrier = threading.Barrier(8)

        def toggle(i):
            barrier.wait()
            for _ in range(20):
                if i % 2:
                    host.start()
                else:
                    host.stop()

        workers = [threading.Thread(target=toggle, args=(i,)) for i in range(8)]
        for w in workers:
            w.start()
        for w in workers:
            w.join()

        host.stop()
        self.assertFalse(host.running)
        self.assertFalse(host.frame_thread_alive)
        self.assertTrue(host.start())
        self.assertTrue(host.frame_thread_alive)
        host.stop()
        self.assertFalse(host.frame_thread_alive)

    def test_fresh_seed_when_no_world_configured(self):
        a = EngineHost(EngineConfig())
        b = EngineHost(EngineConfig())
        self.assertNotEqual(a.generation.seed, b.generation.seed)
        self.assertNotEqual(a.generation.seed, DEFAULT_WORLD_GENERATION.seed)
        self.assertEqual(a.generation.chunk_radius, DEFAULT_WORLD_GENERATION.chunk_radius)
        self.assertEqual(len(a.world_snapshot()), 127)

    def test_configured_seed_is_kept(self):
        host = EngineHost(EngineConfig(), DEFAULT_WORLD_GENERATION.with_seed("fixed"))
        self.assertEqual(host.generation.seed, "fixed")

    def test_dependency_requires_host(self):
        set_engine_host(None)
        with self.assertRaises(RuntimeError):
            get_engine_host()


class TestEventLog(unittest.TestCase):

    def test_sequences_survive_eviction(self):
        log = EventLog(maxlen=3)
        for i in range(5):
            log.append(f"line {i}", tick=i)
        self.assertEqual(len(log), 3)
        self.assertEqual([line.sequence for line in log.latest(10)], [3, 4, 5])
        self.assertEqual([line.message for line in log.since(4)], ["line 4"])

    def test_clear(self):
        log = EventLog()
        log.append("x")
        log.clear()
        self.assertEqual(log.latest(), [])


if __name__ == "__main__":
    unittest.main()
