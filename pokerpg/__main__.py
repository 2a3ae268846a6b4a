"""Entry point: ``python -m pokerpg``.

Supports three modes:
  - ``python -m pokerpg``            → Launch the FastAPI host API
  - ``python -m pokerpg cli``        → Headless run on a simulated frame clock
  - ``python -m pokerpg worldgen``   → Generate a world and print a summary / preset
"""

from __future__ import annotations

import argparse
import json
import logging
from collections import Counter
from dataclasses import replace
from pathlib import Path

logger = logging.getLogger(__name__)


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {value}")
    return value


def _add_world_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--seed", type=str, default=None, help="World seed (overrides the preset)")
    p.add_argument("--preset", type=str, default=None, help="Generation preset JSON file")
    p.add_argument("--chunks-dir", type=str, default=None, help="Directory of chunk-*.json files")


def _add_engine_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--tps", type=_positive_int, default=20)
    p.add_argument("--enemy-selection", type=str, default="random", choices=["random", "seeded"])
    p.add_argument("--selection-seed", type=int, default=42)
    p.add_argument("--anti-repeat", action="store_true")
    p.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Deterministic incremental-RPG simulation core")
    sub = parser.add_subparsers(dest="command")

    # --- Server mode (default) ---
    srv = sub.add_parser("serve", help="Start the FastAPI host API (default)")
    srv.add_argument("--host", type=str, default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)
    _add_world_args(srv)
    _add_engine_args(srv)

    # --- Headless CLI mode ---
    cli = sub.add_parser("cli", help="Explore and fight headlessly on a simulated clock")
    cli.add_argument("--hexes", type=int, default=3, help="Number of hexes to explore")
    cli.add_argument("--max-ticks", type=int, default=20_000, help="Tick cap per encounter")
    _add_world_args(cli)
    _add_engine_args(cli)

    # --- World generation ---
    wg = sub.add_parser("worldgen", help="Generate a world and print a summary")
    wg.add_argument("--dump-preset", action="store_true", help="Print the preset JSON instead")
    wg.add_argument("--log-level", type=str, default="WARNING", choices=["DEBUG", "INFO", "WARNING"])
    _add_world_args(wg)

    return parser


def _engine_config(args: argparse.Namespace):
    from pokerpg.config import EngineConfig

    return EngineConfig(
        tick_rate=args.tps,
        enemy_selection=args.enemy_selection,
        enemy_selection_seed=args.selection_seed,
        enemy_anti_repeat=args.anti_repeat,
        log_level=args.log_level,
    )


def _generation_config(args: argparse.Namespace):
    from pokerpg.systems.chunk_loader import load_chunk_configs
    from pokerpg.systems.generation_config import DEFAULT_WORLD_GENERATION
    from pokerpg.systems.presets import WorldGenerationPreset
    from pokerpg.systems.seed import create_seed_string

    generation = DEFAULT_WORLD_GENERATION
    if args.preset:
        text = Path(args.preset).read_text(encoding="utf-8")
        generation = WorldGenerationPreset.model_validate_json(text).to_config()
    if args.chunks_dir:
        generation = replace(generation, chunks=load_chunk_configs(args.chunks_dir))
    if args.seed is not None:
        generation = generation.with_seed(args.seed)
    elif not args.preset:
        generation = generation.with_seed(create_seed_string())
    return generation


def _run_server(args: argparse.Namespace) -> None:
    import uvicorn

    from pokerpg.api.app import create_app

    config = _engine_config(args)
    app = create_app(config, _generation_config(args))
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())


def _run_cli(args: argparse.Namespace) -> None:
    from pokerpg.engine.factory import build_engine
    from pokerpg.utils.logging import setup_logging

    config = _engine_config(args)
    setup_logging(config.log_level)

    engine = build_engine(config, _generation_config(args))
    engine.on_log(lambda line: logger.debug("%s", line))
    engine.start()

    frame_ms = config.frame_interval_seconds * 1000.0
    clock_ms = 0.0
    engine.runner.on_frame(clock_ms)

    world = engine.get_world_snapshot()
    cleared = 0
    for hex_id in world.ids[: max(0, args.hexes)]:
        engine.on_hex_clicked(hex_id)
        engine.start_combat()

        start_tick = engine.runner.tick_index
        while True:
            snap = engine.get_encounter_snapshot()
            if snap is None or not snap.running:
                break
            if engine.runner.tick_index - start_tick >= args.max_ticks:
                logger.warning("Encounter at %s hit the tick cap", hex_id)
                break
            clock_ms += frame_ms
            engine.runner.on_frame(clock_ms)

        snap = engine.get_encounter_snapshot()
        tile = engine.get_world_snapshot().by_id[hex_id]
        if tile.cleared:
            cleared += 1
        logger.info(
            "Hex %-10s biome=%-17s fights=%d/%d player_hp=%d/%d %s",
            hex_id, tile.biome,
            snap.fight_index if snap else 0, snap.fight_target if snap else 0,
            snap.player.hp if snap else 0, snap.player.hp_max if snap else 0,
            "CLEARED" if tile.cleared else "defeat",
        )
        engine.close_encounter()

    stats = engine.runner.get_stats()
    engine.stop()
    logger.info(
        "Done. %d/%d hexes cleared in %d ticks (%.1f s simulated).",
        cleared, min(args.hexes, len(world)), stats.total_ticks, stats.simulated_time_ms / 1000.0,
    )


def _run_worldgen(args: argparse.Namespace) -> None:
    from pokerpg.systems.generator import generate_world
    from pokerpg.systems.presets import WorldGenerationPreset
    from pokerpg.utils.logging import setup_logging

    setup_logging(args.log_level)
    generation = _generation_config(args)

    if args.dump_preset:
        print(json.dumps(WorldGenerationPreset.from_config(generation).to_json_dict(), indent=2))
        return

    result = generate_world(generation)
    biomes = Counter(t.biome for t in result.tiles)
    print(f"seed={generation.seed!r} tiles={len(result.tiles)}")
    for biome, count in biomes.most_common():
        print(f"  {biome:<18} {count}")
    if result.voronoi:
        print(f"sites={len(result.voronoi.sites)} jitter={result.voronoi.jitter}")


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Default to serve mode if no subcommand given
    if args.command is None or args.command == "serve":
        if args.command is None:
            # Re-parse with serve defaults
            args = parser.parse_args(["serve"])
        _run_server(args)
    elif args.command == "cli":
        _run_cli(args)
    elif args.command == "worldgen":
        _run_worldgen(args)


if __name__ == "__main__":
    main()
