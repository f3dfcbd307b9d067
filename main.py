# main.py
"""Command line entry point: generate a dungeon and print it."""

import argparse
import dataclasses
import logging
import sys
import time
from pathlib import Path
from typing import List, Optional

import structlog
import yaml

from heckendorf.config import DEFAULT_CONFIG_FILE, DungeonConfig, load_yaml_config
from heckendorf.constants import TileKind
from heckendorf.game_rng import GameRNG
from heckendorf.utils.logging_utils import setup_logging
from heckendorf.world.area import random_coord_of
from heckendorf.world.errors import DungeonError
from heckendorf.world.fov import compute_visible, render_visibility
from heckendorf.world.procgen import generate_dungeon

log = structlog.get_logger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a room-and-corridor dungeon and print it as text."
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=DEFAULT_CONFIG_FILE,
        help=f"YAML config file (default: {DEFAULT_CONFIG_FILE})",
    )
    parser.add_argument("--width", type=int, help="Area width in tiles.")
    parser.add_argument("--height", type=int, help="Area height in tiles.")
    parser.add_argument(
        "--room-attempts", type=int, help="Random room placements per attempt."
    )
    parser.add_argument("--seed", type=int, help="Seed for the RNG.")
    parser.add_argument(
        "--max-attempts", type=int, help="Whole-dungeon retries before giving up."
    )
    parser.add_argument(
        "--fov-radius",
        type=int,
        help="Also print the view from a random floor tile with this radius (0 disables).",
    )
    parser.add_argument(
        "--log-level", choices=LOG_LEVELS, default="INFO", help="Logging level"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def resolve_config(args: argparse.Namespace, file_config: dict) -> DungeonConfig:
    """File settings first, then any command line overrides."""
    config = DungeonConfig.from_mapping(file_config.get("dungeon") or {})
    overrides = {
        "width": args.width,
        "height": args.height,
        "room_attempts": args.room_attempts,
        "seed": args.seed,
        "max_attempts": args.max_attempts,
        "fov_radius": args.fov_radius,
    }
    return dataclasses.replace(
        config, **{k: v for k, v in overrides.items() if v is not None}
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else args.log_level)

    try:
        file_config = load_yaml_config(args.config, "Dungeon")
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        config = resolve_config(args, file_config)
    except (TypeError, ValueError) as e:
        log.error("Invalid dungeon configuration", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    start_time = time.perf_counter()
    rng = GameRNG(seed=config.seed)
    log.info("Using dungeon seed", seed=rng.initial_seed)
    try:
        area = generate_dungeon(
            config.width, config.height, config.room_attempts, rng=rng, config=config
        )
    except (DungeonError, ValueError) as e:
        log.error("Dungeon generation failed", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(area.render())
    if config.fov_radius > 0:
        origin = random_coord_of(TileKind.EMPTY, area, rng)
        visible = compute_visible(area, origin, config.fov_radius)
        print()
        print(f"View from {origin} (radius {config.fov_radius}):")
        print(render_visibility(area, visible, origin))

    log.info(
        "Finished",
        seed=rng.initial_seed,
        attempts=area.metrics["attempts"],
        total_ms=f"{(time.perf_counter() - start_time) * 1000:.2f}",
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
