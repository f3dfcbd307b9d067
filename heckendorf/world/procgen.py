# heckendorf/world/procgen.py
import time
from typing import Optional

import structlog

from heckendorf.config import DungeonConfig
from heckendorf.constants import TileKind
from heckendorf.game_rng import GameRNG
from heckendorf.world.area import Area, create_area
from heckendorf.world.corridors import generate_corridors
from heckendorf.world.errors import GenerationExhausted
from heckendorf.world.regions import region_ids
from heckendorf.world.rooms import generate_rooms

log = structlog.get_logger(__name__)


def is_connected(area: Area) -> bool:
    """All carved tiles share one region id (and there is at least one)."""
    return len(region_ids(area)) == 1


def is_carved(area: Area) -> bool:
    return bool((area.tiles == TileKind.EMPTY).any())


def is_valid_dungeon(area: Area) -> bool:
    return is_connected(area) and is_carved(area)


def _generate_attempt(
    width: int, height: int, room_attempts: int, rng, config: DungeonConfig
) -> Area:
    area = create_area(width, height)
    generate_rooms(area, room_attempts, rng, config)
    generate_corridors(area, rng, config.additional_tunnel_perc)
    return area


def generate_dungeon(
    width: int,
    height: int,
    room_attempts: int,
    *,
    rng=None,
    seed: Optional[int] = None,
    config: Optional[DungeonConfig] = None,
) -> Area:
    """Generate a connected dungeon, regenerating from scratch until valid.

    Each attempt starts from a fresh all-wall area.  Raises
    :class:`GenerationExhausted` if ``config.max_attempts`` attempts all fail;
    an invalid area is never returned.
    """
    if config is None:
        config = DungeonConfig()
    if rng is None:
        rng = GameRNG(seed=seed if seed is not None else config.seed)
    if room_attempts < 0:
        log.error("Negative room attempts", room_attempts=room_attempts)
        raise ValueError("room_attempts must not be negative")

    log.info(
        "Starting dungeon generation",
        width=width,
        height=height,
        room_attempts=room_attempts,
        seed=getattr(rng, "initial_seed", None),
        max_attempts=config.max_attempts,
    )
    start = time.perf_counter()

    for attempt in range(1, config.max_attempts + 1):
        area = _generate_attempt(width, height, room_attempts, rng, config)
        if is_valid_dungeon(area):
            area.metrics["attempts"] = attempt
            area.metrics["runtime_ms"] = (time.perf_counter() - start) * 1000
            log.info(
                "Dungeon generation complete",
                attempts=attempt,
                rooms=area.metrics["rooms_placed"],
                corridors=area.metrics["corridors_carved"],
                loops=area.metrics["loops_carved"],
                runtime_ms=f"{area.metrics['runtime_ms']:.2f}",
            )
            return area
        log.info(
            "Discarding invalid dungeon attempt",
            attempt=attempt,
            rooms=area.metrics["rooms_placed"],
            regions=len(region_ids(area)),
        )

    log.error(
        "Dungeon generation exhausted",
        attempts=config.max_attempts,
        width=width,
        height=height,
        room_attempts=room_attempts,
    )
    raise GenerationExhausted(config.max_attempts, width, height, room_attempts)


__all__ = ["is_connected", "is_carved", "is_valid_dungeon", "generate_dungeon"]
