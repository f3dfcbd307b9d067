# heckendorf/world/rooms.py
from __future__ import annotations

from typing import List, Optional

import structlog

from heckendorf.config import DungeonConfig
from heckendorf.world.area import Area, Coord, index_of

log = structlog.get_logger(__name__)


def rect_indexes(w: int, h: int, origin: Coord, area_width: int) -> List[Optional[int]]:
    """Indexes of the ``w`` by ``h`` rectangle whose top-left tile is ``origin``."""
    row, col = origin
    return [
        index_of(area_width, y, x)
        for y in range(row, row + h)
        for x in range(col, col + w)
    ]


def within_boundaries(w: int, h: int, origin: Coord, area: Area) -> bool:
    """True if the room fits inside the area without touching its outer ring."""
    row, col = origin
    return 0 < row < row + h < area.height and 0 < col < col + w < area.width


def add_room(w: int, h: int, origin: Coord, area: Area) -> Area:
    """Carve a ``w`` by ``h`` room at ``origin`` if it has room to breathe.

    The room is accepted only when it lies inside the area and no tile in the
    ring around it is already empty, so two rooms never touch.  Accepted rooms
    get a fresh region id; rejected ones leave the area untouched.
    """
    if not within_boundaries(w, h, origin, area):
        area.metrics["rooms_rejected"] += 1
        log.debug("Room rejected", reason="out_of_bounds", w=w, h=h, origin=origin)
        return area

    boundary = rect_indexes(w + 2, h + 2, (origin[0] - 1, origin[1] - 1), area.width)
    if any(area.is_empty(i) for i in boundary):
        area.metrics["rooms_rejected"] += 1
        log.debug("Room rejected", reason="overlap", w=w, h=h, origin=origin)
        return area

    region = area.new_region_id()
    area.carve(rect_indexes(w, h, origin, area.width), region)
    area.metrics["rooms_placed"] += 1
    log.debug("Room carved", w=w, h=h, origin=origin, region=region)
    return area


def random_room(area: Area, rng, config: DungeonConfig) -> Area:
    w = rng.get_int(config.min_room_length, config.max_room_length)
    h = rng.get_int(config.min_room_length, config.max_room_length)
    origin = (rng.get_int(0, area.height - 1), rng.get_int(0, area.width - 1))
    return add_room(w, h, origin, area)


def generate_rooms(area: Area, room_attempts: int, rng, config: DungeonConfig) -> Area:
    for _ in range(room_attempts):
        random_room(area, rng, config)
    log.debug(
        "Room placement finished",
        attempts=room_attempts,
        placed=area.metrics["rooms_placed"],
        rejected=area.metrics["rooms_rejected"],
    )
    return area


__all__ = ["rect_indexes", "within_boundaries", "add_room", "random_room", "generate_rooms"]
