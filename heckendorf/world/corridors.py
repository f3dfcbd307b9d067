# heckendorf/world/corridors.py
"""Straight corridor tracing between carved regions.

Every empty tile that touches a wall is a starting point.  From it we walk
in a straight line through each neighbouring wall until we either fall off
the area (no corridor) or hit another empty tile.  The walked path becomes a
corridor: between two different regions it is always carved and the regions
are merged, while a path that loops back into its own region is only kept
occasionally.
"""

from __future__ import annotations

from typing import List, Optional

import numpy as np
import structlog

from heckendorf.constants import ADDITIONAL_TUNNEL_PERC, TileKind
from heckendorf.world.area import Area, Coord, adjacent_tiles
from heckendorf.world.regions import merge_regions, region_of

log = structlog.get_logger(__name__)


def edge_tiles(area: Area) -> List[int]:
    """Indexes of empty tiles with at least one wall north, east, south or west."""
    grid = area.grid()
    walls = np.pad(grid == TileKind.WALL, 1, constant_values=False)
    touches_wall = walls[:-2, 1:-1] | walls[2:, 1:-1] | walls[1:-1, :-2] | walls[1:-1, 2:]
    edges = (grid == TileKind.EMPTY) & touches_wall
    return [int(i) for i in np.flatnonzero(edges)]


def adjacent_walls(index: int, area: Area) -> List[int]:
    return [i for i in adjacent_tiles(index, area) if area.is_wall(i)]


def walk_until(area: Area, start: Coord, direction: Coord) -> Optional[List[Coord]]:
    """Step from ``start`` along ``direction`` until an empty tile is reached.

    Returns the visited coordinates from ``start`` to the empty tile, or
    ``None`` if the walk leaves the area first.
    """
    d_row, d_col = direction
    path = [start]
    row, col = start
    while True:
        row, col = row + d_row, col + d_col
        index = area.index(row, col)
        if index is None:
            return None
        path.append((row, col))
        if area.is_empty(index):
            return path


def trace_corridors(index: int, area: Area) -> List[List[Coord]]:
    """Candidate corridor paths leading away from the edge tile at ``index``."""
    start = area.coord(index)
    paths = []
    for wall in adjacent_walls(index, area):
        wall_row, wall_col = area.coord(wall)
        direction = (wall_row - start[0], wall_col - start[1])
        path = walk_until(area, start, direction)
        if path is None:
            area.metrics["traces_discarded"] += 1
            continue
        paths.append(path)
    return paths


def create_corridor(
    area: Area,
    path: List[Coord],
    rng,
    additional_tunnel_perc: float = ADDITIONAL_TUNNEL_PERC,
) -> Area:
    """Carve the inside of ``path`` and merge the regions at its two ends."""
    region_a = region_of(area, path[0])
    region_b = region_of(area, path[-1])
    indexes = [area.index(row, col) for row, col in path[1:-1]]

    if region_a == region_b:
        if rng.perc_chance(additional_tunnel_perc):
            area.carve(indexes, region_b)
            area.metrics["loops_carved"] += 1
            log.debug("Loop corridor carved", start=path[0], end=path[-1], region=region_b)
        else:
            area.metrics["loops_skipped"] += 1
        return area

    area.carve(indexes, region_b)
    merge_regions(area, region_a, region_b)
    area.metrics["corridors_carved"] += 1
    log.debug(
        "Corridor carved",
        start=path[0],
        end=path[-1],
        length=len(indexes),
        merged=region_a,
        into=region_b,
    )
    return area


def create_corridors(
    area: Area,
    index: int,
    rng,
    additional_tunnel_perc: float = ADDITIONAL_TUNNEL_PERC,
) -> Area:
    for path in trace_corridors(index, area):
        create_corridor(area, path, rng, additional_tunnel_perc)
    return area


def generate_corridors(
    area: Area,
    rng,
    additional_tunnel_perc: float = ADDITIONAL_TUNNEL_PERC,
) -> Area:
    edges = edge_tiles(area)
    rng.shuffle(edges)
    log.debug("Tracing corridors", edge_tiles=len(edges))
    for index in edges:
        create_corridors(area, index, rng, additional_tunnel_perc)
    return area


__all__ = [
    "edge_tiles",
    "adjacent_walls",
    "walk_until",
    "trace_corridors",
    "create_corridor",
    "create_corridors",
    "generate_corridors",
]
