# heckendorf/world/area.py
"""Tile storage and coordinate helpers for a dungeon area.

Tiles are kept row-major in flat numpy arrays so that a tile's index is
``row * width + col``.  ``tiles`` holds the :class:`TileKind` of every tile and
``regions`` the id of the connected region an empty tile belongs to
(``NO_REGION`` for walls).
"""

from __future__ import annotations

import numbers
from typing import Callable, Dict, Iterable, List, NamedTuple, Optional, Tuple

import numpy as np
import structlog

from heckendorf.constants import NO_REGION, TileKind
from heckendorf.world.errors import InvalidDimensions

log = structlog.get_logger(__name__)

Coord = Tuple[int, int]  # (row, col)

# Clockwise from north, as (d_row, d_col).
ADJACENT_OFFSETS: Tuple[Coord, ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))
NEIGHBOR_OFFSETS: Tuple[Coord, ...] = (
    (-1, 0),  # north
    (-1, 1),  # north-east
    (0, 1),  # east
    (1, 1),  # south-east
    (1, 0),  # south
    (1, -1),  # south-west
    (0, -1),  # west
    (-1, -1),  # north-west
)

WALL_CHAR = "#"
EMPTY_CHAR = "."


class Tile(NamedTuple):
    kind: TileKind
    region: Optional[int]


def init_metrics() -> Dict[str, int | float]:
    return {
        "rooms_placed": 0,
        "rooms_rejected": 0,
        "corridors_carved": 0,
        "loops_carved": 0,
        "loops_skipped": 0,
        "regions_merged": 0,
        "traces_discarded": 0,
        "attempts": 0,
        "runtime_ms": 0.0,
    }


def _is_size(value: object) -> bool:
    return (
        isinstance(value, numbers.Integral)
        and not isinstance(value, (bool, np.bool_))
        and value > 0
    )


class Area:
    def __init__(self, width: int, height: int):
        """Create an all-wall area of the given dimensions."""
        if not (_is_size(width) and _is_size(height)):
            log.error("Invalid area dimensions", width=width, height=height)
            raise InvalidDimensions(width, height)
        # numpy integers are accepted but stored as plain ints.
        width, height = int(width), int(height)
        self._width = width
        self._height = height
        self.tiles: np.ndarray = np.full(width * height, TileKind.WALL, dtype=np.uint8)
        self.regions: np.ndarray = np.full(width * height, NO_REGION, dtype=np.int64)
        self._last_region_id = NO_REGION
        self.metrics: Dict[str, int | float] = init_metrics()
        log.debug("Area initialized", width=width, height=height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> int:
        return self._width * self._height

    def new_region_id(self) -> int:
        """Allocate a region id that has never been used on this area."""
        self._last_region_id += 1
        return self._last_region_id

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._height and 0 <= col < self._width

    def index(self, row: int, col: int) -> Optional[int]:
        """Index of ``(row, col)``, or ``None`` when either axis is off the grid."""
        if not self.in_bounds(row, col):
            return None
        return row * self._width + col

    def coord(self, index: int) -> Coord:
        return coord_of(self._width, index)

    def tile_at(self, index: Optional[int]) -> Optional[Tile]:
        if index is None or not 0 <= index < self.size:
            return None
        kind = TileKind(int(self.tiles[index]))
        region = int(self.regions[index])
        return Tile(kind, None if region == NO_REGION else region)

    def is_empty(self, index: Optional[int]) -> bool:
        return index is not None and 0 <= index < self.size and bool(self.tiles[index] == TileKind.EMPTY)

    def is_wall(self, index: Optional[int]) -> bool:
        return index is not None and 0 <= index < self.size and bool(self.tiles[index] == TileKind.WALL)

    def region_at(self, index: int) -> Optional[int]:
        tile = self.tile_at(index)
        return tile.region if tile else None

    def carve(self, indexes: Iterable[int], region: int) -> None:
        """Turn the given tiles into empty floor tagged with ``region``."""
        idx = np.fromiter(indexes, dtype=np.int64)
        if idx.size == 0:
            return
        self.tiles[idx] = TileKind.EMPTY
        self.regions[idx] = region

    def grid(self) -> np.ndarray:
        """Tile kinds as a ``(height, width)`` view."""
        return self.tiles.reshape(self._height, self._width)

    def copy(self) -> "Area":
        clone = Area(self._width, self._height)
        clone.tiles[:] = self.tiles
        clone.regions[:] = self.regions
        clone._last_region_id = self._last_region_id
        clone.metrics = dict(self.metrics)
        return clone

    def render(self) -> str:
        """Plain-text view: one line per row, ``#`` for walls and ``.`` for floor."""
        lines = []
        for row in self.grid():
            lines.append("".join(EMPTY_CHAR if k == TileKind.EMPTY else WALL_CHAR for k in row))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Area(width={self._width}, height={self._height})"


def create_area(width: int, height: int) -> Area:
    return Area(width, height)


def index_of(width: int, row: int, col: int) -> Optional[int]:
    """Row-major index of ``(row, col)``.

    Only the column is checked against ``width``; a row outside the area still
    produces an index, so callers that care must check rows themselves.
    """
    if not 0 <= col < width:
        return None
    return row * width + col


def coord_of(width: int, index: int) -> Coord:
    return index // width, index % width


def tile_at(area: Area, index: Optional[int]) -> Optional[Tile]:
    return area.tile_at(index)


def _offset_tiles(index: int, area: Area, offsets: Tuple[Coord, ...]) -> List[int]:
    row, col = area.coord(index)
    found = []
    for d_row, d_col in offsets:
        i = area.index(row + d_row, col + d_col)
        if i is not None:
            found.append(i)
    return found


def adjacent_tiles(index: int, area: Area) -> List[int]:
    """In-grid indexes north, east, south and west of ``index``."""
    return _offset_tiles(index, area, ADJACENT_OFFSETS)


def neighboring_tiles(index: int, area: Area) -> List[int]:
    """In-grid indexes of all eight neighbours, clockwise from north."""
    return _offset_tiles(index, area, NEIGHBOR_OFFSETS)


def is_edge_tile(
    index: int,
    area: Area,
    neighbours: Callable[[int, Area], List[int]] = adjacent_tiles,
) -> bool:
    """An empty tile touching at least one wall."""
    return area.is_empty(index) and any(area.is_wall(i) for i in neighbours(index, area))


def is_corner_tile(index: int, area: Area) -> bool:
    return sum(1 for i in adjacent_tiles(index, area) if area.is_wall(i)) == 2


def random_coord_of(kind: TileKind, area: Area, rng) -> Coord:
    """Uniformly random coordinate of a tile of ``kind``."""
    candidates = np.flatnonzero(area.tiles == kind)
    if candidates.size == 0:
        raise ValueError(f"Area has no {kind.name.lower()} tiles")
    return area.coord(int(rng.choice(candidates)))


def pretty_print(area: Area) -> None:
    print(area.render())


__all__ = [
    "Area",
    "Coord",
    "Tile",
    "init_metrics",
    "create_area",
    "index_of",
    "coord_of",
    "tile_at",
    "adjacent_tiles",
    "neighboring_tiles",
    "is_edge_tile",
    "is_corner_tile",
    "random_coord_of",
    "pretty_print",
]
