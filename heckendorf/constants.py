from enum import IntEnum
from typing import Final


class TileKind(IntEnum):
    """Tile kinds stored in an area's tile array."""

    EMPTY = 0
    WALL = 1


# Region id stored on tiles that belong to no region (walls).
NO_REGION: Final[int] = 0

MIN_ROOM_LENGTH: Final[int] = 2
MAX_ROOM_LENGTH: Final[int] = 9
# Chance (percent) of carving a corridor that reconnects a region to itself.
ADDITIONAL_TUNNEL_PERC: Final[int] = 10
DEFAULT_MAX_ATTEMPTS: Final[int] = 100
DEFAULT_FOV_RADIUS: Final[int] = 8

__all__ = [
    "TileKind",
    "NO_REGION",
    "MIN_ROOM_LENGTH",
    "MAX_ROOM_LENGTH",
    "ADDITIONAL_TUNNEL_PERC",
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_FOV_RADIUS",
]
