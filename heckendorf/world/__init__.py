"""Dungeon layout generation and field-of-view geometry.

``generate_dungeon`` places random rooms on an all-wall area, joins them
with straight corridors and retries until every carved tile belongs to a
single region.  ``octant_shape`` and ``compute_visible`` work on any area.
"""

from .area import Area, Tile, create_area, coord_of, index_of, tile_at
from .errors import DungeonError, GenerationExhausted, InvalidDimensions
from .fov import compute_visible, render_visibility
from .octants import Octant, eighth_pivot, octant_shape
from .procgen import generate_dungeon, is_valid_dungeon

__all__ = [
    "Area",
    "Tile",
    "create_area",
    "coord_of",
    "index_of",
    "tile_at",
    "DungeonError",
    "GenerationExhausted",
    "InvalidDimensions",
    "compute_visible",
    "render_visibility",
    "Octant",
    "eighth_pivot",
    "octant_shape",
    "generate_dungeon",
    "is_valid_dungeon",
]
