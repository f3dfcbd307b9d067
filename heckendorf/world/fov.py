# heckendorf/world/fov.py
"""
Field of view masking over a generated area.
Walks the octant line fans from :mod:`heckendorf.world.octants` with a
Numba-compiled loop: each line marks tiles visible until it leaves the area
or after it reaches the first wall.
"""

import time

import numba
import numpy as np
import structlog

from heckendorf.constants import TileKind
from heckendorf.world.area import EMPTY_CHAR, WALL_CHAR, Area, Coord
from heckendorf.world.octants import octant_shape

log = structlog.get_logger(__name__)

OBSERVER_CHAR = "@"
UNSEEN_CHAR = " "


@numba.njit(cache=True)
def _cast_lines(lines: np.ndarray, transparent: np.ndarray, visible: np.ndarray) -> None:
    """Mark tiles along each ``(row, col)`` line until it is blocked."""
    height, width = transparent.shape
    for n in range(lines.shape[0]):
        # Step 0 of every line is the origin itself.
        for i in range(1, lines.shape[1]):
            row = lines[n, i, 0]
            col = lines[n, i, 1]
            if row < 0 or row >= height or col < 0 or col >= width:
                break
            visible[row, col] = True
            if not transparent[row, col]:
                break


def octant_lines(radius: int, origin: Coord) -> np.ndarray:
    """All octant lines of ``radius`` as an ``(n_lines, radius, 2)`` array."""
    shape = octant_shape(radius, origin)
    if radius == 0:
        return np.empty((0, 0, 2), dtype=np.int64)
    return np.asarray(shape, dtype=np.int64).reshape(-1, radius, 2)


def compute_visible(area: Area, origin: Coord, radius: int) -> np.ndarray:
    """Boolean ``(height, width)`` mask of tiles visible from ``origin``."""
    func_log = log.bind(origin=origin, radius=radius)
    row, col = origin
    if not area.in_bounds(row, col):
        func_log.error("FOV origin out of bounds", width=area.width, height=area.height)
        raise ValueError("Origin coordinates out of bounds")
    if radius < 0:
        func_log.error("Negative FOV radius")
        raise ValueError("radius must not be negative")

    start_time = time.perf_counter()
    transparent = area.grid() == TileKind.EMPTY
    visible = np.zeros((area.height, area.width), dtype=np.bool_)
    visible[row, col] = True
    if radius > 1:
        _cast_lines(octant_lines(radius, origin), transparent, visible)

    func_log.debug(
        "FOV computation finished",
        duration_ms=f"{(time.perf_counter() - start_time) * 1000:.2f}",
        visible_count=int(visible.sum()),
    )
    return visible


def render_visibility(area: Area, visible: np.ndarray, origin: Coord) -> str:
    """Like :meth:`Area.render` but unseen tiles are blank and the observer is ``@``."""
    grid = area.grid()
    lines = []
    for r in range(area.height):
        chars = []
        for c in range(area.width):
            if (r, c) == tuple(origin):
                chars.append(OBSERVER_CHAR)
            elif not visible[r, c]:
                chars.append(UNSEEN_CHAR)
            elif grid[r, c] == TileKind.EMPTY:
                chars.append(EMPTY_CHAR)
            else:
                chars.append(WALL_CHAR)
        lines.append("".join(chars))
    return "\n".join(lines)


__all__ = ["octant_lines", "compute_visible", "render_visibility"]
