# heckendorf/world/octants.py
"""Octant line patterns used for field-of-view masking.

A radius ``r`` view is split into eight octants.  Each octant is a fan of
``r``-tile lines leaving the origin: the first line runs straight along an
axis and every following line leans a little further towards the diagonal.
The lean is given by :func:`eighth_pivot`, a staircase of per-step sideways
offsets, and every octant is the same staircase reflected or transposed::

    >>> eighth_pivot(3)
    [[0, 0, 0], [0, 0, 1], [0, 1, 1], [0, 1, 2]]

A caller walking each line outward until it meets a wall gets the set of
tiles visible from the origin (see :mod:`heckendorf.world.fov`).
"""

from __future__ import annotations

from enum import IntEnum
from typing import Callable, List, Tuple

from heckendorf.world.area import Coord

Line = List[Coord]
Pivot = List[List[int]]
OctantShape = Tuple[List[Line], ...]


class Octant(IntEnum):
    """Index of each octant in :func:`octant_shape`; main axis first."""

    NNE = 0
    ENE = 1
    ESE = 2
    SSE = 3
    SSW = 4
    WSW = 5
    WNW = 6
    NNW = 7


def add_y(coord: Coord, n: int) -> Coord:
    return coord[0] + n, coord[1]


def add_x(coord: Coord, n: int) -> Coord:
    return coord[0], coord[1] + n


def sub_y(coord: Coord, n: int) -> Coord:
    return coord[0] - n, coord[1]


def sub_x(coord: Coord, n: int) -> Coord:
    return coord[0], coord[1] - n


def pos_line_y(length: int, origin: Coord) -> Line:
    y, x = origin
    return [(rising_y, x) for rising_y in range(y, y + length)]


def pos_line_x(length: int, origin: Coord) -> Line:
    y, x = origin
    return [(y, rising_x) for rising_x in range(x, x + length)]


def neg_line_y(length: int, origin: Coord) -> Line:
    y, x = origin
    return [(falling_y, x) for falling_y in range(y, y - length, -1)]


def neg_line_x(length: int, origin: Coord) -> Line:
    y, x = origin
    return [(y, falling_x) for falling_x in range(x, x - length, -1)]


def eighth_pivot(length: int) -> Pivot:
    """Successive sideways offsets for the lines of one octant.

    Starts from ``length`` zeros.  For each ring ``k`` from 1 to
    ``length - 1`` the positions ``length - 1`` down to ``k`` are incremented
    one at a time, and every intermediate state is kept.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    current = [0] * length
    snapshots = [list(current)]
    for k in range(1, length):
        for position in range(length - 1, k - 1, -1):
            current[position] += 1
            snapshots.append(list(current))
    return snapshots


def apply_pivot(
    pivot_fn: Callable[[int], Pivot],
    line_fn: Callable[[int, Coord], Line],
    translate_fn: Callable[[Coord, int], Coord],
    length: int,
    origin: Coord,
) -> List[Line]:
    """Shift the baseline from ``line_fn`` by every step of the pivot."""
    baseline = line_fn(length, origin)
    return [
        [translate_fn(coord, offset) for coord, offset in zip(baseline, step)]
        for step in pivot_fn(length)
    ]


# (baseline, sideways translation) per octant, in Octant order.
OCTANT_TRANSFORMS: Tuple[Tuple[Callable[[int, Coord], Line], Callable[[Coord, int], Coord]], ...] = (
    (neg_line_y, add_x),
    (pos_line_x, sub_y),
    (pos_line_x, add_y),
    (pos_line_y, add_x),
    (pos_line_y, sub_x),
    (neg_line_x, add_y),
    (neg_line_x, sub_y),
    (neg_line_y, sub_x),
)


def octant_shape(radius: int, origin: Coord) -> OctantShape:
    """The eight octant line fans of ``radius`` tiles around ``origin``."""
    if radius < 0:
        raise ValueError("radius must not be negative")
    return tuple(
        apply_pivot(eighth_pivot, line_fn, translate_fn, radius, origin)
        for line_fn, translate_fn in OCTANT_TRANSFORMS
    )


__all__ = [
    "Octant",
    "OCTANT_TRANSFORMS",
    "eighth_pivot",
    "apply_pivot",
    "octant_shape",
    "pos_line_y",
    "pos_line_x",
    "neg_line_y",
    "neg_line_x",
    "add_y",
    "add_x",
    "sub_y",
    "sub_x",
]
