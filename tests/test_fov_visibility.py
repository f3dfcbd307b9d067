import numpy as np
import pytest

from heckendorf.world.area import create_area
from heckendorf.world.fov import compute_visible, octant_lines, render_visibility
from heckendorf.world.procgen import generate_dungeon


def open_room():
    area = create_area(9, 9)
    area.carve(
        [area.index(r, c) for r in range(1, 8) for c in range(1, 8)],
        area.new_region_id(),
    )
    return area


def blocked_corridor():
    """A one-tile corridor on row 1 with a wall at column 5."""
    area = create_area(9, 3)
    region = area.new_region_id()
    area.carve([area.index(1, c) for c in (1, 2, 3, 4, 6, 7)], region)
    return area


def test_octant_lines_shape():
    lines = octant_lines(4, (2, 3))
    assert lines.shape == (8 * 7, 4, 2)
    assert (lines[:, 0] == [2, 3]).all()
    assert octant_lines(0, (0, 0)).shape == (0, 0, 2)


def test_origin_always_visible():
    area = open_room()
    visible = compute_visible(area, (4, 4), 0)
    assert visible.shape == (9, 9)
    assert visible.sum() == 1
    assert visible[4, 4]


def test_open_room_sees_surrounding_walls():
    area = open_room()
    visible = compute_visible(area, (4, 4), 5)
    assert visible[1, 4] and visible[7, 4]
    assert visible[0, 4] and visible[8, 4]
    assert visible[4, 0] and visible[4, 8]
    assert visible[1, 1] and visible[7, 7]


def test_radius_limits_view():
    area = open_room()
    visible = compute_visible(area, (4, 4), 3)
    assert visible[2, 4]
    assert not visible[1, 4]
    assert not visible[0, 0]


def test_walls_block_visibility():
    area = blocked_corridor()
    visible = compute_visible(area, (1, 2), 7)
    assert visible[1, 3] and visible[1, 4]
    # The wall itself is seen, nothing past it.
    assert visible[1, 5]
    assert not visible[1, 6]
    assert not visible[1, 7]
    assert visible[0, 2] and visible[2, 2]


def test_origin_out_of_bounds_raises():
    area = open_room()
    with pytest.raises(ValueError):
        compute_visible(area, (9, 0), 4)
    with pytest.raises(ValueError):
        compute_visible(area, (0, -1), 4)
    with pytest.raises(ValueError):
        compute_visible(area, (4, 4), -1)


def test_view_near_area_edge():
    area = open_room()
    visible = compute_visible(area, (1, 1), 8)
    assert visible[0, 0]
    assert visible[1, 7]


def test_generated_dungeon_view_only_crosses_floor():
    area = generate_dungeon(30, 20, 15, seed=11)
    origin = tuple(int(v) for v in np.argwhere(area.grid() == 0)[0])
    visible = compute_visible(area, origin, 8)
    assert visible[origin]
    assert visible.sum() > 1


def test_render_visibility():
    area = blocked_corridor()
    visible = compute_visible(area, (1, 2), 0)
    assert render_visibility(area, visible, (1, 2)) == " " * 9 + "\n  @      \n" + " " * 9

    visible = compute_visible(area, (1, 2), 7)
    rows = render_visibility(area, visible, (1, 2)).splitlines()
    assert rows[1] == "#.@..#   "


class RecordingLog:
    def __init__(self):
        self.errors = []

    def bind(self, **kwargs):
        return self

    def error(self, event, **kwargs):
        self.errors.append(event)


def test_errors_logged_before_raising(monkeypatch):
    from heckendorf.world import fov

    recorder = RecordingLog()
    monkeypatch.setattr(fov, "log", recorder)
    area = open_room()
    with pytest.raises(ValueError):
        compute_visible(area, (4, 4), -2)
    with pytest.raises(ValueError):
        compute_visible(area, (20, 4), 3)
    assert recorder.errors == ["Negative FOV radius", "FOV origin out of bounds"]
