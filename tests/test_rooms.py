import numpy as np

from heckendorf.config import DungeonConfig
from heckendorf.constants import TileKind
from heckendorf.world.area import create_area
from heckendorf.world.regions import region_ids, region_sizes
from heckendorf.world.rooms import add_room, generate_rooms, random_room, within_boundaries


class DummyRNG:
    """Returns the lower bound of every range."""

    def get_int(self, a, b):
        return a


class ScriptedRNG:
    def __init__(self, values):
        self.values = list(values)

    def get_int(self, a, b):
        value = self.values.pop(0)
        assert a <= value <= b
        return value


def test_add_room_on_five_by_five():
    area = create_area(5, 5)
    add_room(2, 2, (1, 1), area)
    empty = {int(i) for i in np.flatnonzero(area.tiles == TileKind.EMPTY)}
    assert empty == {6, 7, 11, 12}
    assert int((area.tiles == TileKind.WALL).sum()) == 21
    assert area.render() == "#####\n#..##\n#..##\n#####\n#####"


def test_add_room_carves_w_times_h_with_one_region():
    area = create_area(12, 10)
    add_room(4, 3, (2, 3), area)
    assert int((area.tiles == TileKind.EMPTY).sum()) == 12
    assert region_sizes(area) == {1: 12}
    assert area.metrics["rooms_placed"] == 1


def test_within_boundaries_keeps_outer_ring_solid():
    area = create_area(10, 8)
    assert within_boundaries(8, 6, (1, 1), area)
    assert not within_boundaries(9, 2, (1, 1), area)
    assert not within_boundaries(2, 7, (1, 1), area)
    assert not within_boundaries(2, 2, (0, 1), area)
    assert not within_boundaries(2, 2, (1, 0), area)


def test_out_of_bounds_room_leaves_area_unchanged():
    area = create_area(6, 6)
    before_tiles = area.tiles.copy()
    add_room(3, 3, (4, 4), area)
    assert np.array_equal(area.tiles, before_tiles)
    assert area.metrics["rooms_rejected"] == 1
    assert area.metrics["rooms_placed"] == 0


def test_overlapping_room_leaves_area_unchanged():
    area = create_area(12, 10)
    add_room(3, 3, (1, 1), area)
    before_tiles = area.tiles.copy()
    before_regions = area.regions.copy()

    # Touches the first room's right side without overlapping it.
    add_room(2, 2, (1, 4), area)
    assert np.array_equal(area.tiles, before_tiles)
    assert np.array_equal(area.regions, before_regions)

    # Fully on top of it.
    add_room(2, 2, (2, 2), area)
    assert np.array_equal(area.tiles, before_tiles)
    assert area.metrics["rooms_rejected"] == 2


def test_rooms_one_wall_apart_get_distinct_regions():
    area = create_area(12, 10)
    add_room(2, 2, (1, 1), area)
    add_room(2, 2, (1, 4), area)
    assert region_ids(area) == {1, 2}
    assert area.metrics["rooms_placed"] == 2


def test_random_room_uses_rng_for_size_and_origin():
    area = create_area(10, 10)
    config = DungeonConfig(min_room_length=2, max_room_length=4)
    rng = ScriptedRNG([3, 2, 4, 5])
    random_room(area, rng, config)
    assert rng.values == []
    assert area.render().splitlines()[4] == "#####...##"
    assert area.render().splitlines()[5] == "#####...##"
    assert int((area.tiles == TileKind.EMPTY).sum()) == 6


def test_generate_rooms_with_lower_bound_rng_rejects_every_room():
    # Origin (0, 0) touches the outer ring every time.
    area = create_area(10, 10)
    generate_rooms(area, 5, DummyRNG(), DungeonConfig())
    assert area.metrics["rooms_rejected"] == 5
    assert not (area.tiles == TileKind.EMPTY).any()
