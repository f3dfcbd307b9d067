import numpy as np
import pytest

from heckendorf.config import DungeonConfig
from heckendorf.constants import TileKind
from heckendorf.game_rng import GameRNG
from heckendorf.world.area import create_area
from heckendorf.world.errors import GenerationExhausted, InvalidDimensions
from heckendorf.world.procgen import (
    generate_dungeon,
    is_carved,
    is_connected,
    is_valid_dungeon,
)
from heckendorf.world.rooms import add_room


def test_validity_checks():
    area = create_area(10, 6)
    assert not is_carved(area)
    assert not is_connected(area)
    assert not is_valid_dungeon(area)

    add_room(2, 2, (1, 1), area)
    assert is_valid_dungeon(area)

    add_room(2, 2, (1, 5), area)
    assert is_carved(area)
    assert not is_connected(area)
    assert not is_valid_dungeon(area)


@pytest.mark.parametrize("seed", range(100))
def test_generate_dungeon_is_always_connected(seed):
    area = generate_dungeon(20, 20, 10, seed=seed)
    assert (area.width, area.height) == (20, 20)
    empty = area.tiles == TileKind.EMPTY
    assert empty.any()
    assert len(np.unique(area.regions[empty])) == 1
    assert (area.regions[~empty] == 0).all()
    assert 1 <= area.metrics["attempts"] <= 100


def test_generate_dungeon_is_reproducible_per_seed():
    first = generate_dungeon(30, 20, 15, seed=99)
    second = generate_dungeon(30, 20, 15, seed=99)
    assert np.array_equal(first.tiles, second.tiles)
    assert first.metrics["attempts"] == second.metrics["attempts"]


def test_generate_dungeon_accepts_rng_instance():
    rng = GameRNG(seed=5)
    area = generate_dungeon(25, 15, 12, rng=rng)
    assert is_valid_dungeon(area)


def test_generate_dungeon_keeps_outer_ring_solid():
    area = generate_dungeon(24, 16, 20, seed=3)
    grid = area.grid()
    assert (grid[0, :] == TileKind.WALL).all()
    assert (grid[-1, :] == TileKind.WALL).all()
    assert (grid[:, 0] == TileKind.WALL).all()
    assert (grid[:, -1] == TileKind.WALL).all()


def test_generate_dungeon_exhausts_without_rooms():
    config = DungeonConfig(max_attempts=3)
    with pytest.raises(GenerationExhausted) as excinfo:
        generate_dungeon(10, 10, 0, seed=1, config=config)
    assert excinfo.value.attempts == 3
    assert excinfo.value.room_attempts == 0


def test_generate_dungeon_exhausts_on_tiny_area():
    # No room fits inside a 3x3 area's outer ring.
    with pytest.raises(GenerationExhausted):
        generate_dungeon(3, 3, 50, seed=1, config=DungeonConfig(max_attempts=5))


def test_generate_dungeon_rejects_bad_arguments():
    with pytest.raises(InvalidDimensions):
        generate_dungeon(0, 10, 5, seed=1)
    with pytest.raises(ValueError):
        generate_dungeon(10, 10, -1, seed=1)


class RecordingLog:
    def __init__(self):
        self.errors = []

    def bind(self, **kwargs):
        return self

    def error(self, event, **kwargs):
        self.errors.append(event)

    def info(self, event, **kwargs):
        pass


def test_negative_room_attempts_logged_before_raising(monkeypatch):
    from heckendorf.world import procgen

    recorder = RecordingLog()
    monkeypatch.setattr(procgen, "log", recorder)
    with pytest.raises(ValueError):
        generate_dungeon(10, 10, -1, seed=1)
    assert recorder.errors == ["Negative room attempts"]
