"""Heckendorf: procedural room-and-corridor dungeons with octant field of view."""

from .config import DungeonConfig, load_config
from .constants import TileKind
from .game_rng import GameRNG
from .world import (
    Area,
    DungeonError,
    GenerationExhausted,
    InvalidDimensions,
    compute_visible,
    create_area,
    generate_dungeon,
    octant_shape,
)

__version__ = "0.1.0"

__all__ = [
    "DungeonConfig",
    "load_config",
    "TileKind",
    "GameRNG",
    "Area",
    "DungeonError",
    "GenerationExhausted",
    "InvalidDimensions",
    "compute_visible",
    "create_area",
    "generate_dungeon",
    "octant_shape",
]
