"""Exceptions raised by the dungeon generation pipeline."""

from __future__ import annotations


class DungeonError(Exception):
    """Base class for dungeon generation failures."""


class InvalidDimensions(DungeonError, ValueError):
    """Raised when an area is requested with a non-positive width or height."""

    def __init__(self, width: object, height: object) -> None:
        super().__init__(
            f"Area width and height must be positive integers (got {width!r}x{height!r})."
        )
        self.width = width
        self.height = height


class GenerationExhausted(DungeonError, RuntimeError):
    """Raised when no valid dungeon was produced within the retry ceiling."""

    def __init__(self, attempts: int, width: int, height: int, room_attempts: int) -> None:
        super().__init__(
            f"No valid dungeon after {attempts} attempts "
            f"({width}x{height}, {room_attempts} room attempts)."
        )
        self.attempts = attempts
        self.width = width
        self.height = height
        self.room_attempts = room_attempts


__all__ = ["DungeonError", "InvalidDimensions", "GenerationExhausted"]
