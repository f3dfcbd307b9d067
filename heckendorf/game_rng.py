"""Seedable random number source used by dungeon generation.

Wraps a numpy ``Generator`` so that a single integer seed reproduces a whole
generation run.  The generator only relies on three operations:

* ``get_int(a, b)`` -- uniform integer in the inclusive range ``[a, b]``
* ``perc_chance(percent)`` -- ``True`` with the given percent probability
* ``shuffle(seq)`` -- unbiased in-place shuffle

Anything providing those methods can stand in for :class:`GameRNG`.
"""

from __future__ import annotations

import random
from typing import Any, List, Optional, Sequence

import numpy as np


class GameRNG:
    def __init__(self, seed: Optional[int] = None) -> None:
        self.initial_seed = seed if seed is not None else random.randint(0, 2**32 - 1)
        self.rng = np.random.default_rng(self.initial_seed)

    # ------------------------------------------------------------------
    # basic random helpers
    # ------------------------------------------------------------------
    def get_int(self, a: int, b: int) -> int:
        if a > b:
            raise ValueError("a <= b")
        return int(self.rng.integers(a, b + 1))

    def get_float(self, a: float = 0.0, b: float = 1.0) -> float:
        if a > b:
            raise ValueError("a <= b")
        return a + (b - a) * float(self.rng.random())

    def perc_chance(self, percent: float) -> bool:
        """Return ``True`` with ``percent`` percent probability."""
        if not 0 <= percent <= 100:
            raise ValueError("percent out of range")
        return self.get_float(0.0, 100.0) < percent

    # ------------------------------------------------------------------
    # sequence utilities
    # ------------------------------------------------------------------
    def shuffle(self, seq: List[Any]) -> None:
        self.rng.shuffle(seq)

    def choice(self, seq: Sequence[Any]) -> Any:
        """Return a random element from *seq*."""
        if len(seq) == 0:
            raise ValueError("cannot choose from an empty sequence")
        return seq[self.get_int(0, len(seq) - 1)]


__all__ = ["GameRNG"]
