"""
Seeded RNG for reproducible seasons.
One instance is owned by a SeasonService and shared by pairing and scoring.
"""
from __future__ import annotations

import random
from typing import MutableSequence


class SeededRNG:
    """Wrapper around random.Random for reproducible simulations."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def randint(self, a: int, b: int) -> int:
        return self._rng.randint(a, b)

    def shuffle(self, seq: MutableSequence) -> None:
        self._rng.shuffle(seq)
