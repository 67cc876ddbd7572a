"""
organism_sim module: world/rng.py

The single pseudo-random source every spawn, mutation and heading
perturbation draws from.
"""

from __future__ import annotations
import random
from typing import Optional


class RandomSource:
    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def random(self) -> float:
        return self._rng.random()

    def uniform(self, a: float, b: float) -> float:
        # order-insensitive range: uniform(1, -1) == uniform(-1, 1)
        return self.random() * abs(a - b) + min(a, b)
