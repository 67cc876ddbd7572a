"""
organism_sim module: organism/entity.py

Entity primitive: a point forager with a heading, an energy budget and
three heritable traits (speed, size, sense).
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

import config


def clamp_trait(value: float) -> float:
    return max(config.TRAIT_MIN, min(config.TRAIT_MAX, value))


@dataclass(eq=False)
class Entity:
    x: float
    y: float
    direction: float = 0.0
    energy: float = 1.0

    # heritable traits; spawning clamps them to [TRAIT_MIN, TRAIT_MAX]
    speed: float = 1.0
    size: float = 1.0
    sense: float = 1.0

    # id of the targeted food; the FoodField owns the pellet itself
    target: Optional[int] = None

    def grow(self) -> None:
        """
        Slow size growth, once per tick. Growth may step past the ceiling;
        the overshoot is clamped back on the following tick.
        """
        if self.size > config.TRAIT_MAX:
            self.size = config.TRAIT_MAX
        elif self.size < config.TRAIT_MAX:
            self.size += config.SIZE_GROWTH

    def upkeep(self, energy_rate: float) -> float:
        # bulk costs cubically, speed quadratically, sense linearly
        return energy_rate * (self.size ** 3 * self.speed ** 2 + self.sense)
