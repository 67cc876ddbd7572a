"""
organism_sim module: world/food.py

Food system:
- Pellets are bare points scattered uniformly over the arena
- A fractional accumulator turns the per-tick food rate into whole pellets
- Entities hold pellet ids, never pellets; an id whose pellet was eaten
  simply stops resolving
"""

from __future__ import annotations
from dataclasses import dataclass
import itertools
import math
from typing import Dict, Iterator, List, Optional

from world.rng import RandomSource


@dataclass(eq=False)
class Food:
    id: int
    x: float
    y: float


def distance(ax: float, ay: float, bx: float, by: float) -> float:
    return math.hypot(bx - ax, by - ay)


class FoodField:
    def __init__(self, w: float, h: float, rng: RandomSource, radius: float = 1.0):
        self.w = w
        self.h = h
        self.rng = rng
        self.radius = radius
        self.pellets: List[Food] = []
        self._by_id: Dict[int, Food] = {}
        self._ids = itertools.count()

        self.spawn_accum = 0.0

    def __len__(self) -> int:
        return len(self.pellets)

    def __iter__(self) -> Iterator[Food]:
        return iter(self.pellets)

    def __contains__(self, food_id: object) -> bool:
        return food_id in self._by_id

    def get(self, food_id: Optional[int]) -> Optional[Food]:
        if food_id is None:
            return None
        return self._by_id.get(food_id)

    def spawn(self) -> Food:
        """Place one pellet uniformly inside the arena, inset by the food radius."""
        x = self.rng.uniform(self.radius, self.w - self.radius)
        y = self.rng.uniform(self.radius, self.h - self.radius)
        pellet = Food(id=next(self._ids), x=x, y=y)
        self.pellets.append(pellet)
        self._by_id[pellet.id] = pellet
        return pellet

    def update(self, rate: float) -> int:
        """
        Accumulate ``rate`` and spawn one pellet per whole unit collected.
        Returns the number of pellets spawned.
        """
        self.spawn_accum += rate
        spawned = 0
        while self.spawn_accum >= 1.0:
            self.spawn_accum -= 1.0
            self.spawn()
            spawned += 1
        return spawned

    def eat_near(self, x: float, y: float, reach: float) -> int:
        """
        Remove pellets within reach and return how many were eaten.
        """
        eaten = 0
        remaining: List[Food] = []
        for p in self.pellets:
            if distance(x, y, p.x, p.y) <= reach:
                del self._by_id[p.id]
                eaten += 1
            else:
                remaining.append(p)
        if eaten:
            self.pellets = remaining
        return eaten

    def nearest_in_window(self, x: float, y: float, lower: float, upper: float) -> Optional[Food]:
        """
        Nearest pellet with ``lower < distance <= upper``, or None.
        Ties go to the pellet that comes first in spawn order.
        """
        best = None
        best_d = math.inf
        for p in self.pellets:
            d = distance(x, y, p.x, p.y)
            if lower < d <= upper and d < best_d:
                best_d = d
                best = p
        return best
