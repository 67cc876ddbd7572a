"""
organism_sim module: simulation/stats.py

Population statistics read from the settled post-tick world.

The trimmed averages sum the lower (or upper) floor(n/2) values but divide
by n/2, so with an odd population they are the half-sum over a fractional
count rather than a true mean of the half.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Sequence

from simulation.engine import TickStats
from world.world import World


def mean(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    return sum(values) / len(values)


def trimmed_low_average(values: Sequence[float]) -> float:
    n = len(values)
    if n < 2:
        return 0.0
    return sum(sorted(values)[: n // 2]) / (n / 2)


def trimmed_high_average(values: Sequence[float]) -> float:
    n = len(values)
    if n < 2:
        return 0.0
    return sum(sorted(values, reverse=True)[: n // 2]) / (n / 2)


@dataclass(frozen=True)
class TraitStats:
    mean: float = 0.0
    low: float = 0.0
    high: float = 0.0

    @staticmethod
    def of(values: Sequence[float]) -> "TraitStats":
        return TraitStats(
            mean=mean(values),
            low=trimmed_low_average(values),
            high=trimmed_high_average(values),
        )


@dataclass(frozen=True)
class WorldStats:
    iteration: int
    population: int
    food_count: int
    birth_count: int
    death_count: int
    speed: TraitStats
    size: TraitStats
    sense: TraitStats


class StatisticsCollector:
    def collect(self, world: World, tick: Optional[TickStats] = None) -> WorldStats:
        entities = world.entities
        return WorldStats(
            iteration=tick.iteration if tick else 0,
            population=len(entities),
            food_count=len(world.food),
            birth_count=tick.birth_count if tick else 0,
            death_count=tick.death_count if tick else 0,
            speed=TraitStats.of([e.speed for e in entities]),
            size=TraitStats.of([e.size for e in entities]),
            sense=TraitStats.of([e.sense for e in entities]),
        )
