"""
organism_sim module: evolution/mutate.py

Mutation operator for heritable traits.
"""

from __future__ import annotations

from organism.entity import clamp_trait
from world.rng import RandomSource


def fluctuate(value: float, fluctuation: float, rng: RandomSource) -> float:
    """
    Scale ``value`` by a uniform factor in [1 - 1/fluctuation, 1 + 1/fluctuation].
    Larger fluctuation settings mean smaller mutations.
    """
    spread = 1.0 / fluctuation
    return value * (1.0 + rng.uniform(-spread, spread))


def mutate_trait(value: float, fluctuation: float, rng: RandomSource) -> float:
    return clamp_trait(fluctuate(value, fluctuation, rng))
