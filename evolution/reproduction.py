"""
Spawning: seed entities for a fresh world and offspring for live reproduction.
"""

from __future__ import annotations
import math

import config
from config import SimConfig
from evolution.mutate import fluctuate, mutate_trait
from organism.entity import Entity, clamp_trait
from world.rng import RandomSource


class SpawnPolicy:
    def __init__(self, cfg: SimConfig, rng: RandomSource):
        self.cfg = cfg
        self.rng = rng

    def spawn(self, **overrides) -> Entity:
        """
        Build one entity. Anything not given in ``overrides`` gets the
        seed-population default:

          x, y       uniform inside the arena, inset by the base radius
          direction  uniform in [-pi, pi]
          energy     1
          speed      1 mutated by the speed fluctuation
          size       1
          sense      initial sense mutated by the sense fluctuation
          target     None

        Traits are clamped here, whether given or defaulted.
        """
        cfg = self.cfg
        rng = self.rng
        r = cfg.base_radius

        x = overrides["x"] if "x" in overrides else rng.uniform(r, cfg.width - r)
        y = overrides["y"] if "y" in overrides else rng.uniform(r, cfg.height - r)
        direction = overrides["direction"] if "direction" in overrides else rng.uniform(-math.pi, math.pi)
        energy = overrides.get("energy", 1.0)
        speed = overrides["speed"] if "speed" in overrides else fluctuate(1.0, cfg.speed_fluctuation, rng)
        size = overrides.get("size", 1.0)
        sense = (
            overrides["sense"] if "sense" in overrides
            else fluctuate(cfg.initial_sense, cfg.sense_fluctuation, rng)
        )

        return Entity(
            x=x,
            y=y,
            direction=direction,
            energy=energy,
            speed=clamp_trait(speed),
            size=clamp_trait(size),
            sense=clamp_trait(sense),
            target=overrides.get("target"),
        )

    def spawn_child(self, parent: Entity) -> Entity:
        """
        Offspring at the parent's position with a fresh heading and energy 1.
        Speed and sense mutate from the parent's; size always starts at the
        birth size rather than being inherited.
        """
        speed = mutate_trait(parent.speed, self.cfg.speed_fluctuation, self.rng)
        sense = mutate_trait(parent.sense, self.cfg.sense_fluctuation, self.rng)
        return self.spawn(
            x=parent.x,
            y=parent.y,
            energy=1.0,
            speed=speed,
            size=config.BIRTH_SIZE,
            sense=sense,
        )
