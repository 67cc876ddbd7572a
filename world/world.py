"""
organism_sim module: world/world.py

World state container: arena bounds, the live entity list, the food field
and the random source they all draw from.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging
from typing import List, Optional

from config import SimConfig
from evolution.reproduction import SpawnPolicy
from organism.entity import Entity
from world.food import FoodField
from world.rng import RandomSource

logger = logging.getLogger(__name__)


@dataclass
class World:
    cfg: SimConfig
    rng: RandomSource
    food: FoodField
    entities: List[Entity] = field(default_factory=list)

    @staticmethod
    def create(cfg: SimConfig, rng: Optional[RandomSource] = None, seed: Optional[int] = None) -> "World":
        """
        Build and seed a world: ``initial_population`` entities first, then
        ``initial_foods`` pellets, all from the same random source.
        """
        cfg.validate()
        if rng is None:
            rng = RandomSource(seed)
        world = World(cfg=cfg, rng=rng, food=FoodField(cfg.width, cfg.height, rng, radius=cfg.food_radius))

        policy = SpawnPolicy(cfg, rng)
        for _ in range(int(cfg.initial_population)):
            world.entities.append(policy.spawn())
        for _ in range(int(cfg.initial_foods)):
            world.food.spawn()

        logger.info(
            "world seeded: %d entities, %d food, arena %gx%g",
            len(world.entities), len(world.food), cfg.width, cfg.height,
        )
        return world
