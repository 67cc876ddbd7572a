"""
organism_sim module: simulation/engine.py

One discrete tick of the world:
- food spawning from the fractional accumulator
- a single pass over the live entity list (grow, move, bounce or steer,
  eat, acquire a target, reproduce, pay upkeep, die)

The pass walks the list by index and re-reads its length every step, so
offspring appended mid-pass are processed later in the same pass and a
death removes the entity before the next index is visited.
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import List, Tuple

from evolution.reproduction import SpawnPolicy
from organism.entity import Entity
from world.physics import move, reflect_walls, steer
from world.world import World

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeathEvent:
    """Last known position of an entity that died, for the death ring effect."""
    x: float
    y: float


@dataclass(frozen=True)
class TickStats:
    iteration: int
    birth_count: int
    death_count: int
    food_spawned: int
    food_eaten: int
    deaths: Tuple[DeathEvent, ...] = ()


class TickEngine:
    def __init__(self) -> None:
        self.iteration = 0

    def step(self, world: World) -> TickStats:
        cfg = world.cfg
        policy = SpawnPolicy(cfg, world.rng)

        spawned = world.food.update(cfg.food_rate)

        births = 0
        eaten = 0
        deaths: List[DeathEvent] = []
        entities = world.entities
        had_population = bool(entities)

        i = 0
        while i < len(entities):
            entity = entities[i]
            eaten += self._forage(entity, world)

            if entity.energy > cfg.born_threshold:
                births += 1
                entity.energy -= cfg.born_consumption
                entities.append(policy.spawn_child(entity))

            entity.energy -= entity.upkeep(cfg.energy_rate)
            if entity.energy < 0:
                deaths.append(DeathEvent(entity.x, entity.y))
                del entities[i]
                continue
            i += 1

        self.iteration += 1
        stats = TickStats(
            iteration=self.iteration,
            birth_count=births,
            death_count=len(deaths),
            food_spawned=spawned,
            food_eaten=eaten,
            deaths=tuple(deaths),
        )
        logger.debug(
            "tick %d: pop=%d food=%d births=%d deaths=%d",
            self.iteration, len(entities), len(world.food), births, len(deaths),
        )
        if had_population and not entities:
            logger.info("population went extinct at tick %d", self.iteration)
        return stats

    def _forage(self, entity: Entity, world: World) -> int:
        """Grow, move, steer, eat and look for food. Returns pellets eaten."""
        cfg = world.cfg
        r = cfg.base_radius

        entity.grow()
        move(entity)
        if not reflect_walls(entity, cfg.width, cfg.height, r):
            steer(entity, world.food, world.rng)

        reach = r * entity.size + cfg.food_radius
        gained = world.food.eat_near(entity.x, entity.y, reach)
        entity.energy += gained

        if entity.target is None:
            upper = reach + entity.sense * r * entity.size
            found = world.food.nearest_in_window(entity.x, entity.y, reach, upper)
            if found is not None:
                entity.target = found.id
        return gained
