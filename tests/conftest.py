import math
from typing import List

import pytest

from config import SimConfig
from organism.entity import Entity
from world.rng import RandomSource
from world.world import World


class RecordingSource(RandomSource):
    """Seeded source that remembers every draw it hands out."""

    def __init__(self, seed=None):
        super().__init__(seed)
        self.draws: List[float] = []

    def random(self) -> float:
        v = super().random()
        self.draws.append(v)
        return v


class ScriptedSource(RandomSource):
    """Replays a fixed list of draws in order."""

    def __init__(self, draws):
        super().__init__(None)
        self._draws = list(draws)
        self._i = 0

    def random(self) -> float:
        v = self._draws[self._i]
        self._i += 1
        return v


@pytest.fixture
def cfg() -> SimConfig:
    return SimConfig.from_defaults().replace(
        initial_population=0,
        initial_foods=0,
        food_rate=0.0,
        energy_rate=0.01,
        born_threshold=999.0,
        born_consumption=0.5,
        initial_sense=1.0,
    )


@pytest.fixture
def make_world(cfg):
    def _make(seed: int = 7, **overrides) -> World:
        return World.create(cfg.replace(**overrides), rng=RandomSource(seed))

    return _make


def place(world: World, x: float, y: float, **kw) -> Entity:
    kw.setdefault("direction", math.pi / 2)
    e = Entity(x=x, y=y, **kw)
    world.entities.append(e)
    return e


def put_food(world: World, x: float, y: float):
    pellet = world.food.spawn()
    pellet.x = x
    pellet.y = y
    return pellet
