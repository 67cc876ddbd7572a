"""
Simulation tuning knobs.
"""

from __future__ import annotations
import math
from dataclasses import dataclass, fields, replace as _replace

# Arena
SCREEN_W, SCREEN_H = 750, 500
ENTITY_RADIUS = 10.0
FOOD_RADIUS = 1.0

# Population controls
INITIAL_POPULATION = 20
INITIAL_FOODS = 100

# Energy + life
FOOD_RATE = 0.5           # food items per tick, may be fractional
ENERGY_RATE = 0.005
BORN_THRESHOLD = 3.0
BORN_CONSUMPTION = 2.0

# Mutation
SPEED_FLUCTUATION = 10.0  # mutation spread is 1 / fluctuation
SENSE_FLUCTUATION = 10.0
INITIAL_SENSE = 1.0

# Traits
TRAIT_MIN = 0.5
TRAIT_MAX = 2.0
SIZE_GROWTH = 0.001       # per tick
BIRTH_SIZE = 0.1

# Rendering
DEATH_ANIM_FRAMES = 10
DEATH_RING_STEP = 10.0

# Runtime pacing
FPS = 60
TICKS_PER_FRAME = 4  # simulation ticks per rendered frame


class ConfigError(ValueError):
    """Raised when a simulation setting is out of range."""


@dataclass(frozen=True)
class SimConfig:
    initial_population: int = INITIAL_POPULATION
    initial_foods: int = INITIAL_FOODS
    food_rate: float = FOOD_RATE
    energy_rate: float = ENERGY_RATE
    born_threshold: float = BORN_THRESHOLD
    born_consumption: float = BORN_CONSUMPTION
    speed_fluctuation: float = SPEED_FLUCTUATION
    sense_fluctuation: float = SENSE_FLUCTUATION
    initial_sense: float = INITIAL_SENSE

    width: float = SCREEN_W
    height: float = SCREEN_H
    base_radius: float = ENTITY_RADIUS
    food_radius: float = FOOD_RADIUS

    @staticmethod
    def from_defaults() -> "SimConfig":
        return SimConfig()

    def replace(self, **overrides) -> "SimConfig":
        return _replace(self, **overrides)

    def validate(self) -> "SimConfig":
        """
        Check every setting and return self.

        Counts must be non-negative integers, everything else finite.
        Food rate may be zero; energy rate, fluctuations, sense and arena
        geometry must be positive.
        """
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigError(f"{f.name} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise ConfigError(f"{f.name} must be finite, got {value!r}")

        for name in ("initial_population", "initial_foods"):
            value = getattr(self, name)
            if int(value) != value or value < 0:
                raise ConfigError(f"{name} must be a non-negative integer, got {value!r}")

        if self.food_rate < 0:
            raise ConfigError(f"food_rate must not be negative, got {self.food_rate!r}")

        for name in (
            "energy_rate",
            "speed_fluctuation",
            "sense_fluctuation",
            "initial_sense",
            "width",
            "height",
            "base_radius",
            "food_radius",
        ):
            value = getattr(self, name)
            if value <= 0:
                raise ConfigError(f"{name} must be positive, got {value!r}")

        if self.width <= 2 * self.base_radius or self.height <= 2 * self.base_radius:
            raise ConfigError("arena is too small for the entity radius")
        return self
