"""
organism_sim module: simulation/scheduler.py

Host-side driver: owns the world, steps it, keeps running totals and hands
post-tick statistics to whoever displays them.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging
import math
from typing import Callable, List, Optional

from config import SimConfig
from simulation.engine import DeathEvent, TickEngine
from simulation.stats import StatisticsCollector, WorldStats
from world.rng import RandomSource
from world.world import World

logger = logging.getLogger(__name__)


def birth_death_ratio(births: int, deaths: int) -> float:
    """
    Births over deaths, as the HUD shows it. No deaths gives inf, or nan
    when there were no births either.
    """
    if deaths == 0:
        return math.nan if births == 0 else math.inf
    return births / deaths


@dataclass
class SimulationRecord:
    total_births: int = 0
    total_deaths: int = 0
    last: Optional[WorldStats] = None

    def add(self, stats: WorldStats) -> None:
        self.total_births += stats.birth_count
        self.total_deaths += stats.death_count
        self.last = stats

    @property
    def ratio(self) -> float:
        return birth_death_ratio(self.total_births, self.total_deaths)


@dataclass
class Simulation:
    cfg: SimConfig
    seed: Optional[int] = None
    world: World = field(init=False)
    engine: TickEngine = field(init=False)
    collector: StatisticsCollector = field(default_factory=StatisticsCollector)
    record: SimulationRecord = field(default_factory=SimulationRecord)

    def __post_init__(self) -> None:
        self.restart()

    def restart(self) -> None:
        """Throw the current world away and seed a new one from the same config."""
        self.world = World.create(self.cfg, rng=RandomSource(self.seed))
        self.engine = TickEngine()
        self.record = SimulationRecord()

    def tick(self, deaths: Optional[List[DeathEvent]] = None) -> WorldStats:
        """
        Advance one tick and return the post-tick statistics.
        Death events are appended to ``deaths`` when a list is given.
        """
        tick = self.engine.step(self.world)
        if deaths is not None:
            deaths.extend(tick.deaths)
        stats = self.collector.collect(self.world, tick)
        self.record.add(stats)
        return stats

    def run(
        self,
        max_ticks: int,
        on_stats: Optional[Callable[[WorldStats], None]] = None,
        stop_on_extinction: bool = True,
    ) -> Optional[WorldStats]:
        """
        Run up to ``max_ticks`` ticks without rendering.
        Returns the last statistics, or None if no tick ran.
        """
        stats = None
        for _ in range(max_ticks):
            stats = self.tick()
            if on_stats is not None:
                on_stats(stats)
            if stop_on_extinction and stats.population == 0:
                logger.info("stopping after %d ticks: no entities left", stats.iteration)
                break
        return stats
