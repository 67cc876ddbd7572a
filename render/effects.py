"""
organism_sim module: render/effects.py

Display-side bookkeeping that does not touch pygame: energy colors, the
death ring animation list and HUD text.
"""

from __future__ import annotations
from dataclasses import dataclass
import math
from typing import Iterable, List, Tuple

import config
from render import colors
from simulation.engine import DeathEvent
from simulation.scheduler import SimulationRecord
from simulation.stats import TraitStats, WorldStats

Color = Tuple[int, int, int]


def color_between(a: Color, b: Color, t: float) -> Color:
    if t == 0:
        return a
    if t == 1:
        return b
    return tuple(int(math.floor(ca + (cb - ca) * t)) for ca, cb in zip(a, b))


def energy_color(energy: float) -> Color:
    # full energy (1 or more) is HEALTHY, empty is STARVING
    return color_between(colors.HEALTHY, colors.STARVING, 1 - max(0.0, min(1.0, energy)))


@dataclass
class DeathRing:
    x: float
    y: float
    frame: int = 0

    @property
    def radius(self) -> float:
        return self.frame * config.DEATH_RING_STEP


class DeathAnimations:
    """
    Expanding rings at the places entities died. Advanced once per rendered
    frame, independent of how many ticks ran in between.
    """

    def __init__(self, frames: int = config.DEATH_ANIM_FRAMES):
        self.frames = frames
        self.rings: List[DeathRing] = []

    def __len__(self) -> int:
        return len(self.rings)

    def extend(self, events: Iterable[DeathEvent]) -> None:
        for ev in events:
            self.rings.append(DeathRing(ev.x, ev.y))

    def advance(self) -> None:
        for ring in self.rings:
            ring.frame += 1
        self.rings = [r for r in self.rings if r.frame <= self.frames]

    def clear(self) -> None:
        self.rings.clear()


def _trait_line(name: str, t: TraitStats) -> str:
    return f"{name}: {t.mean:.2f}/{t.low:.2f}/{t.high:.2f} (avg/min avg/max avg)"


def hud_lines(stats: WorldStats, record: SimulationRecord, cfg: config.SimConfig) -> List[str]:
    return [
        f"Iteration: {stats.iteration}",
        f"Population: {stats.population}/{cfg.initial_population}",
        f"Foods: {stats.food_count}/{cfg.initial_foods}",
        f"Birth/Death: {record.total_births}/{record.total_deaths}",
        f"Birth/Death ratio: {record.ratio:.2f}",
        _trait_line("Speed", stats.speed),
        _trait_line("Size", stats.size),
        _trait_line("Sense", stats.sense),
    ]
