"""
Continuous live simulation: entities forage, reproduce with mutated traits,
and starve in real time.

    python main.py                      # pygame window
    python main.py --headless --ticks 5000 --seed 1
"""

from __future__ import annotations
import argparse
import logging
from typing import List, Optional
import pygame

import config
from config import ConfigError, SimConfig
from render import colors
from render.effects import DeathAnimations, hud_lines
from render.renderer import draw_death_rings, draw_entities, draw_food, draw_hud
from simulation.engine import DeathEvent
from simulation.scheduler import Simulation
from simulation.stats import WorldStats

logger = logging.getLogger("organism_sim")

HUD_W = 420


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Natural selection sandbox")
    p.add_argument("--population", type=int, default=config.INITIAL_POPULATION)
    p.add_argument("--foods", type=int, default=config.INITIAL_FOODS)
    p.add_argument("--food-rate", type=float, default=config.FOOD_RATE)
    p.add_argument("--energy-rate", type=float, default=config.ENERGY_RATE)
    p.add_argument("--born-threshold", type=float, default=config.BORN_THRESHOLD)
    p.add_argument("--born-consumption", type=float, default=config.BORN_CONSUMPTION)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--headless", action="store_true", help="run without a window")
    p.add_argument("--ticks", type=int, default=10_000, help="tick limit in headless mode")
    p.add_argument("--ticks-per-frame", type=int, default=config.TICKS_PER_FRAME)
    p.add_argument("--log-level", default="INFO")
    return p.parse_args(argv)


def config_from_args(args: argparse.Namespace) -> SimConfig:
    return SimConfig.from_defaults().replace(
        initial_population=args.population,
        initial_foods=args.foods,
        food_rate=args.food_rate,
        energy_rate=args.energy_rate,
        born_threshold=args.born_threshold,
        born_consumption=args.born_consumption,
    ).validate()


def log_summary(stats: WorldStats) -> None:
    logger.info(
        "tick %d: pop=%d food=%d speed=%.2f size=%.2f sense=%.2f",
        stats.iteration, stats.population, stats.food_count,
        stats.speed.mean, stats.size.mean, stats.sense.mean,
    )


def run_headless(sim: Simulation, ticks: int, every: int = 500) -> Optional[WorldStats]:
    def report(stats: WorldStats) -> None:
        if stats.iteration % every == 0:
            log_summary(stats)

    last = sim.run(ticks, on_stats=report)
    if last is not None:
        log_summary(last)
        logger.info(
            "births=%d deaths=%d ratio=%.2f",
            sim.record.total_births, sim.record.total_deaths, sim.record.ratio,
        )
    return last


def run_window(sim: Simulation, ticks_per_frame: int) -> None:
    cfg = sim.cfg
    pygame.init()
    screen = pygame.display.set_mode((int(cfg.width) + HUD_W, int(cfg.height)))
    pygame.display.set_caption("organism_sim (Natural Selection)")
    arena = pygame.Surface((int(cfg.width), int(cfg.height)))
    clock = pygame.time.Clock()

    anims = DeathAnimations()
    stats = sim.collector.collect(sim.world)
    paused = False
    running = True

    while running:
        clock.tick(config.FPS)

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                running = False
            elif e.type == pygame.KEYDOWN and e.key == pygame.K_SPACE:
                paused = not paused
            elif e.type == pygame.KEYDOWN and e.key == pygame.K_r:
                sim.restart()
                anims.clear()
                stats = sim.collector.collect(sim.world)
                logger.info("world restarted")

        if not paused:
            deaths: List[DeathEvent] = []
            for _ in range(max(1, ticks_per_frame)):
                stats = sim.tick(deaths)
            anims.extend(deaths)

        # Render
        arena.fill(colors.BG)
        draw_food(arena, sim.world.food.pellets, cfg.food_radius)
        draw_entities(arena, sim.world.entities, cfg.base_radius)
        draw_death_rings(arena, anims)
        anims.advance()

        screen.fill(colors.BG)
        screen.blit(arena, (0, 0))
        draw_hud(screen, hud_lines(stats, sim.record, cfg), x=int(cfg.width) + 12)

        pygame.display.flip()

    pygame.quit()


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        cfg = config_from_args(args)
    except ConfigError as exc:
        logger.error("invalid configuration: %s", exc)
        return 2

    sim = Simulation(cfg, seed=args.seed)
    if args.headless:
        run_headless(sim, args.ticks)
    else:
        run_window(sim, args.ticks_per_frame)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
