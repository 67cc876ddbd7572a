"""
organism_sim module: render/renderer.py

Pygame rendering of entities, food and death rings (top-down).
Reads world state only.
"""

from __future__ import annotations
from typing import List, Sequence

import pygame

from organism.entity import Entity
from render import colors
from render.effects import DeathAnimations, energy_color
from world.food import Food


def draw_food(screen: pygame.Surface, pellets: Sequence[Food], radius: float) -> None:
    r = max(1, int(radius))
    for p in pellets:
        pygame.draw.circle(screen, colors.FOOD, (int(p.x), int(p.y)), r)


def draw_entities(screen: pygame.Surface, entities: Sequence[Entity], base_radius: float) -> None:
    for e in entities:
        r = max(1, int(base_radius * e.size))
        pygame.draw.circle(screen, energy_color(e.energy), (int(e.x), int(e.y)), r)


def draw_death_rings(screen: pygame.Surface, anims: DeathAnimations) -> None:
    for ring in anims.rings:
        if ring.radius < 1:
            continue
        pygame.draw.circle(screen, colors.DEATH_RING, (int(ring.x), int(ring.y)), int(ring.radius), 1)


def draw_hud(screen: pygame.Surface, lines: List[str], x: int = 12) -> None:
    font = pygame.font.Font(None, 24)

    y = 10
    for line in lines:
        txt = font.render(line, True, colors.HUD_TEXT)
        screen.blit(txt, (x, y))
        y += 22
