"""
organism_sim module: world/physics.py

Top-down 2D kinematics for point entities:
- constant-speed movement along the heading
- wall reflection against an arena inset by the base entity radius
- steering toward a held food target, or a small random wander
"""

from __future__ import annotations
import math

from organism.entity import Entity
from world.food import FoodField
from world.rng import RandomSource


def move(entity: Entity) -> None:
    entity.x += math.cos(entity.direction) * entity.speed
    entity.y += math.sin(entity.direction) * entity.speed


def reflect_walls(entity: Entity, w: float, h: float, radius: float) -> bool:
    """
    Mirror the heading off whichever wall the entity crossed.

    The x walls are checked first; when x is out of bounds the y walls are
    not looked at this tick, even if y is out of bounds as well.
    Returns True if the heading was reflected.
    """
    if entity.x < radius or entity.x > w - radius:
        entity.direction = math.pi - entity.direction
        return True
    if entity.y < radius or entity.y > h - radius:
        entity.direction = 2 * math.pi - entity.direction
        return True
    return False


def steer(entity: Entity, food: FoodField, rng: RandomSource) -> None:
    """
    Head straight at the target if it still exists, otherwise wander.
    A target whose pellet is gone is dropped here.
    """
    target = food.get(entity.target)
    if target is None:
        entity.target = None
        entity.direction += rng.uniform(-1.0, 1.0) / math.pi
        return
    entity.direction = math.atan2(target.y - entity.y, target.x - entity.x)
