import math

import pytest

from organism.entity import Entity
from world.food import FoodField
from world.physics import move, reflect_walls, steer
from world.rng import RandomSource

W, H, R = 750, 500, 10


def test_move_along_heading():
    e = Entity(x=100, y=100, direction=math.pi / 3, speed=1.5)
    move(e)
    assert e.x == pytest.approx(100 + 0.75)
    assert e.y == pytest.approx(100 + 1.5 * math.sin(math.pi / 3))


@pytest.mark.parametrize("d", [math.pi / 2, 2.0, -2.5, math.pi])
def test_left_wall_reflects_heading(d):
    e = Entity(x=R - 1, y=250, direction=d, speed=1.0)
    move(e)
    assert reflect_walls(e, W, H, R)
    assert e.direction == pytest.approx(math.pi - d)
    # reflection changes heading only, never position
    assert e.x == pytest.approx(R - 1 + math.cos(d))


def test_right_wall():
    e = Entity(x=W - R + 0.5, y=250, direction=0.3)
    assert reflect_walls(e, W, H, R)
    assert e.direction == pytest.approx(math.pi - 0.3)


def test_y_wall_reflects_vertically():
    e = Entity(x=300, y=H - R + 2, direction=1.2)
    assert reflect_walls(e, W, H, R)
    assert e.direction == pytest.approx(2 * math.pi - 1.2)


def test_corner_only_reflects_x():
    e = Entity(x=3, y=3, direction=-2.0)
    assert reflect_walls(e, W, H, R)
    assert e.direction == pytest.approx(math.pi + 2.0)


def test_inside_arena_no_reflection():
    e = Entity(x=R, y=H - R, direction=0.7)
    assert not reflect_walls(e, W, H, R)
    assert e.direction == 0.7


def test_radius_not_scaled_by_size():
    e = Entity(x=15, y=250, direction=0.0, size=2.0)
    assert not reflect_walls(e, W, H, R)


def test_steer_at_live_target():
    food = FoodField(W, H, RandomSource(1))
    p = food.spawn()
    p.x, p.y = 200, 200
    e = Entity(x=100, y=100, direction=3.0, target=p.id)
    steer(e, food, RandomSource(1))
    assert e.direction == pytest.approx(math.pi / 4)
    assert e.target == p.id


def test_steer_drops_stale_target_and_wanders():
    food = FoodField(W, H, RandomSource(1))
    p = food.spawn()
    food.eat_near(p.x, p.y, reach=1)
    e = Entity(x=100, y=100, direction=1.0, target=p.id)
    steer(e, food, RandomSource(1))
    assert e.target is None
    assert 1.0 - 1 / math.pi <= e.direction <= 1.0 + 1 / math.pi
    assert e.direction != 1.0


def test_wander_without_target():
    rng = RandomSource(4)
    food = FoodField(W, H, rng)
    e = Entity(x=100, y=100, direction=0.0)
    for _ in range(50):
        before = e.direction
        steer(e, food, rng)
        assert abs(e.direction - before) <= 1 / math.pi
