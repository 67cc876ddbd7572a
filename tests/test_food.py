import pytest

from world.food import FoodField
from world.rng import RandomSource


@pytest.fixture
def field():
    return FoodField(750, 500, RandomSource(2), radius=1.0)


def _at(field, x, y):
    p = field.spawn()
    p.x, p.y = x, y
    return p


def test_spawn_inside_inset(field):
    for _ in range(300):
        p = field.spawn()
        assert 1.0 <= p.x <= 749.0
        assert 1.0 <= p.y <= 499.0
    assert len(field) == 300
    assert len({p.id for p in field}) == 300


def test_fractional_rate_accumulates(field):
    assert field.update(0.4) == 0
    assert field.update(0.4) == 0
    assert field.update(0.4) == 1
    assert len(field) == 1
    assert field.spawn_accum == pytest.approx(0.2)


def test_rate_above_one_spawns_several(field):
    assert field.update(2.5) == 2
    assert field.update(2.5) == 3
    assert len(field) == 5
    assert field.spawn_accum == pytest.approx(0.0)


def test_eat_near_removes_every_pellet_in_reach(field):
    a = _at(field, 100, 100)
    b = _at(field, 105, 100)
    c = _at(field, 100, 111)
    d = _at(field, 300, 300)
    assert field.eat_near(100, 100, reach=11) == 3
    assert list(field) == [d]
    for p in (a, b, c):
        assert p.id not in field
        assert field.get(p.id) is None
    assert field.get(d.id) is d


def test_eat_near_nothing_in_reach(field):
    _at(field, 10, 10)
    assert field.eat_near(200, 200, reach=5) == 0
    assert len(field) == 1


def test_nearest_in_window_bounds(field):
    _at(field, 105, 100)            # distance 5, inside eating range
    far = _at(field, 140, 100)      # distance 40, past the sense range
    near = _at(field, 100, 115)     # distance 15
    _at(field, 100, 80)             # distance 20
    assert field.nearest_in_window(100, 100, lower=11, upper=21) is near
    assert field.nearest_in_window(100, 100, lower=11, upper=14) is None
    assert field.nearest_in_window(100, 100, lower=11, upper=40) is near
    assert far in list(field)


def test_nearest_in_window_upper_is_inclusive_lower_exclusive(field):
    edge = _at(field, 121, 100)
    assert field.nearest_in_window(100, 100, lower=11, upper=21) is edge
    assert field.nearest_in_window(100, 100, lower=21, upper=30) is None


def test_nearest_in_window_tie_goes_to_first(field):
    first = _at(field, 115, 100)
    _at(field, 85, 100)
    assert field.nearest_in_window(100, 100, lower=11, upper=21) is first


def test_get_none(field):
    assert field.get(None) is None
