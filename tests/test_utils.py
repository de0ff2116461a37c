import math

import pytest

from serpent import utils
from serpent.utils import Vec2
from serpent.world import World


def test_wrap_folds_into_half_open_range():
    assert utils.wrap(600.0, 600.0) == 0.0
    assert utils.wrap(0.0, 600.0) == 0.0
    assert utils.wrap(-1.0, 600.0) == pytest.approx(599.0)
    assert utils.wrap(1200.5, 600.0) == pytest.approx(0.5)


def test_wrap_never_returns_the_dimension_for_tiny_negatives():
    value = utils.wrap(-1e-20, 600.0)
    assert 0.0 <= value < 600.0


def test_wrap_position_handles_both_axes():
    world = World(width=400, height=300)
    wrapped = world.wrap(Vec2(400.0, -10.0))
    assert wrapped.x == 0.0
    assert wrapped.y == pytest.approx(290.0)


def test_wrapped_axis_delta_takes_shorter_path():
    assert utils.wrapped_axis_delta(590.0, 600.0) == pytest.approx(-10.0)
    assert utils.wrapped_axis_delta(-590.0, 600.0) == pytest.approx(10.0)
    assert utils.wrapped_axis_delta(300.0, 600.0) == 300.0
    assert utils.wrapped_axis_delta(12.0, 600.0) == 12.0


def test_wrapped_delta_crosses_seam():
    world = World()
    delta = world.delta(Vec2(2.0, 300.0), Vec2(596.0, 300.0))
    assert delta.x == pytest.approx(6.0)
    assert delta.y == 0.0


@pytest.mark.parametrize("angle", [0.0, math.pi, -math.pi, 3.5, -3.5, 7 * math.pi, -20.0, 20.0])
def test_normalize_angle_range(angle):
    normalized = utils.normalize_angle(angle)
    assert -math.pi < normalized <= math.pi
    assert math.cos(normalized) == pytest.approx(math.cos(angle))
    assert math.sin(normalized) == pytest.approx(math.sin(angle), abs=1e-9)


def test_normalize_angle_maps_minus_pi_to_pi():
    assert utils.normalize_angle(-math.pi) == math.pi


def test_euclidean_distance_ignores_wrap():
    assert Vec2(0.5, 0.0).distance_to(Vec2(599.5, 0.0)) == pytest.approx(599.0)


def test_world_rejects_bad_configuration():
    with pytest.raises(ValueError):
        World(width=0)
    with pytest.raises(ValueError):
        World(mode="squad")
    with pytest.raises(ValueError):
        World(difficulty="nightmare")


def test_world_accepts_strings():
    world = World(mode="duo", difficulty="hard")
    assert world.is_duo
    assert world.settings.max_speed == 12.0
