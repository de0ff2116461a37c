import math

import pytest

from serpent import constants
from serpent.snake import Snake, SnakeInput
from serpent.utils import Vec2


def spawn(world, position=Vec2(300.0, 300.0), angle=0.0):
    return Snake.spawn(1, "Player 1", (0, 0, 0), world, position, angle)


def test_turn_left_decrements_heading(world):
    snake = spawn(world)
    snake.steer(SnakeInput(turn_left=True), 0.07)
    assert snake.target_angle == pytest.approx(-0.07)
    assert snake.angle == snake.target_angle


def test_opposing_turns_cancel(world):
    snake = spawn(world, angle=1.0)
    snake.steer(SnakeInput(turn_left=True, turn_right=True), 0.14)
    assert snake.angle == pytest.approx(1.0)


def test_heading_normalizes_past_pi(world):
    snake = spawn(world, angle=math.pi - 0.01)
    snake.steer(SnakeInput(turn_right=True), 0.07)
    assert snake.angle == pytest.approx(-math.pi + 0.06)
    assert snake.angle == snake.target_angle


def test_advance_moves_along_heading(world):
    snake = spawn(world, angle=math.pi / 2)
    snake.advance(world, 2.5, now=1)
    assert snake.head.x == pytest.approx(300.0)
    assert snake.head.y == pytest.approx(302.5)


def test_head_reenters_on_opposite_edge(world):
    snake = spawn(world, position=Vec2(599.0, 300.0))
    snake.advance(world, 2.5, now=1)
    assert snake.head.x == pytest.approx(1.5)

    backwards = spawn(world, position=Vec2(1.0, 1.0), angle=-math.pi / 2)
    backwards.advance(world, 2.5, now=1)
    assert backwards.head.y == pytest.approx(598.5)


def test_slowed_snake_uses_slow_factor(world):
    snake = spawn(world)
    snake.slow_until = 10
    assert snake.is_slowed(9)
    assert snake.effective_speed(5.0, 9) == 5.0 * constants.SLOW_FACTOR
    start = snake.head.copy()
    snake.advance(world, 5.0, now=9)
    assert snake.head.distance_to(start) == pytest.approx(5.0 * constants.SLOW_FACTOR)


def test_slow_expires_without_touching_base_speed(world):
    snake = spawn(world)
    snake.slow_until = 10
    assert not snake.is_slowed(10)
    assert snake.effective_speed(5.0, 10) == 5.0


def test_dead_snake_does_not_move(world):
    snake = spawn(world)
    snake.kill("You hit yourself!")
    snake.advance(world, 2.5, now=1)
    assert snake.head == Vec2(300.0, 300.0)
    assert snake.cause_of_death == "You hit yourself!"


def test_display_name_includes_colour(world):
    snake = Snake.spawn(2, "Player 2", (0, 0, 255), world, Vec2(1.0, 1.0), math.pi, color_name="Blue")
    assert snake.display_name == "Player 2 (Blue)"
    assert snake.angle == pytest.approx(math.pi)


def test_snapshot_reports_slow_state(world):
    snake = spawn(world)
    snake.slow_until = 5
    snapshot = snake.to_snapshot(now=3)
    assert snapshot["slowed"] is True
    assert snapshot["length"] == constants.INITIAL_LENGTH
    assert len(snapshot["segments"]) == constants.INITIAL_LENGTH
