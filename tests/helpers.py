"""Builders for hand-placed snakes and match states."""

from __future__ import annotations

from serpent.chain import SegmentChain
from serpent.food import Food
from serpent.snake import Snake
from serpent.state import MatchState
from serpent.utils import Vec2


def make_snake(snake_id, head, segments=None, angle=0.0, color_name=""):
    """Build a snake with an explicit body, bypassing the straight layout."""

    return Snake(
        id=snake_id,
        name=f"Player {snake_id}",
        color=(255, 255, 255),
        head=head,
        chain=SegmentChain(8.0, segments or []),
        color_name=color_name,
        angle=angle,
        target_angle=angle,
    )


def make_state(world, *snakes, food_at=None):
    return MatchState(
        world=world,
        snakes={snake.id: snake for snake in snakes},
        food=Food.at(food_at or Vec2(10.0, 590.0)),
        speed=world.settings.speed,
    )
