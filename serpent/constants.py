"""Gameplay constants shared across the simulation modules."""

from __future__ import annotations

from dataclasses import dataclass

TICK_RATE: int = 60
DEFAULT_WIDTH: float = 600.0
DEFAULT_HEIGHT: float = 600.0

SEGMENT_SPACING: float = 8.0
INITIAL_LENGTH: int = 15

FOOD_PICKUP_RADIUS: float = 15.0
FOOD_REWARD: int = 10
FOOD_GROWTH: int = 5
FOOD_MARGIN: float = 20.0
FOOD_HEAD_EXCLUSION: float = 50.0
FOOD_BODY_EXCLUSION: float = 30.0
FOOD_MAX_ATTEMPTS: int = 1_000
FOOD_FALLBACK_CELL: float = 10.0

SELF_HIT_EXEMPT_SEGMENTS: int = 5
SELF_HIT_RADIUS: float = 6.0
BODY_HIT_RADIUS: float = 6.0
HEAD_HIT_RADIUS: float = 10.0

PROJECTILE_SPEED: float = 8.0
PROJECTILE_HIT_RADIUS: float = 10.0
PROJECTILE_LIFETIME_TICKS: int = 90
SHOOT_COOLDOWN_TICKS: int = 60
SLOW_DURATION_TICKS: int = 60
SLOW_FACTOR: float = 0.0

TIE: str = "tie"


@dataclass(frozen=True)
class DifficultySettings:
    """Movement tuning for one difficulty level."""

    label: str
    speed: float
    rotation_speed: float
    speed_increment: float = 0.0
    max_speed: float | None = None


DIFFICULTY_SETTINGS: dict[str, DifficultySettings] = {
    "easy": DifficultySettings(label="Easy", speed=2.5, rotation_speed=0.07),
    "hard": DifficultySettings(
        label="Hard",
        speed=5.0,
        rotation_speed=0.14,
        speed_increment=0.15,
        max_speed=12.0,
    ),
}
