"""Discrete per-tick events emitted by the simulation."""

from __future__ import annotations

from dataclasses import dataclass

from .utils import Vec2


@dataclass(frozen=True)
class ScoreChanged:
    snake_id: int
    delta: int
    score: int


@dataclass(frozen=True)
class LengthChanged:
    snake_id: int
    delta: int
    target_length: int


@dataclass(frozen=True)
class SpeedChanged:
    """The shared match speed changed after a pickup in hard mode."""

    speed: float
    capped: bool


@dataclass(frozen=True)
class FoodRelocated:
    position: Vec2
    eaten_by: int


@dataclass(frozen=True)
class ShotFired:
    snake_id: int
    projectile_id: int


@dataclass(frozen=True)
class SnakeSlowed:
    snake_id: int
    projectile_id: int
    until_tick: int


@dataclass(frozen=True)
class ProjectileExpired:
    projectile_id: int


@dataclass(frozen=True)
class SnakeDied:
    snake_id: int
    cause: str


@dataclass(frozen=True)
class MatchEnded:
    """``winner`` is ``None`` in single mode, a snake id, or ``constants.TIE``."""

    winner: int | str | None
    reason: str
