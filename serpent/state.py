"""Mutable state of one match, passed explicitly to every component."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator

from .food import Food
from .projectile import ProjectileSystem
from .snake import Snake
from .world import World


class MatchStatus(str, Enum):
    RUNNING = "running"
    ENDED = "ended"


@dataclass
class MatchState:
    """Everything a tick reads and writes.

    Only :class:`~serpent.collision.CollisionResolver` moves ``status`` to
    ``ENDED``. Once ended, nothing in the state is mutated again.
    """

    world: World
    snakes: Dict[int, Snake]
    food: Food
    speed: float
    projectiles: ProjectileSystem = field(default_factory=ProjectileSystem)
    tick: int = 0
    status: MatchStatus = MatchStatus.RUNNING
    winner: int | str | None = None
    reason: str = ""

    @property
    def running(self) -> bool:
        return self.status is MatchStatus.RUNNING

    def live_snakes(self) -> Iterator[Snake]:
        return (snake for snake in self.snakes.values() if snake.alive)
