"""Projectile entity and ballistics."""

from __future__ import annotations

from dataclasses import dataclass
import itertools
import logging
from typing import Iterable, List

from . import constants, events, utils
from .snake import Snake
from .world import World

logger = logging.getLogger(__name__)


@dataclass
class Projectile:
    """A shot travelling in a straight line until it expires or hits."""

    id: int
    position: utils.Vec2
    velocity: utils.Vec2
    owner_id: int
    spawn_tick: int

    def age(self, now: int) -> int:
        return now - self.spawn_tick

    def to_dict(self) -> dict[str, float | int]:
        return {
            "id": self.id,
            "x": self.position.x,
            "y": self.position.y,
            "owner": self.owner_id,
        }


class ProjectileSystem:
    """Owns every projectile in flight for one match."""

    def __init__(
        self,
        speed: float = constants.PROJECTILE_SPEED,
        lifetime: int = constants.PROJECTILE_LIFETIME_TICKS,
        cooldown: int = constants.SHOOT_COOLDOWN_TICKS,
        hit_radius: float = constants.PROJECTILE_HIT_RADIUS,
        slow_duration: int = constants.SLOW_DURATION_TICKS,
    ) -> None:
        self.speed = speed
        self.lifetime = lifetime
        self.cooldown = cooldown
        self.hit_radius = hit_radius
        self.slow_duration = slow_duration
        self.projectiles: List[Projectile] = []
        self._ids = itertools.count(1)

    def __len__(self) -> int:
        return len(self.projectiles)

    def __iter__(self):
        return iter(self.projectiles)

    def fire(self, shooter: Snake, now: int) -> Projectile | None:
        """Fire from ``shooter``'s head unless its cooldown is still running."""

        if not shooter.alive or not shooter.can_shoot(now):
            return None
        projectile = Projectile(
            id=next(self._ids),
            position=shooter.head.copy(),
            velocity=utils.Vec2.from_angle(shooter.angle, self.speed),
            owner_id=shooter.id,
            spawn_tick=now,
        )
        self.projectiles.append(projectile)
        shooter.shoot_cooldown_until = now + self.cooldown
        logger.debug("Snake %s fired projectile %s", shooter.id, projectile.id)
        return projectile

    def advance(self, world: World, now: int) -> list[events.ProjectileExpired]:
        """Expire old projectiles and move the rest one tick."""

        expired: list[events.ProjectileExpired] = []
        survivors: List[Projectile] = []
        for projectile in self.projectiles:
            if projectile.age(now) > self.lifetime:
                expired.append(events.ProjectileExpired(projectile.id))
                continue
            projectile.position = world.wrap(projectile.position + projectile.velocity)
            survivors.append(projectile)
        self.projectiles = survivors
        return expired

    def resolve_hits(self, snakes: Iterable[Snake], now: int) -> list[events.SnakeSlowed]:
        """Consume projectiles touching an opponent's head and slow that snake.

        A hit overwrites the target's slow expiry rather than extending it.
        """

        targets = [snake for snake in snakes if snake.alive]
        hits: list[events.SnakeSlowed] = []
        survivors: List[Projectile] = []
        for projectile in self.projectiles:
            victim = None
            for snake in targets:
                if snake.id == projectile.owner_id:
                    continue
                if projectile.position.distance_to(snake.head) < self.hit_radius:
                    victim = snake
                    break
            if victim is None:
                survivors.append(projectile)
                continue
            victim.slow_until = now + self.slow_duration
            hits.append(events.SnakeSlowed(victim.id, projectile.id, victim.slow_until))
            logger.debug("Projectile %s slowed snake %s", projectile.id, victim.id)
        self.projectiles = survivors
        return hits

    def step(self, world: World, snakes: Iterable[Snake], now: int) -> list:
        """Advance, expire and resolve hits for one tick."""

        results: list = list(self.advance(world, now))
        results.extend(self.resolve_hits(snakes, now))
        return results

    def to_snapshot(self) -> list[dict[str, float | int]]:
        return [projectile.to_dict() for projectile in self.projectiles]
