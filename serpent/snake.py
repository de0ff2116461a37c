"""Snake entity implementation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from . import constants, utils
from .chain import SegmentChain
from .world import World


@dataclass(frozen=True)
class SnakeInput:
    """Control state sampled once per tick for one snake."""

    turn_left: bool = False
    turn_right: bool = False
    fire: bool = False


@dataclass
class Snake:
    """A player-controlled snake: steering, motion and per-snake timers.

    ``angle`` and ``target_angle`` are always equal. Turning is rate limited
    by the difficulty's rotation speed but the heading itself does not lag;
    only the body does.
    """

    id: int
    name: str
    color: tuple[int, int, int]
    head: utils.Vec2
    chain: SegmentChain
    color_name: str = ""
    angle: float = 0.0
    target_angle: float = 0.0
    alive: bool = True
    score: int = 0
    slow_until: int = 0
    shoot_cooldown_until: int = 0
    cause_of_death: str | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        self.target_angle = utils.normalize_angle(self.target_angle)
        self.angle = self.target_angle

    @classmethod
    def spawn(
        cls,
        snake_id: int,
        name: str,
        color: tuple[int, int, int],
        world: World,
        position: utils.Vec2,
        angle: float,
        length: int = constants.INITIAL_LENGTH,
        spacing: float = constants.SEGMENT_SPACING,
        color_name: str = "",
    ) -> "Snake":
        """Create a snake at ``position`` with a straight settled body."""

        head = world.wrap(position)
        chain = SegmentChain.laid_out(world, head, angle, length, spacing)
        return cls(
            id=snake_id,
            name=name,
            color=color,
            head=head,
            chain=chain,
            color_name=color_name,
            angle=angle,
            target_angle=angle,
        )

    @property
    def display_name(self) -> str:
        """Name with the colour tag used in match messages."""

        if self.color_name:
            return f"{self.name} ({self.color_name})"
        return self.name

    @property
    def segments(self) -> List[utils.Vec2]:
        return self.chain.segments

    @property
    def target_length(self) -> int:
        return self.chain.target_length

    @property
    def direction(self) -> utils.Vec2:
        """Return the current heading direction."""

        return utils.Vec2.from_angle(self.angle)

    def steer(self, controls: SnakeInput, rotation_speed: float) -> None:
        """Apply held turn inputs for one tick."""

        target = self.target_angle
        if controls.turn_left:
            target -= rotation_speed
        if controls.turn_right:
            target += rotation_speed
        self.target_angle = utils.normalize_angle(target)
        self.angle = self.target_angle

    def is_slowed(self, now: int) -> bool:
        return now < self.slow_until

    def can_shoot(self, now: int) -> bool:
        return now >= self.shoot_cooldown_until

    def effective_speed(self, speed: float, now: int) -> float:
        """Return this tick's speed given the shared match ``speed``."""

        if self.is_slowed(now):
            return speed * constants.SLOW_FACTOR
        return speed

    def advance(self, world: World, speed: float, now: int) -> None:
        """Move the head one tick along ``angle`` and drag the body after it."""

        if not self.alive:
            return
        step = self.direction * self.effective_speed(speed, now)
        self.head = world.wrap(self.head + step)
        self.chain.follow(self.head, world)

    def grow(self, amount: int) -> None:
        """Increase the desired body length by ``amount`` segments."""

        self.chain.grow(amount)

    def kill(self, cause: str) -> None:
        """Mark the snake as dead."""

        self.alive = False
        self.cause_of_death = cause

    def to_snapshot(self, now: int) -> dict:
        """Return a snapshot representation for the renderer."""

        return {
            "id": self.id,
            "name": self.name,
            "color": self.color,
            "head": {"x": self.head.x, "y": self.head.y},
            "angle": self.angle,
            "alive": self.alive,
            "score": self.score,
            "length": self.target_length,
            "slowed": self.alive and self.is_slowed(now),
            "segments": self.chain.to_snapshot(),
        }
