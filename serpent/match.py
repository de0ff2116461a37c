"""Fixed-step match orchestration."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math
import random
from typing import Dict, List, Mapping, Optional

from . import events, utils
from .collision import CollisionResolver
from .food import FoodSpawner
from .projectile import ProjectileSystem
from .snake import Snake, SnakeInput
from .state import MatchState, MatchStatus
from .world import World

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlayerSlot:
    """Where and how a player's snake enters the match."""

    id: int
    name: str
    color_name: str
    color: tuple[int, int, int]
    start_x: float
    start_angle: float


PLAYER_SLOTS: tuple[PlayerSlot, ...] = (
    PlayerSlot(1, "Player 1", "Green", (34, 197, 94), 0.25, 0.0),
    PlayerSlot(2, "Player 2", "Blue", (59, 130, 246), 0.75, math.pi),
)


@dataclass
class TickResult:
    """What one call to :meth:`Match.step` produced."""

    tick: int
    events: List[object] = field(default_factory=list)

    @property
    def ended(self) -> bool:
        return any(isinstance(event, events.MatchEnded) for event in self.events)


class Match:
    """Owns one match and advances it one tick at a time.

    The host calls :meth:`step` at a fixed rate with the control state of
    every player and renders :meth:`snapshot` between calls. Cancelling a
    match is simply not calling :meth:`step` again.
    """

    def __init__(self, world: Optional[World] = None, rng: Optional[random.Random] = None) -> None:
        self.world = world or World()
        self.rng = rng or random.Random()
        self.spawner = FoodSpawner(self.rng)
        self.resolver = CollisionResolver(self.spawner)
        self.state = self._new_state()
        logger.info(
            "Match started: mode=%s difficulty=%s world=%gx%g",
            self.world.mode.value,
            self.world.difficulty.value,
            self.world.width,
            self.world.height,
        )

    def _new_state(self) -> MatchState:
        slots = PLAYER_SLOTS if self.world.is_duo else PLAYER_SLOTS[:1]
        snakes: Dict[int, Snake] = {}
        for slot in slots:
            snakes[slot.id] = Snake.spawn(
                slot.id,
                slot.name,
                slot.color,
                self.world,
                utils.Vec2(self.world.width * slot.start_x, self.world.height / 2),
                slot.start_angle,
                color_name=slot.color_name,
            )
        food = self.spawner.spawn(self.world, snakes.values())
        return MatchState(
            world=self.world,
            snakes=snakes,
            food=food,
            speed=self.world.settings.speed,
            projectiles=ProjectileSystem(),
        )

    @property
    def snakes(self) -> Dict[int, Snake]:
        return self.state.snakes

    @property
    def status(self) -> MatchStatus:
        return self.state.status

    @property
    def tick(self) -> int:
        return self.state.tick

    def _validate(self, inputs: Mapping[int, SnakeInput]) -> None:
        unknown = set(inputs) - set(self.state.snakes)
        if unknown:
            raise ValueError(f"Input supplied for unknown snakes: {sorted(unknown)}")

    def step(self, inputs: Optional[Mapping[int, SnakeInput]] = None) -> TickResult:
        """Advance the match by one tick."""

        inputs = inputs or {}
        self._validate(inputs)
        state = self.state
        if not state.running:
            return TickResult(state.tick)

        state.tick += 1
        now = state.tick
        result = TickResult(now)
        idle = SnakeInput()

        if self.world.is_duo:
            for snake in state.live_snakes():
                if inputs.get(snake.id, idle).fire:
                    projectile = state.projectiles.fire(snake, now)
                    if projectile is not None:
                        result.events.append(events.ShotFired(snake.id, projectile.id))

        rotation_speed = self.world.settings.rotation_speed
        for snake in state.live_snakes():
            snake.steer(inputs.get(snake.id, idle), rotation_speed)
            snake.advance(self.world, state.speed, now)

        if self.world.is_duo:
            result.events.extend(state.projectiles.step(self.world, state.snakes.values(), now))

        result.events.extend(self.resolver.resolve(state))

        if not state.running:
            logger.info("Match ended on tick %d: winner=%s reason=%s", now, state.winner, state.reason)
        return result

    def snapshot(self) -> dict:
        """Return a plain-data view of the match for rendering."""

        state = self.state
        return {
            "tick": state.tick,
            "mode": self.world.mode.value,
            "difficulty": self.world.difficulty.value,
            "width": self.world.width,
            "height": self.world.height,
            "speed": state.speed,
            "status": state.status.value,
            "winner": state.winner,
            "reason": state.reason,
            "food": state.food.to_dict(),
            "snakes": [snake.to_snapshot(state.tick) for snake in state.snakes.values()],
            "projectiles": state.projectiles.to_snapshot(),
        }
