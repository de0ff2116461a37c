"""Per-tick rule engine: pickups, collisions and match termination."""

from __future__ import annotations

import logging
from typing import Dict

from . import constants, events
from .food import FoodSpawner
from .snake import Snake
from .state import MatchState, MatchStatus

logger = logging.getLogger(__name__)


def _within(a, b, radius: float) -> bool:
    """Return ``True`` if ``a`` and ``b`` are closer than ``radius`` (no wrap)."""

    dx = a.x - b.x
    dy = a.y - b.y
    return dx * dx + dy * dy < radius * radius


class CollisionResolver:
    """Decide scoring, growth, speed changes and the match outcome.

    Rules run in a fixed order every tick: food pickup, self collision,
    inter-snake collision (duo only), termination. Rewards granted in the
    pickup phase stand even when the same tick ends the match.
    """

    def __init__(
        self,
        spawner: FoodSpawner,
        pickup_radius: float = constants.FOOD_PICKUP_RADIUS,
        reward: int = constants.FOOD_REWARD,
        growth: int = constants.FOOD_GROWTH,
        self_exempt: int = constants.SELF_HIT_EXEMPT_SEGMENTS,
        self_radius: float = constants.SELF_HIT_RADIUS,
        head_radius: float = constants.HEAD_HIT_RADIUS,
        body_radius: float = constants.BODY_HIT_RADIUS,
    ) -> None:
        self.spawner = spawner
        self.pickup_radius = pickup_radius
        self.reward = reward
        self.growth = growth
        self.self_exempt = self_exempt
        self.self_radius = self_radius
        self.head_radius = head_radius
        self.body_radius = body_radius

    def resolve(self, state: MatchState) -> list:
        """Run every rule once against ``state`` and return the events."""

        if not state.running:
            return []
        results: list = self._resolve_food(state)
        deaths: Dict[int, str] = {}
        self._resolve_self_hits(state, deaths)
        if state.world.is_duo:
            self._resolve_inter_snake(state, deaths)
        results.extend(self._terminate(state, deaths))
        return results

    def _resolve_food(self, state: MatchState) -> list:
        food = state.food
        eaters = [
            snake for snake in state.live_snakes()
            if _within(snake.head, food.position, self.pickup_radius)
        ]
        results: list = []
        for snake in eaters:
            snake.score += self.reward
            snake.grow(self.growth)
            results.append(events.ScoreChanged(snake.id, self.reward, snake.score))
            results.append(events.LengthChanged(snake.id, self.growth, snake.target_length))
            speed_event = self._accelerate(state)
            if speed_event is not None:
                results.append(speed_event)
            logger.debug("Snake %s ate food %s, score %s", snake.id, food.id, snake.score)
        if eaters:
            state.food = self.spawner.spawn(state.world, state.snakes.values())
            results.append(events.FoodRelocated(state.food.position.copy(), eaters[0].id))
        return results

    @staticmethod
    def _accelerate(state: MatchState) -> events.SpeedChanged | None:
        settings = state.world.settings
        if not settings.speed_increment:
            return None
        speed = state.speed + settings.speed_increment
        if settings.max_speed is not None:
            speed = min(speed, settings.max_speed)
        if speed == state.speed:
            return None
        state.speed = speed
        capped = settings.max_speed is not None and speed >= settings.max_speed
        return events.SpeedChanged(speed, capped)

    def _self_hit(self, snake: Snake) -> bool:
        for segment in snake.segments[self.self_exempt:]:
            if _within(snake.head, segment, self.self_radius):
                return True
        return False

    def _body_hit(self, attacker: Snake, victim: Snake) -> bool:
        return any(_within(attacker.head, segment, self.body_radius) for segment in victim.segments)

    def _resolve_self_hits(self, state: MatchState, deaths: Dict[int, str]) -> None:
        for snake in list(state.live_snakes()):
            if not self._self_hit(snake):
                continue
            if state.world.is_duo:
                cause = f"{snake.display_name} hit themselves!"
            else:
                cause = "You hit yourself!"
            snake.kill(cause)
            deaths[snake.id] = cause

    def _resolve_inter_snake(self, state: MatchState, deaths: Dict[int, str]) -> None:
        snakes = list(state.snakes.values())
        if len(snakes) != 2 or not all(snake.alive for snake in snakes):
            return
        first, second = snakes
        if _within(first.head, second.head, self.head_radius):
            cause = "Head-on collision!"
            for snake in snakes:
                snake.kill(cause)
                deaths[snake.id] = cause
            return
        # Player 1 is checked first; a dead victim no longer counts as an obstacle.
        for attacker, victim in ((first, second), (second, first)):
            if not victim.alive or not self._body_hit(attacker, victim):
                continue
            cause = f"{attacker.display_name} hit {victim.name}!"
            attacker.kill(cause)
            deaths[attacker.id] = cause

    def _terminate(self, state: MatchState, deaths: Dict[int, str]) -> list:
        if not deaths:
            return []
        results: list = [events.SnakeDied(snake_id, cause) for snake_id, cause in deaths.items()]
        reason = " ".join(dict.fromkeys(deaths.values()))
        if not state.world.is_duo:
            winner = None
        else:
            survivors = [snake.id for snake in state.snakes.values() if snake.alive]
            winner = survivors[0] if len(survivors) == 1 else constants.TIE
        state.status = MatchStatus.ENDED
        state.winner = winner
        state.reason = reason
        results.append(events.MatchEnded(winner, reason))
        return results
