"""Food entity and placement."""

from __future__ import annotations

from dataclasses import dataclass
import itertools
import logging
import random
from typing import Iterable, Optional

from . import constants, utils
from .snake import Snake
from .world import World

logger = logging.getLogger(__name__)

_id_counter = itertools.count(1)


@dataclass(frozen=True)
class Food:
    """The single food item on the plane. Replaced, never moved."""

    id: int
    position: utils.Vec2

    @classmethod
    def at(cls, position: utils.Vec2) -> "Food":
        """Create a food item at a specific ``position``."""

        return cls(id=next(_id_counter), position=position.copy())

    def to_dict(self) -> dict[str, float | int]:
        return {"id": self.id, "x": self.position.x, "y": self.position.y}


class FoodSpawner:
    """Place food away from every live snake by rejection sampling.

    Sampling gives up after ``max_attempts`` draws and falls back to the
    centre of the least crowded cell of a coarse grid, so a crowded plane
    never stalls a tick.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        margin: float = constants.FOOD_MARGIN,
        head_exclusion: float = constants.FOOD_HEAD_EXCLUSION,
        body_exclusion: float = constants.FOOD_BODY_EXCLUSION,
        max_attempts: int = constants.FOOD_MAX_ATTEMPTS,
        fallback_cell: float = constants.FOOD_FALLBACK_CELL,
    ) -> None:
        self.rng = rng or random.Random()
        self.margin = margin
        self.head_exclusion = head_exclusion
        self.body_exclusion = body_exclusion
        self.max_attempts = max_attempts
        self.fallback_cell = fallback_cell

    def _bounds(self, world: World) -> tuple[float, float, float, float]:
        # Clamp the margin so tiny worlds still have a non-empty area.
        margin_x = min(self.margin, world.width / 2)
        margin_y = min(self.margin, world.height / 2)
        return margin_x, margin_y, world.width - 2 * margin_x, world.height - 2 * margin_y

    def _clearance(self, point: utils.Vec2, snakes: list[Snake]) -> float:
        """Smallest slack between ``point`` and any exclusion zone.

        Non-negative clearance means ``point`` is a valid placement.
        """

        clearance = float("inf")
        for snake in snakes:
            clearance = min(clearance, point.distance_to(snake.head) - self.head_exclusion)
            for segment in snake.segments:
                clearance = min(clearance, point.distance_to(segment) - self.body_exclusion)
        return clearance

    def is_valid(self, point: utils.Vec2, snakes: Iterable[Snake]) -> bool:
        """Return ``True`` if ``point`` respects every exclusion radius."""

        for snake in snakes:
            if not snake.alive:
                continue
            if point.distance_to(snake.head) < self.head_exclusion:
                return False
            for segment in snake.segments:
                if point.distance_to(segment) < self.body_exclusion:
                    return False
        return True

    def spawn(self, world: World, snakes: Iterable[Snake]) -> Food:
        """Return a new food item placed clear of all live ``snakes``."""

        live = [snake for snake in snakes if snake.alive]
        left, top, span_x, span_y = self._bounds(world)
        for _ in range(self.max_attempts):
            candidate = utils.Vec2(
                self.rng.random() * span_x + left,
                self.rng.random() * span_y + top,
            )
            if self.is_valid(candidate, live):
                return Food.at(candidate)
        position = self._least_crowded(world, live)
        logger.warning(
            "Food placement gave up after %d attempts, falling back to (%.1f, %.1f)",
            self.max_attempts,
            position.x,
            position.y,
        )
        return Food.at(position)

    def _least_crowded(self, world: World, snakes: list[Snake]) -> utils.Vec2:
        left, top, span_x, span_y = self._bounds(world)
        columns = max(1, int(span_x // self.fallback_cell))
        rows = max(1, int(span_y // self.fallback_cell))
        cell_w = span_x / columns
        cell_h = span_y / rows
        best = utils.Vec2(left + 0.5 * cell_w, top + 0.5 * cell_h)
        best_clearance = self._clearance(best, snakes)
        for row in range(rows):
            for column in range(columns):
                centre = utils.Vec2(left + (column + 0.5) * cell_w, top + (row + 0.5) * cell_h)
                clearance = self._clearance(centre, snakes)
                if clearance > best_clearance:
                    best, best_clearance = centre, clearance
        return best
