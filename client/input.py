"""Translate held keys into per-tick snake controls."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Sequence

import pygame

from serpent.snake import SnakeInput


@dataclass(frozen=True)
class KeyBindings:
    """Keys controlling one snake."""

    left: int
    right: int
    fire: int


DEFAULT_BINDINGS: Dict[int, KeyBindings] = {
    1: KeyBindings(pygame.K_LEFT, pygame.K_RIGHT, pygame.K_UP),
    2: KeyBindings(pygame.K_a, pygame.K_d, pygame.K_w),
}


class InputManager:
    """Sample the keyboard once per tick for every controlled snake."""

    def __init__(self, bindings: Dict[int, KeyBindings] | None = None) -> None:
        self.bindings = bindings or DEFAULT_BINDINGS

    def sample(self, pressed: Sequence[bool], snake_ids: Iterable[int]) -> Dict[int, SnakeInput]:
        """Build the input mapping for ``snake_ids`` from ``pressed`` key state."""

        controls: Dict[int, SnakeInput] = {}
        for snake_id in snake_ids:
            keys = self.bindings.get(snake_id)
            if keys is None:
                continue
            controls[snake_id] = SnakeInput(
                turn_left=bool(pressed[keys.left]),
                turn_right=bool(pressed[keys.right]),
                fire=bool(pressed[keys.fire]),
            )
        return controls
