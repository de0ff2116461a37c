"""Static description of the arena a match is played in."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from . import constants, utils


class GameMode(str, Enum):
    SINGLE = "single"
    DUO = "duo"


class Difficulty(str, Enum):
    EASY = "easy"
    HARD = "hard"


@dataclass(frozen=True)
class World:
    """Plane dimensions and rule selection, fixed for one match."""

    width: float = constants.DEFAULT_WIDTH
    height: float = constants.DEFAULT_HEIGHT
    mode: GameMode = GameMode.SINGLE
    difficulty: Difficulty = Difficulty.EASY

    def __post_init__(self) -> None:
        if not self.width > 0 or not self.height > 0:
            raise ValueError(f"World dimensions must be positive, got {self.width}x{self.height}")
        # Accept plain strings from the command line.
        object.__setattr__(self, "mode", GameMode(self.mode))
        object.__setattr__(self, "difficulty", Difficulty(self.difficulty))

    @property
    def is_duo(self) -> bool:
        return self.mode is GameMode.DUO

    @property
    def settings(self) -> constants.DifficultySettings:
        """Movement tuning for the selected difficulty."""

        return constants.DIFFICULTY_SETTINGS[self.difficulty.value]

    def wrap(self, position: utils.Vec2) -> utils.Vec2:
        """Fold ``position`` into ``[0, width) x [0, height)``."""

        return utils.wrap_position(position, self.width, self.height)

    def delta(self, target: utils.Vec2, current: utils.Vec2) -> utils.Vec2:
        """Return the wrap-aware displacement from ``current`` to ``target``."""

        return utils.wrapped_delta(target, current, self.width, self.height)
