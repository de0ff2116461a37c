"""Follow-the-leader body physics."""

from __future__ import annotations

from typing import List

from . import utils
from .world import World


class SegmentChain:
    """The ordered body positions trailing a snake's head.

    Index 0 is the segment nearest the head. Every call to :meth:`follow`
    walks the chain head to tail and pulls each segment to exactly
    ``spacing`` behind its leader along the wrap-aware direction. Segments
    that are already within ``spacing`` of their leader stay where they
    are, so the rope slackens instead of bouncing.

    Growth raises ``target_length`` only. The next :meth:`follow` appends
    clones of the current tail until the chain reaches that length, and the
    clones separate from the tail over the following ticks.
    """

    def __init__(self, spacing: float, segments: List[utils.Vec2] | None = None, target_length: int | None = None) -> None:
        self.spacing = spacing
        self.segments: List[utils.Vec2] = [segment.copy() for segment in segments or []]
        self.target_length = len(self.segments) if target_length is None else target_length

    @classmethod
    def laid_out(cls, world: World, head: utils.Vec2, angle: float, length: int, spacing: float) -> "SegmentChain":
        """Return a settled straight chain of ``length`` segments behind ``head``."""

        backwards = utils.Vec2.from_angle(angle, -spacing)
        segments = [world.wrap(head + backwards * index) for index in range(1, length + 1)]
        return cls(spacing, segments, length)

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self):
        return iter(self.segments)

    def __getitem__(self, index: int) -> utils.Vec2:
        return self.segments[index]

    @property
    def tail(self) -> utils.Vec2 | None:
        return self.segments[-1] if self.segments else None

    def grow(self, amount: int) -> None:
        """Request ``amount`` extra segments."""

        self.target_length += amount

    def _materialize(self, head: utils.Vec2) -> None:
        anchor = self.tail if self.tail is not None else head
        while len(self.segments) < self.target_length:
            self.segments.append(anchor.copy())

    def follow(self, head: utils.Vec2, world: World) -> None:
        """Reposition every segment behind ``head`` for one tick."""

        self._materialize(head)
        leader = head
        for index, current in enumerate(self.segments):
            delta = world.delta(leader, current)
            distance = delta.length()
            if distance > self.spacing:
                moved = leader - delta * (self.spacing / distance)
            else:
                moved = current
            placed = world.wrap(moved)
            self.segments[index] = placed
            leader = placed

    def to_snapshot(self) -> list[dict[str, float]]:
        return [{"x": point.x, "y": point.y} for point in self.segments]
