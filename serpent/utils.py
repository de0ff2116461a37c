"""Geometry primitives and toroidal plane arithmetic.

Two notions of distance live side by side. Body following measures along
the shortest path around the torus (:func:`wrapped_delta`), while every hit
test uses the plain Euclidean distance between stored coordinates
(:meth:`Vec2.distance_to`). Near the seam the two disagree, and hit tests
will not see a head and a segment that touch across the edge.
"""

from __future__ import annotations

from dataclasses import dataclass
import math


@dataclass
class Vec2:
    """A light‑weight two dimensional vector used for geometry operations."""

    x: float
    y: float

    def copy(self) -> "Vec2":
        """Return a shallow copy of the vector."""

        return Vec2(self.x, self.y)

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vec2":
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def length(self) -> float:
        """Return the Euclidean length of the vector."""

        return math.hypot(self.x, self.y)

    def distance_to(self, other: "Vec2") -> float:
        """Return the plain Euclidean distance to ``other`` (no wrap)."""

        return (self - other).length()

    @classmethod
    def from_angle(cls, angle: float, magnitude: float = 1.0) -> "Vec2":
        """Return a vector of ``magnitude`` pointing along ``angle`` radians."""

        return cls(math.cos(angle) * magnitude, math.sin(angle) * magnitude)


def wrap(value: float, dim: float) -> float:
    """Fold ``value`` into the half-open interval ``[0, dim)``."""

    folded = value % dim
    # Tiny negatives round up to exactly ``dim`` under float modulo.
    if folded >= dim:
        folded -= dim
    return folded


def wrap_position(position: Vec2, width: float, height: float) -> Vec2:
    """Return ``position`` folded into the plane bounds."""

    return Vec2(wrap(position.x, width), wrap(position.y, height))


def wrapped_axis_delta(delta: float, dim: float) -> float:
    """Return the shorter of ``delta`` and its complement around ``dim``."""

    if abs(delta) > dim / 2:
        return delta - dim if delta > 0 else delta + dim
    return delta


def wrapped_delta(target: Vec2, current: Vec2, width: float, height: float) -> Vec2:
    """Return ``target - current`` along the shortest path around the torus."""

    return Vec2(
        wrapped_axis_delta(target.x - current.x, width),
        wrapped_axis_delta(target.y - current.y, height),
    )


def normalize_angle(angle: float) -> float:
    """Return ``angle`` normalised into ``(-pi, pi]``."""

    while angle > math.pi:
        angle -= 2 * math.pi
    while angle <= -math.pi:
        angle += 2 * math.pi
    return angle
