"""Simulation core for the serpent wraparound arena."""

__all__ = [
    "chain",
    "collision",
    "constants",
    "events",
    "food",
    "match",
    "projectile",
    "snake",
    "state",
    "utils",
    "world",
]
