"""Pygame host for the serpent simulation."""
