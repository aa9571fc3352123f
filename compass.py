"""compass.py: exit direction name -> on-screen bias vector.

Screen space has y growing downward, so "north" points to negative y.
"""

from __future__ import annotations

from typing import Dict

from vector2 import Vector2

DIRECTION_VECTORS: Dict[str, Vector2] = {
    "east": Vector2(1, 0),
    "west": Vector2(-1, 0),
    "north": Vector2(0, -1),
    "south": Vector2(0, 1),
    "up": Vector2(1, -1).normalize(),
    "down": Vector2(-1, 1).normalize(),
}


def norm_direction(direction: str) -> str:
    return direction.strip().lower()


def get_direction_vector(direction: str) -> Vector2:
    """Unknown directions (including non-strings) give no bias at all."""
    if not isinstance(direction, str):
        return Vector2.zero()
    return DIRECTION_VECTORS.get(norm_direction(direction), Vector2.zero())
