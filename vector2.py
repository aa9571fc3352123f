"""vector2.py: immutable 2D vector used by the world map layout.

Every component is guaranteed finite: the constructor replaces NaN or
infinity with 0.0 (and logs a warning), so force blow-ups degrade to
"no force" instead of poisoning every position downstream.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

logger = logging.getLogger(__name__)


def _finite(v: float) -> float:
    v = float(v)
    if not math.isfinite(v):
        logger.warning("Non-finite value %r replaced with 0.0", v)
        return 0.0
    return v


@dataclass(frozen=True)
class Vector2:
    x: float = 0.0
    y: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "x", _finite(self.x))
        object.__setattr__(self, "y", _finite(self.y))

    @classmethod
    def zero(cls) -> "Vector2":
        return cls(0.0, 0.0)

    def add(self, v: "Vector2") -> "Vector2":
        return Vector2(self.x + v.x, self.y + v.y)

    def subtract(self, v: "Vector2") -> "Vector2":
        return Vector2(self.x - v.x, self.y - v.y)

    def multiply(self, scalar: float) -> "Vector2":
        s = _finite(scalar)
        return Vector2(self.x * s, self.y * s)

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalize(self) -> "Vector2":
        """Unit vector in the same direction; the zero vector stays zero."""
        mag = self.magnitude()
        if mag == 0:
            return Vector2(0.0, 0.0)
        return Vector2(self.x / mag, self.y / mag)

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def validate(self) -> "Vector2":
        """Return self when finite, otherwise report it and return zero.

        The constructor already sanitizes (and reports) each component, so
        this only trips for instances built around __post_init__.
        """
        if not self.is_finite():
            logger.warning("Invalid vector: (%r, %r)", self.x, self.y)
            return Vector2(0.0, 0.0)
        return self

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)
