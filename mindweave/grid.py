"""Snapping of scene coordinates to a square grid."""

from __future__ import annotations

import math
from dataclasses import dataclass

Point = tuple[float, float]


def _round_half_away(value: float) -> float:
    """Round to the nearest integer, with halves going away from zero."""
    return math.copysign(math.floor(abs(value) + 0.5), value)


@dataclass
class Grid:
    """A square grid; a size of zero disables snapping."""

    size: int = 0

    def snap_to_grid(self, point: Point) -> Point:
        """Return the grid point nearest to ``point``."""
        x, y = point
        if not self.size:
            return (float(x), float(y))
        return (
            float(_round_half_away(x / self.size) * self.size),
            float(_round_half_away(y / self.size) * self.size),
        )