"""Integer rectangles with the point and overlap tests the engine relies on."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: int
    y: int
    w: int
    h: int

    def contains(self, point: Sequence[float]) -> bool:
        """Return True if the point lies inside the rectangle, edges included."""
        px, py = point
        return (
            self.x <= px <= self.x + self.w
            and self.y <= py <= self.y + self.h
        )

    def intersects(self, other: Rect) -> bool:
        """Return True if the two rectangles overlap; touching edges do not count."""
        return (
            self.x < other.x + other.w
            and self.x + self.w > other.x
            and self.y < other.y + other.h
            and self.y + self.h > other.y
        )