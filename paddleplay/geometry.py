"""Small 2D vector and bounding-volume helpers used by the game physics."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    """An immutable two-dimensional vector."""

    x: float
    y: float

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> "Vec2":
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)

    def length(self) -> float:
        """Return the Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def normalize(self) -> "Vec2":
        """Return a unit vector pointing the same way; a zero vector has no direction."""
        length = self.length()
        if length == 0 or not math.isfinite(length):
            raise ValueError(f"cannot normalize {self!r}")
        return Vec2(self.x / length, self.y / length)


def circle_intersects_aabb(center: Vec2, radius: float, box_center: Vec2, half_size: Vec2) -> bool:
    """Return True if a circle touches or overlaps an axis-aligned box."""
    closest = Vec2(
        min(max(center.x, box_center.x - half_size.x), box_center.x + half_size.x),
        min(max(center.y, box_center.y - half_size.y), box_center.y + half_size.y),
    )
    offset = center - closest
    return offset.x * offset.x + offset.y * offset.y <= radius * radius