"""Type definitions for polysweep geometry."""

import math
from dataclasses import dataclass

from .errors import InvalidCoordinate


@dataclass(frozen=True, order=True)
class Point:
    """2D point.

    Points compare lexicographically (x first, then y) and hash by value,
    so they can be deduplicated in sets and sorted. The order has no
    geometric meaning.
    """
    x: float
    y: float

    def __post_init__(self):
        if not (math.isfinite(self.x) and math.isfinite(self.y)):
            raise InvalidCoordinate(f"Point coordinates must be finite, got ({self.x}, {self.y})")

    def __iter__(self):
        yield self.x
        yield self.y

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def cross(self, other: "Point") -> float:
        """2D cross product of two points treated as vectors.

        Positive when `other` is counter-clockwise of `self`.
        """
        return self.x * other.y - self.y * other.x


@dataclass(frozen=True)
class LineSegment:
    """A line segment defined by two endpoints."""
    p1: Point
    p2: Point

    def __iter__(self):
        yield self.p1
        yield self.p2

    @property
    def is_horizontal(self) -> bool:
        return self.p1.y == self.p2.y
