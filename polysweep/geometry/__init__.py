"""Geometry primitives and polygon operations for polysweep."""

from .errors import GeometryError, InvalidCoordinate, EmptyPolygon
from .types import Point, LineSegment
from .intersection import intersection
from .polygon import Polygon, counter_clockwise

__all__ = [
    "GeometryError",
    "InvalidCoordinate",
    "EmptyPolygon",
    "Point",
    "LineSegment",
    "Polygon",
    "intersection",
    "counter_clockwise",
]
