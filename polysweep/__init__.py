"""polysweep: scanline polygon boolean operations and convex hulls."""

__version__ = "0.1.0"

from .geometry import (
    GeometryError,
    InvalidCoordinate,
    EmptyPolygon,
    Point,
    LineSegment,
    Polygon,
    intersection,
)

__all__ = [
    "GeometryError",
    "InvalidCoordinate",
    "EmptyPolygon",
    "Point",
    "LineSegment",
    "Polygon",
    "intersection",
]
