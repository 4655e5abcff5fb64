"""Scanline intersection helpers."""

import math
from typing import Iterable, List, Tuple

from .types import LineSegment


def intersection(segment: LineSegment, y: float) -> Tuple[float, float]:
    """Intersect the line through `segment` with the horizontal line at `y`.

    The segment is treated as an infinite line: no check is made that `y`
    falls within its extent. A vertical segment always returns its own x.
    A horizontal segment has no single crossing and returns a non-finite x
    (infinite, or NaN when `y` lies on the segment's own line); callers
    filter those out with `math.isfinite`.
    """
    x1, y1 = segment.p1
    x2, y2 = segment.p2

    if x1 == x2:
        return (x1, y)

    m = (y2 - y1) / (x2 - x1)
    b = y1 - m * x1

    if m == 0:
        rise = y - b
        if rise == 0:
            return (math.nan, y)
        return (math.copysign(math.inf, rise), y)

    return ((y - b) / m, y)


def edge_crossings(edges: Iterable[LineSegment], y: float) -> List[float]:
    """Sorted x positions where `edges` cross the scanline at `y`.

    Uses the half-open rule: an edge counts only when exactly one endpoint
    lies strictly above `y`, so a vertex shared by two edges is counted once
    and horizontal edges are never counted. The result always has even
    length for a closed polygon.
    """
    xs = []
    for edge in edges:
        if (edge.p1.y > y) != (edge.p2.y > y):
            x, _ = intersection(edge, y)
            if math.isfinite(x):
                xs.append(x)
    xs.sort()
    return xs


def edge_points_at(edges: Iterable[LineSegment], y: float) -> List[float]:
    """x positions where `edges` touch the scanline at `y`, endpoints included.

    Horizontal edges are skipped; their endpoints are reached through the
    neighbouring edges. Endpoints lying on the scanline return their exact x.
    """
    xs = []
    for edge in edges:
        if edge.is_horizontal:
            continue
        low, high = sorted((edge.p1.y, edge.p2.y))
        if not low <= y <= high:
            continue
        if edge.p1.y == y:
            xs.append(edge.p1.x)
        elif edge.p2.y == y:
            xs.append(edge.p2.x)
        else:
            x, _ = intersection(edge, y)
            if math.isfinite(x):
                xs.append(x)
    return xs
