"""Polygon operations for polysweep.

Boolean operations sweep a horizontal scanline over the distinct vertex
heights of the polygons involved. Results are built as sets of points
(deduplicated by exact coordinate equality) and ordered afterwards.
"""

import functools
import logging
import math
from dataclasses import dataclass
from itertools import groupby
from typing import Dict, Iterable, Iterator, List, Sequence, Set, Tuple

from .errors import EmptyPolygon
from .intersection import edge_crossings, edge_points_at, intersection
from .types import LineSegment, Point

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Polygon:
    """A simple polygon given by its vertex loop.

    Edges connect consecutive points, wrapping from the last point back to
    the first. Winding order, duplicate vertices and self-intersection are
    not checked.
    """
    points: Tuple[Point, ...]

    def __init__(self, points: Iterable = ()):
        object.__setattr__(self, "points", tuple(
            p if isinstance(p, Point) else Point(*p) for p in points
        ))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def edges(self) -> List[LineSegment]:
        """Segments from each point to the next, closing back to the first."""
        n = len(self.points)
        return [
            LineSegment(self.points[i], self.points[(i + 1) % n])
            for i in range(n)
        ]

    def bounding_box(self) -> Tuple[float, float, float, float]:
        """Return (min_x, min_y, max_x, max_y) over all vertices."""
        if not self.points:
            raise EmptyPolygon("bounding box of a polygon with no points")
        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]
        return (min(xs), min(ys), max(xs), max(ys))

    def centroid(self) -> Point:
        """Arithmetic mean of the vertices (not the area centroid)."""
        if not self.points:
            raise EmptyPolygon("centroid of a polygon with no points")
        n = len(self.points)
        return Point(
            sum(p.x for p in self.points) / n,
            sum(p.y for p in self.points) / n,
        )

    def union(self, other: "Polygon") -> "Polygon":
        """Combine both vertex sets with the scanline crossings of every edge.

        At each distinct vertex height, the line of every edge of both
        polygons is intersected with the scanline and finite crossings are
        added. The result is a point cloud in (x, y) order, not a boundary
        traversal.
        """
        result: Set[Point] = set(self.points) | set(other.points)
        edges = self.edges() + other.edges()

        for y in sorted({p.y for p in result}):
            for edge in edges:
                x, _ = intersection(edge, y)
                if math.isfinite(x):
                    result.add(Point(x, y))

        logger.debug("union of %d and %d points gave %d points",
                     len(self.points), len(other.points), len(result))
        return Polygon(sorted(result))

    def difference(self, other: "Polygon") -> "Polygon":
        """Drop the vertices of this polygon that lie strictly inside `other`.

        The surviving vertices are ordered counter-clockwise around this
        polygon's centroid.
        """
        if not self.points:
            return Polygon()

        result: Set[Point] = set(self.points)
        other_edges = other.edges()

        for y, row in _scanlines(result):
            crossings = edge_crossings(other_edges, y)
            for point in row:
                if _strictly_inside(point, crossings, other_edges):
                    result.discard(point)

        logger.debug("difference removed %d of %d points",
                     len(set(self.points)) - len(result), len(set(self.points)))
        return Polygon(counter_clockwise(result, self.centroid()))

    def split_difference(self, other: "Polygon") -> List["Polygon"]:
        """Difference split into fragments where `other` cuts across this polygon.

        The plane is cut into slabs between consecutive distinct vertex
        heights of both polygons. A slab is removed when `other` covers
        every span of this polygon at the slab's mid-height. Each run of
        kept slabs becomes one fragment holding the surviving points on the
        scanlines that bound it.
        """
        if not self.points:
            return []

        self_edges = self.edges()
        other_edges = other.edges()
        own = set(self.points)
        rows = dict(_scanlines(own | set(other.points)))
        heights = list(rows)

        boundary_cache: Dict[float, Set[Point]] = {}

        def boundary(y: float) -> Set[Point]:
            if y not in boundary_cache:
                boundary_cache[y] = _surviving_points(
                    y, rows[y], own, self_edges, other_edges)
            return boundary_cache[y]

        fragments: List[Set[Point]] = []
        current: Set[Point] = set()
        for lower, upper in zip(heights, heights[1:]):
            if _slab_removed((lower + upper) / 2, self_edges, other_edges):
                if current:
                    fragments.append(current)
                    current = set()
                continue
            current |= boundary(lower)
            current |= boundary(upper)
        if current:
            fragments.append(current)

        polygons = []
        for fragment in fragments:
            if len(fragment) < 3:
                logger.debug("dropping degenerate fragment of %d points", len(fragment))
                continue
            polygons.append(Polygon(counter_clockwise(fragment, Polygon(fragment).centroid())))

        logger.debug("split difference produced %d fragments", len(polygons))
        return polygons

    def convex_hull(self) -> "Polygon":
        """Convex hull by Andrew's monotone chain, sweeping in y.

        The returned loop ends with a repeat of its first point.
        """
        points = sorted(self.points, key=lambda p: (p.y, p.x))
        hull: List[Point] = []

        for point in points:
            while len(hull) >= 2 and _turn(hull[-2], hull[-1], point) <= 0:
                hull.pop()
            hull.append(point)

        # Never pop back into the first chain
        floor = len(hull) + 1
        for point in reversed(points):
            while len(hull) >= floor and _turn(hull[-2], hull[-1], point) <= 0:
                hull.pop()
            hull.append(point)

        logger.debug("convex hull kept %d of %d points", len(hull), len(points))
        return Polygon(hull)


def _turn(prev: Point, last: Point, candidate: Point) -> float:
    return (prev - last).cross(candidate - last)


def _scanlines(points: Iterable[Point]) -> Iterator[Tuple[float, List[Point]]]:
    """Group points by y, lowest scanline first."""
    ordered = sorted(points, key=lambda p: (p.y, p.x))
    for y, row in groupby(ordered, key=lambda p: p.y):
        yield y, list(row)


def _on_boundary(point: Point, edges: Iterable[LineSegment]) -> bool:
    for edge in edges:
        if (edge.p2 - edge.p1).cross(point - edge.p1) != 0:
            continue
        if (min(edge.p1.x, edge.p2.x) <= point.x <= max(edge.p1.x, edge.p2.x)
                and min(edge.p1.y, edge.p2.y) <= point.y <= max(edge.p1.y, edge.p2.y)):
            return True
    return False


def _strictly_inside(point: Point, crossings: Sequence[float],
                     edges: Sequence[LineSegment]) -> bool:
    """Even-odd test using the crossings already computed for point.y."""
    if _on_boundary(point, edges):
        return False
    return sum(1 for x in crossings if x > point.x) % 2 == 1


def _spans(crossings: Sequence[float]) -> List[Tuple[float, float]]:
    return list(zip(crossings[0::2], crossings[1::2]))


def _slab_removed(y: float, self_edges: Sequence[LineSegment],
                  other_edges: Sequence[LineSegment]) -> bool:
    own_spans = _spans(edge_crossings(self_edges, y))
    if not own_spans:
        return True
    cover = _spans(edge_crossings(other_edges, y))
    return all(
        any(lo <= start and end <= hi for lo, hi in cover)
        for start, end in own_spans
    )


def _surviving_points(y: float, row: Sequence[Point], own: Set[Point],
                      self_edges: Sequence[LineSegment],
                      other_edges: Sequence[LineSegment]) -> Set[Point]:
    self_crossings = edge_crossings(self_edges, y)
    other_crossings = edge_crossings(other_edges, y)

    kept = set()
    for point in row:
        if point in own:
            if not _strictly_inside(point, other_crossings, other_edges):
                kept.add(point)
        elif (_on_boundary(point, self_edges)
              or _strictly_inside(point, self_crossings, self_edges)):
            kept.add(point)

    for x in edge_points_at(self_edges, y):
        point = Point(x, y)
        if not _strictly_inside(point, other_crossings, other_edges):
            kept.add(point)
    return kept


def _half_plane(v: Point) -> int:
    return 0 if v.y > 0 or (v.y == 0 and v.x >= 0) else 1


def _angular_order(u: Point, v: Point) -> int:
    hu, hv = _half_plane(u), _half_plane(v)
    if hu != hv:
        return hu - hv
    turn = u.cross(v)
    if turn > 0:
        return -1
    if turn < 0:
        return 1
    du = u.x * u.x + u.y * u.y
    dv = v.x * v.x + v.y * v.y
    return (du > dv) - (du < dv)


def counter_clockwise(points: Iterable[Point], origin: Point) -> List[Point]:
    """Order points counter-clockwise by angle around `origin`.

    Angles start from the positive x axis; points at the same angle are
    ordered nearest first.
    """
    key = functools.cmp_to_key(
        lambda a, b: _angular_order(a - origin, b - origin))
    return sorted(points, key=key)
