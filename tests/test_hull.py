"""Tests for the monotone-chain convex hull."""

import pytest
from shapely.geometry import MultiPoint
from shapely.geometry import Polygon as ShapelyPolygon

from polysweep.geometry import Point, Polygon


SCATTER = [
    (0, 0), (5, 1), (7, 4), (6, 8), (2, 9), (-2, 5), (-1, 2),
    (2, 3), (3, 5), (4, 2), (1, 6),
]


def test_interior_point_excluded():
    """Square corners plus the centre give back the corners only."""
    polygon = Polygon([(0, 0), (2, 0), (2, 2), (0, 2), (1, 1)])
    hull = polygon.convex_hull()
    assert Point(1, 1) not in hull.points
    assert list(hull) == [Point(0, 0), Point(0, 2), Point(2, 2), Point(2, 0), Point(0, 0)]


def test_convex_input_unchanged():
    """Points already in convex position all appear, closed by a repeat."""
    diamond = Polygon([(1, 0), (2, 1), (1, 2), (0, 1)])
    hull = diamond.convex_hull()
    assert list(hull) == [Point(1, 0), Point(0, 1), Point(1, 2), Point(2, 1), Point(1, 0)]
    assert set(hull) == set(diamond)


def test_triangle():
    hull = Polygon([(0, 0), (4, 0), (2, 3)]).convex_hull()
    assert list(hull) == [Point(0, 0), Point(2, 3), Point(4, 0), Point(0, 0)]


def test_collinear_points_collapse():
    """Points on one line reduce to the two ends."""
    hull = Polygon([(1, 1), (0, 0), (2, 2)]).convex_hull()
    assert list(hull) == [Point(0, 0), Point(2, 2), Point(0, 0)]


def test_duplicates_ignored():
    hull = Polygon([(0, 0), (0, 0), (4, 0), (2, 3), (2, 3)]).convex_hull()
    assert set(hull) == {Point(0, 0), Point(4, 0), Point(2, 3)}
    assert len(hull) == 4


def test_matches_shapely():
    """Hull vertices and area agree with shapely's convex hull."""
    hull = Polygon(SCATTER).convex_hull()
    expected = MultiPoint(SCATTER).convex_hull

    assert {tuple(p) for p in hull} == set(expected.exterior.coords)
    assert ShapelyPolygon([tuple(p) for p in hull]).area == pytest.approx(expected.area)


def test_input_order_does_not_matter():
    forward = Polygon(SCATTER).convex_hull()
    backward = Polygon(reversed(SCATTER)).convex_hull()
    assert forward == backward


@pytest.mark.parametrize("turns", [1, 2, 3])
def test_consistent_under_rotation(turns):
    """Rotating the input by quarter turns rotates the hull vertex set."""
    def rotate(x, y):
        for _ in range(turns):
            x, y = -y, x
        return (x, y)

    rotated = Polygon([rotate(x, y) for x, y in SCATTER])
    hull = Polygon(SCATTER).convex_hull()
    assert set(rotated.convex_hull()) == {Point(*rotate(p.x, p.y)) for p in hull}


def test_empty_and_single_point():
    assert len(Polygon().convex_hull()) == 0
    assert list(Polygon([(3, 4)]).convex_hull()) == [Point(3, 4), Point(3, 4)]
