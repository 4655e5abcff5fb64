"""Tests for coordinate-list parsing and formatting."""

import pytest
from polysweep.geometry import InvalidCoordinate, Point
from polysweep.points_io import format_number, format_points, parse_points, parse_polygon


def test_parse_space_and_comma_separated():
    assert parse_points("0,0 2,0 2,2") == [Point(0, 0), Point(2, 0), Point(2, 2)]
    assert parse_points("0 0, 2 0") == [Point(0, 0), Point(2, 0)]


def test_parse_signs_and_exponents():
    assert parse_points("-1.5,+2 1e2,.5") == [Point(-1.5, 2), Point(100, 0.5)]


def test_parse_empty():
    assert parse_points("") == []
    assert parse_points("   ") == []


def test_parse_odd_count_rejected():
    with pytest.raises(ValueError, match="even count"):
        parse_points("0,0 1")


def test_parse_stray_characters_rejected():
    with pytest.raises(ValueError, match="Unexpected characters"):
        parse_points("0,0 a,b")


def test_parse_overflow_is_invalid_coordinate():
    with pytest.raises(InvalidCoordinate):
        parse_points("1e400,0")


def test_parse_polygon():
    assert len(parse_polygon("0,0 1,0 1,1")) == 3


def test_format_trims_zeros():
    assert format_number(2.0) == "2"
    assert format_number(0.25) == "0.25"
    assert format_number(-0.0000001) == "0"
    assert format_number(1 / 3, precision=3) == "0.333"


def test_format_points():
    assert format_points([Point(0, 0), Point(1.5, -2)]) == "0,0 1.5,-2"
