"""Coordinate-list input/output utilities for polysweep.

Polygons are written as in the SVG `points` attribute: pairs of numbers
separated by commas and/or whitespace, e.g. ``"0,0 2,0 2,2 0,2"``.
"""

import re
from typing import Iterable, List

from .geometry import Point, Polygon

NUMBER_REGEX = r'[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?'


def parse_points(text: str) -> List[Point]:
    """Parse a coordinate list into points.

    Raises:
        ValueError: if the text holds stray characters or an odd count of numbers
    """
    if not text or not text.strip():
        return []

    leftover = re.sub(NUMBER_REGEX, '', text)
    if re.sub(r'[\s,]', '', leftover):
        raise ValueError(f"Unexpected characters in coordinate list: {text!r}")

    coords = [float(c) for c in re.findall(NUMBER_REGEX, text)]
    if len(coords) % 2:
        raise ValueError(f"Coordinate list needs an even count of numbers, got {len(coords)}")

    return [Point(coords[i], coords[i + 1]) for i in range(0, len(coords), 2)]


def parse_polygon(text: str) -> Polygon:
    return Polygon(parse_points(text))


def format_number(value: float, precision: int = 6) -> str:
    """Format a coordinate, trimming trailing zeros."""
    text = f"{value:.{precision}f}"
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return '0' if text == '-0' else text


def format_points(points: Iterable[Point], precision: int = 6) -> str:
    """Format points back into a coordinate list."""
    return ' '.join(
        f"{format_number(p.x, precision)},{format_number(p.y, precision)}"
        for p in points
    )
