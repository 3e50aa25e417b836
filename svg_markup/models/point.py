"""
Point Model Module
==================
This module defines the 2D coordinate used for centers, vertices and offsets.
"""

from typing import NamedTuple, Tuple, Union


class Point(NamedTuple):
    """Pair of coordinates. Finiteness is not checked."""
    x: float = 0.0
    y: float = 0.0


PointLike = Union[Point, Tuple[float, float]]


def as_point(value: PointLike) -> Point:
    """Convert an ``(x, y)`` pair into a Point."""
    if isinstance(value, Point):
        return value
    x, y = value
    return Point(x, y)
