"""
Domain value objects.

Interval, Vector2, Point — immutable геометрические примитивы.
"""

from physdes.core.domain.interval import (
    Interval,
    SupportsEnlarge,
    SupportsHull,
    SupportsIntersect,
    enlarge,
    hull,
    intersection,
)
from physdes.core.domain.point import Point
from physdes.core.domain.vector2 import Vector2

__all__ = [
    # Interval module
    "Interval",
    "SupportsEnlarge",
    "SupportsHull",
    "SupportsIntersect",
    "enlarge",
    "hull",
    "intersection",
    # Point / Vector2
    "Point",
    "Vector2",
]
