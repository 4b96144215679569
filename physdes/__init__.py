"""
physdes — геометрические примитивы для physical design (VLSI layout).

Интервалы, точки, векторы и объект слияния MergeObj.
"""

import logging

from physdes.core.domain import Interval, Point, Vector2, enlarge, hull, intersection
from physdes.core.math import (
    DistanceOverflowError,
    SafeguardConfig,
    contain,
    displacement,
    is_invalid,
    min_dist,
    overlap,
)
from physdes.merge import MergeObj

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Types
    "Interval",
    "MergeObj",
    "Point",
    "Vector2",
    # Config / errors
    "DistanceOverflowError",
    "SafeguardConfig",
    # Algebra
    "contain",
    "displacement",
    "enlarge",
    "hull",
    "intersection",
    "is_invalid",
    "min_dist",
    "overlap",
]
