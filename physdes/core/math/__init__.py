"""
Core math modules для physdes

Скалярная алгебра геометрических примитивов и проверяемая арифметика
беззнаковых расстояний.
"""

# Numerical Safeguards
from physdes.core.math.numerical_safeguards import (
    DEFAULT_SAFEGUARD_CONFIG,
    DISTANCE_BITS_ALLOWED,
    DISTANCE_BITS_DEFAULT,
    UNSIGNED_DIST_MAX,
    DistanceOverflowError,
    SafeguardConfig,
    abs_diff,
    checked_distance_sum,
    is_integral,
    to_unsigned_distance,
)

# Generic algebra
from physdes.core.math.generic import (
    SupportsContain,
    SupportsDisplace,
    SupportsMinDist,
    SupportsOverlap,
    SupportsValidity,
    contain,
    displacement,
    is_invalid,
    min_dist,
    overlap,
)

__all__ = [
    # Numerical Safeguards — Constants
    "DEFAULT_SAFEGUARD_CONFIG",
    "DISTANCE_BITS_ALLOWED",
    "DISTANCE_BITS_DEFAULT",
    "UNSIGNED_DIST_MAX",
    # Numerical Safeguards — Exceptions
    "DistanceOverflowError",
    # Numerical Safeguards — Config
    "SafeguardConfig",
    # Numerical Safeguards — Functions
    "abs_diff",
    "checked_distance_sum",
    "is_integral",
    "to_unsigned_distance",
    # Generic — Protocols
    "SupportsContain",
    "SupportsDisplace",
    "SupportsMinDist",
    "SupportsOverlap",
    "SupportsValidity",
    # Generic — Functions
    "contain",
    "displacement",
    "is_invalid",
    "min_dist",
    "overlap",
]
