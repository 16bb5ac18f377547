"""Helper functions for common math operations.

Scalar interpolation (``lerp``, ``remap`` ...), array statistics and
bucketing, and the ``Point`` namespace of (x, y) operations.
"""
import logging

from . import point as Point
from .arrays import (
    amplify,
    average,
    decimal_to_percent,
    lerp_in_array,
    make_distribution,
    make_proportional,
    map_array_derivative,
    map_array_integral,
    map_between_each,
    normalize_array,
    percentile,
    sum,
    to_number,
)
from .point import (
    XY,
    lerp_between_points,
    lerped_y_between_points,
    linear_integral,
    midpoint,
    sum_integrals_between_points,
)
from .scalar import clamp, inverse_lerp, lerp, remap

logging.getLogger(__name__).addHandler(logging.NullHandler())

# older name for lerped_y_between_points
lerped_y_for_x_closest_points = lerped_y_between_points

__all__ = [
    "Point",
    "XY",
    "amplify",
    "average",
    "clamp",
    "decimal_to_percent",
    "inverse_lerp",
    "lerp",
    "lerp_between_points",
    "lerp_in_array",
    "lerped_y_between_points",
    "lerped_y_for_x_closest_points",
    "linear_integral",
    "make_distribution",
    "make_proportional",
    "map_array_derivative",
    "map_array_integral",
    "map_between_each",
    "midpoint",
    "normalize_array",
    "percentile",
    "remap",
    "sum",
    "sum_integrals_between_points",
    "to_number",
]
