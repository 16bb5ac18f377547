"""Operations on (x, y) points and polylines built from them.

Any point-like value is accepted: an ``XY``, an object with ``x``/``y``
attributes, a mapping with ``"x"``/``"y"`` keys or an ``(x, y)`` pair. A
missing coordinate reads as NaN and is carried through the arithmetic.
"""
from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Tuple

import numpy as np

from .arrays import map_between_each, sum
from .scalar import lerp, remap

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class XY:
    """An immutable point in the plane."""
    x: float = math.nan
    y: float = math.nan


def _coord(value: Any) -> float:
    return math.nan if value is None else value


def coords(point: Any) -> Tuple[float, float]:
    """(x, y) of a point-like value."""
    if isinstance(point, Mapping):
        return _coord(point.get("x")), _coord(point.get("y"))
    if hasattr(point, "x") or hasattr(point, "y"):
        return _coord(getattr(point, "x", None)), _coord(getattr(point, "y", None))
    x, y = point
    return _coord(x), _coord(y)


def lerp_between_points(point1: Any, point2: Any, t: float) -> XY:
    """Travel along a line in two dimensions between point1 and point2."""
    x1, y1 = coords(point1)
    x2, y2 = coords(point2)
    return XY(lerp(x1, x2, t), lerp(y1, y2, t))


def midpoint(point1: Any, point2: Any) -> XY:
    return lerp_between_points(point1, point2, 0.5)


def linear_integral(point1: Any, point2: Any) -> float:
    """Signed area between the segment point1-point2 and the x axis.

    The x extent is always taken as positive, so the sign follows ``y1 + y2``.
    """
    x1, y1 = coords(point1)
    x2, y2 = coords(point2)
    return abs(x2 - x1) * (y1 + y2) / 2


def sum_integrals_between_points(points: Sequence[Any]) -> float:
    """Area under a polyline, summed segment by segment."""
    return sum(map_between_each(points, lambda a, b, *_: linear_integral(a, b)))


def lerped_y_between_points(points: Sequence[Any], input_x: float) -> Optional[float]:
    """y of the piecewise-linear function through ``points`` at ``input_x``.

    Points are sorted by x, then y, on a copy. Inputs beyond either end give
    the y of the nearest end point. Inside the range, the position of the
    first point in the given order whose x is at least ``input_x`` selects
    the segment of the sorted points, so with duplicate x values the first
    one given wins. Returns ``None`` when there are no points.
    """
    if len(points) == 0:
        logger.debug("no points to interpolate between at x=%s", input_x)
        return None

    given = [coords(p) for p in points]
    ordered = sorted(given)
    if input_x <= ordered[0][0]:
        return ordered[0][1]
    if input_x >= ordered[-1][0]:
        return ordered[-1][1]

    i = next((idx for idx, (x, _) in enumerate(given) if x >= input_x), len(given) - 1)
    # unsorted input can match at 0, which has no lower neighbour
    i = max(i, 1)
    x1, y1 = ordered[i - 1]
    x2, y2 = ordered[i]
    return remap(x1, x2, y1, y2, input_x)


def points_from_array(array: Any) -> List[XY]:
    """Points from an (N, 2) array-like of x, y rows."""
    arr = np.asarray(array, dtype=float)
    if arr.size == 0:
        return []
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"expected an (N, 2) array, got shape {arr.shape}")
    return [XY(float(x), float(y)) for x, y in arr]


def points_to_array(points: Sequence[Any]) -> np.ndarray:
    """(N, 2) float array of the x, y coordinates of points."""
    return np.array([coords(p) for p in points], dtype=float).reshape(-1, 2)
