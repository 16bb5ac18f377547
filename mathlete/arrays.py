import collections.abc
import logging
import math
import numbers
from typing import Any, Callable, List, Optional, Sequence, TypeVar

import numpy as np

from .scalar import clamp, inverse_lerp, lerp, remap

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


def to_number(value: Any) -> float:
    """Best-effort numeric value of ``value``, 0 when there is none.

    ``None``, ``False``, empty strings and NaN read as 0, ``True`` as 1,
    strings are parsed with ``float`` and anything unparsable reads as 0.
    """
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0
    if math.isnan(number):
        return 0
    return number


def sum(values: Sequence[Any]) -> float:
    """Sum a numeric array, coercing each element with ``to_number``."""
    total = 0
    for v in values:
        total += to_number(v)
    return total


def average(values: Sequence[float]) -> float:
    """Mean of the values rounded to the nearest integer (halves round up).

    An infinite or NaN mean is returned as is.
    """
    if len(values) == 0:
        raise ValueError("values must be a non-empty sequence")
    mean = sum(values) / len(values)
    if not math.isfinite(mean):
        return mean
    return math.floor(mean + 0.5)


def percentile(values: Sequence[float], value: float) -> float:
    """Ratio of values lower to values remaining, ignoring exact matches."""
    count_lower = 0
    count_higher = len(values)
    for v in values:
        if v < value:
            count_lower += 1
        if v > value:
            return count_lower / (count_lower + count_higher)
        count_higher -= 1
    return 1


def map_between_each(values: Sequence[T], func: Callable[[T, T, int, Sequence[T]], R]) -> List[R]:
    """Apply ``func(a, b, i, values)`` to every adjacent pair of values."""
    return [func(values[i], values[i + 1], i, values) for i in range(len(values) - 1)]


def map_array_integral(values: Sequence[float]) -> List[float]:
    """N+1 length list of the sums below each of the N values."""
    result = [0]
    lead = 0
    for v in values:
        lead += v
        result.append(lead)
    return result


def map_array_derivative(values: Sequence[float]) -> List[float]:
    """N-1 length list of the change between the N values."""
    return map_between_each(values, lambda a, b, *_: b - a)


def _as_float(value: Any) -> float:
    number = to_number(value)
    try:
        return float(number)
    except OverflowError:
        return math.inf if number > 0 else -math.inf


def _check_bucket_count(bucket_count: Any) -> int:
    if isinstance(bucket_count, bool) or not isinstance(bucket_count, numbers.Real):
        raise ValueError("bucket_count must be a positive integer")
    if not bucket_count >= 1 or bucket_count % 1 != 0:
        raise ValueError("bucket_count must be a positive integer")
    return int(bucket_count)


def make_distribution(
    values: Sequence[Any],
    bucket_count: int,
    min_value: Optional[float] = None,
    max_value: Optional[float] = None,
) -> List[int]:
    """Count of values distributed across ``bucket_count`` buckets.

    Each value is remapped from ``min_value..max_value`` (the extent of the
    values unless given) onto ``0..bucket_count``, clamped to a valid index
    and floored. Values outside the range fall into the edge buckets, so the
    counts always add up to ``len(values)``.
    """
    bucket_count = _check_bucket_count(bucket_count)
    counts = [0] * bucket_count
    coerced = [_as_float(v) for v in values]
    if not coerced:
        return counts
    if min_value is None:
        min_value = min(coerced)
    else:
        min_value = _as_float(min_value)
    if max_value is None:
        max_value = max(coerced)
    else:
        max_value = _as_float(max_value)

    outside = 0
    for v in coerced:
        position = remap(min_value, max_value, 0, bucket_count, v)
        if not 0 <= position <= bucket_count:
            outside += 1
        # flooring decides which bucket owns a boundary value
        counts[math.floor(clamp(0, bucket_count - 1, position))] += 1

    if outside:
        logger.debug(
            "%d of %d values fell outside %s..%s and were counted in the edge buckets",
            outside, len(coerced), min_value, max_value,
        )
    return counts


def amplify(values: Sequence[float], coefficient: float) -> List[float]:
    """Multiply each value by a scalar."""
    return [v * coefficient for v in values]


def normalize_array(values: Sequence[float]) -> List[float]:
    """Rescale values so the lowest is 0 and the highest is 1."""
    if len(values) == 0:
        return []
    if len(values) == 1:
        return [1]
    lowest = min(values)
    highest = max(values)
    return [inverse_lerp(lowest, highest, v) for v in values]


def make_proportional(values: Sequence[float]) -> List[float]:
    """Rescale values so they add up to 1. A zero total is left as is."""
    total = sum(values)
    if total == 0:
        return list(values)
    return amplify(values, 1 / total)


def decimal_to_percent(value: float) -> float:
    return value * 100


def _is_sequence(values: Any) -> bool:
    if isinstance(values, (str, bytes, bytearray)):
        return False
    if isinstance(values, collections.abc.Sequence):
        return True
    return isinstance(values, np.ndarray) and values.ndim == 1


def lerp_in_array(values: Sequence[float], index: float) -> float:
    """Interpolate between the items of a discrete set as though it were continuous.

    The list is treated as a piecewise-linear function over ``0..len - 1``;
    indices outside that range give the first or last value and a NaN index
    gives NaN. Any sequence other than a string is accepted, as is a 1-D
    ndarray.
    """
    if not _is_sequence(values):
        raise TypeError("values must be a non-empty sequence")
    if len(values) == 0:
        raise ValueError("values must be a non-empty sequence")
    if math.isnan(index):
        return math.nan
    if index <= 0:
        return values[0]
    if index >= len(values) - 1:
        return values[-1]
    j = math.floor(index)
    return lerp(values[j], values[j + 1], index - j)
