def lerp(start: float, end: float, t: float = 0.5) -> float:
    """Travel along a line between start and end by a normalized amount."""
    return start + t * (end - start)


def clamp(bound1: float, bound2: float, v: float) -> float:
    """Nearest value to v inside the bounds (inclusive, either order)."""
    lower = min(bound1, bound2)
    upper = max(bound1, bound2)
    # max() keeps its first argument when v is NaN, so NaN lands on ``lower``
    return min(max(lower, v), upper)


def inverse_lerp(start: float, end: float, value: float) -> float:
    """Normalized position of value relative to start and end.

    A zero-width range has no defined position and gives 0.
    """
    if start == end:
        return 0
    return (value - start) / (end - start)


def remap(start1: float, end1: float, start2: float, end2: float, value: float) -> float:
    """Move value from the start1..end1 range into the start2..end2 range.

    Same as ``lerp(start2, end2, inverse_lerp(start1, end1, value))`` but
    computed in one step. A zero-width source range gives 0.
    """
    if start1 == end1:
        return 0
    return start2 + (value - start1) / (end1 - start1) * (end2 - start2)
