"""Distance calculations for the arena."""

import math


def euclidean_distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Calculate straight-line distance between two points.

    Args:
        x1: X coordinate of first point
        y1: Y coordinate of first point
        x2: X coordinate of second point
        y2: Y coordinate of second point

    Returns:
        Euclidean distance between the two points

    Examples:
        >>> euclidean_distance(0, 0, 3, 4)
        5.0
    """
    return math.hypot(x2 - x1, y2 - y1)


def squared_distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Squared distance, for comparisons that don't need the root."""
    dx = x2 - x1
    dy = y2 - y1
    return dx * dx + dy * dy
