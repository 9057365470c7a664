"""Direction vectors.

Directions are plain :class:`Point` unit vectors so that a candidate head is
simply ``head + direction``.
"""

from .point import Point


UP = Point(0, -1)
DOWN = Point(0, 1)
LEFT = Point(-1, 0)
RIGHT = Point(1, 0)


def opposite(direction: Point) -> Point:
    """Return the exact reverse of ``direction``."""
    return -direction


def is_reverse(current: Point, requested: Point) -> bool:
    """True if ``requested`` would turn the snake back into its own neck."""
    return requested == opposite(current)
