"""Point component.

Immutable integer grid coordinates. Used for every cell-sized thing on the
board: snake segments, food, obstacles, portal endpoints, and the four unit
direction vectors.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """Grid coordinate.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at top).
    """

    x: int
    y: int

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)
