from dataclasses import dataclass
from typing import Optional

from .point import Point


@dataclass(frozen=True)
class Portal:
    """Teleportation link between two cells.

    Attributes:
        entry:
            One endpoint of the pair.
        exit:
            The other endpoint. The link is symmetric: moving onto either cell
            relocates the mover to the opposite one.
    """

    entry: Point
    exit: Point

    def other(self, point: Point) -> Optional[Point]:
        """Return the paired cell for ``point`` or ``None`` if not an endpoint."""
        if point == self.entry:
            return self.exit
        if point == self.exit:
            return self.entry
        return None

    @property
    def cells(self) -> tuple[Point, Point]:
        return (self.entry, self.exit)
