"""Random, collision-free placement of board entities.

Food, obstacles and portal endpoints are all dropped on *interior* cells:
the outermost ring of the board is where the border is drawn and is never
used. Every function takes an explicit ``random.Random`` so callers control
determinism (see :func:`snake_universe.utils.rng.tick_rng`).

Sampling is rejection-based and bounded: after ``max_attempts`` misses the
free interior cells are enumerated and one is chosen uniformly, so a crowded
board still terminates. A completely full interior raises
:class:`NoFreeCellError`.
"""

from random import Random
from typing import AbstractSet, List, Set

from snake_universe.components import Point
from snake_universe.errors import NoFreeCellError

DEFAULT_MAX_ATTEMPTS = 1000


def interior_cells(width: int, height: int) -> List[Point]:
    """All cells strictly inside the border ring, row-major."""
    return [Point(x, y) for y in range(1, height - 1) for x in range(1, width - 1)]


def is_interior(width: int, height: int, point: Point) -> bool:
    """Return True if ``point`` lies strictly inside the border ring."""
    return 1 <= point.x <= width - 2 and 1 <= point.y <= height - 2


def random_interior_point(
    width: int,
    height: int,
    occupied: AbstractSet[Point],
    rng: Random,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> Point:
    """Draw a uniformly random free interior cell.

    Args:
        width (int): Board width, border included.
        height (int): Board height, border included.
        occupied (AbstractSet[Point]): Cells the result must avoid.
        rng (Random): Random source owned by the caller.
        max_attempts (int): Rejection samples before falling back to an
            exhaustive scan of free cells.

    Returns:
        Point: A cell inside the border and not in ``occupied``.

    Raises:
        NoFreeCellError: If every interior cell is occupied.
    """
    if width < 3 or height < 3:
        raise NoFreeCellError(f"Board {width}x{height} has no interior")

    for _ in range(max_attempts):
        candidate = Point(rng.randint(1, width - 2), rng.randint(1, height - 2))
        if candidate not in occupied:
            return candidate

    free = [p for p in interior_cells(width, height) if p not in occupied]
    if not free:
        raise NoFreeCellError(f"No free interior cell on {width}x{height} board")
    return rng.choice(free)


def random_interior_points(
    width: int,
    height: int,
    occupied: AbstractSet[Point],
    rng: Random,
    count: int,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> List[Point]:
    """Place up to ``count`` distinct free interior cells.

    Points chosen earlier in the batch are treated as occupied for the later
    ones. Stops early (returning fewer points) once the interior is full.
    """
    taken: Set[Point] = set(occupied)
    points: List[Point] = []
    for _ in range(count):
        try:
            point = random_interior_point(width, height, taken, rng, max_attempts)
        except NoFreeCellError:
            break
        taken.add(point)
        points.append(point)
    return points
