"""Grid math / collision helpers.

Utility predicates used by the movement and collision systems. Functions here
are pure and intentionally lightweight to keep the tick fast.
"""

from snake_universe.components import Point
from snake_universe.state import State


def is_in_bounds(state: State, pos: Point) -> bool:
    """Return True if ``pos`` lies within the board rectangle.

    The border ring is inside the rectangle: only coordinates past it are out
    of bounds.
    """
    return 0 <= pos.x < state.width and 0 <= pos.y < state.height


def hits_body(state: State, pos: Point) -> bool:
    """Return True if ``pos`` is any current snake segment (tail included)."""
    return pos in state.snake


def hits_obstacle(state: State, pos: Point) -> bool:
    return pos in state.obstacles
