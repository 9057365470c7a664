from snake_universe.components import Point
from snake_universe.state import State


def portal_system(state: State, pos: Point) -> Point:
    """Resolve a single portal hop.

    Entering either endpoint lands on the other one. There is no chaining: the
    exit cell is returned as-is even if it is itself special.
    """
    exit_pos = state.portal.other(pos)
    return pos if exit_pos is None else exit_pos
