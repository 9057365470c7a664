"""Collision system.

Checks a destination cell against, in order, the board bounds, the snake's
own body and the obstacles. The first hit ends the game; nothing else about
the state changes that tick.
"""

from typing import Optional

from snake_universe.components import Point
from snake_universe.state import State
from snake_universe.systems.terminal import game_over_system
from snake_universe.types import GameOverReason
from snake_universe.utils.grid import hits_body, hits_obstacle, is_in_bounds


def collision_reason(state: State, pos: Point) -> Optional[GameOverReason]:
    """Return why moving to ``pos`` is fatal, or ``None`` if it is safe."""
    if not is_in_bounds(state, pos):
        return GameOverReason.WALL
    if hits_body(state, pos):
        return GameOverReason.SELF
    if hits_obstacle(state, pos):
        return GameOverReason.OBSTACLE
    return None


def collision_system(state: State, pos: Point) -> State:
    """End the game if ``pos`` collides with anything.

    Args:
        state (State): Current state (snake not yet moved).
        pos (Point): Destination the head is about to enter.

    Returns:
        State: Unchanged if the move is safe, otherwise a terminal state.
    """
    reason = collision_reason(state, pos)
    if reason is None:
        return state
    return game_over_system(state, reason)
