"""Snake movement system.

Movement is split in two so collision and portal systems can run between
computing where the head *wants* to go and actually committing the move:

1. :func:`candidate_head` adds the current direction to the head.
2. :func:`movement_system` prepends the resolved head and drops the tail
    unless the snake is growing this tick.
"""

from dataclasses import replace

from pyrsistent import pvector

from snake_universe.components import Point
from snake_universe.state import State


def candidate_head(state: State) -> Point:
    """Cell the head would enter this tick, before any portal hop."""
    return state.head + state.direction


def movement_system(state: State, new_head: Point, grow: bool = False) -> State:
    """Commit a move.

    Args:
        state (State): Current state.
        new_head (Point): Resolved destination (after portal substitution).
        grow (bool): Keep the tail, lengthening the snake by one.

    Returns:
        State: State with the snake advanced.
    """
    snake = pvector([new_head]).extend(state.snake)
    if not grow:
        snake = snake[:-1]
    return replace(state, snake=snake, heading=state.direction)
