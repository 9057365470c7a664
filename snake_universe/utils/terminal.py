"""Terminal condition helper predicates."""

from snake_universe.state import State


def is_valid_state(state: State) -> bool:
    """Return True if the snake has a head to move."""
    return len(state.snake) > 0


def is_terminal_state(state: State) -> bool:
    """Return True if the game has already ended."""
    return state.game_over
