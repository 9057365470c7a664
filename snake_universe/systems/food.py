"""Food system.

Runs after the snake has moved onto the food cell (and grown). Awards the
point, keeps the high score in step and respawns food on a free interior cell
chosen by the placement function. If the board is so full that no cell is
left the game ends with :attr:`GameOverReason.BOARD_FULL`.
"""

import logging
from dataclasses import replace
from random import Random

from snake_universe.errors import NoFreeCellError
from snake_universe.state import State
from snake_universe.systems.terminal import game_over_system
from snake_universe.types import GameOverReason, PlacementFn
from snake_universe.utils.placement import random_interior_point

logger = logging.getLogger(__name__)


def food_system(
    state: State,
    rng: Random,
    placement_fn: PlacementFn = random_interior_point,
) -> State:
    """Score the food under the head and place a new one.

    Arguments:
        state:
            State after the move; the head is expected to be on ``state.food``.
        rng:
            Random source for the respawn.
        placement_fn:
            Picks the new food cell given the occupied cells.

    Returns:
        State
            Updated state with score, high score and food changed, or the
            input state if the head is not on food.
    """
    if state.head != state.food:
        return state

    score = state.score + 1
    high_score = max(state.high_score, score)
    state = replace(state, score=score, high_score=high_score)

    occupied = (
        frozenset(state.snake)
        | frozenset(state.obstacles)
        | frozenset(state.portal.cells)
    )
    try:
        food = placement_fn(state.width, state.height, occupied, rng)
    except NoFreeCellError:
        logger.info("No room left for food at score %d", score)
        return game_over_system(state, GameOverReason.BOARD_FULL)

    return replace(state, food=food)
