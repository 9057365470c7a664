"""Terminal condition systems.

Sets ``state.game_over`` exactly once, recording the reason in
``state.message``. Other systems short-circuit once the state is terminal.
"""

import logging
from dataclasses import replace

from snake_universe.state import State
from snake_universe.types import GameOverReason
from snake_universe.utils.terminal import is_terminal_state

logger = logging.getLogger(__name__)


def game_over_system(state: State, reason: GameOverReason) -> State:
    """Mark the game as over (idempotent: the first reason wins)."""
    if is_terminal_state(state):
        return state
    logger.info(
        "Game over after %d ticks: %s (score %d, level %d)",
        state.turn,
        reason.value,
        state.score,
        state.level,
    )
    return replace(state, game_over=True, message=reason.value)


def turn_system(state: State) -> State:
    """Advance the tick counter."""
    return replace(state, turn=state.turn + 1)
