"""Control system.

Applies one player :class:`Action` to the state. The game loop feeds every
action the input thread queued since the previous tick through here, in
arrival order, before calling :func:`snake_universe.step.step`.

Rules:

* A direction is accepted unless it is the exact reverse of the heading the
    snake last moved along, so several keys queued in one tick still cannot
    turn it into its neck.
* ``PAUSE`` toggles ``paused``.
* ``QUIT`` ends the game.
* Nothing changes once the game is over.
"""

from dataclasses import replace

from snake_universe.actions import MOVE_ACTIONS, Action
from snake_universe.components import is_reverse
from snake_universe.state import State
from snake_universe.systems.terminal import game_over_system
from snake_universe.types import GameOverReason
from snake_universe.utils.terminal import is_terminal_state


def control_system(state: State, action: Action) -> State:
    """Apply a single player action.

    Raises:
        ValueError: If the action is not recognized.
    """
    if is_terminal_state(state):
        return state

    if action in MOVE_ACTIONS:
        requested = MOVE_ACTIONS[action]
        if is_reverse(state.heading, requested) or requested == state.direction:
            return state
        return replace(state, direction=requested)
    elif action == Action.PAUSE:
        return replace(state, paused=not state.paused)
    elif action == Action.QUIT:
        return game_over_system(state, GameOverReason.QUIT)
    else:
        raise ValueError("Action is not valid")
