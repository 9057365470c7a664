"""Action enumerations.

Defines the human readable :class:`Action` (string enum) carried from the
input thread to the game loop, and a stable integer :class:`GymAction`
mapping for Gymnasium compatibility.

``MOVE_ACTIONS`` maps each directional action to its unit vector; checks like
``if action in MOVE_ACTIONS`` are preferred over enum name comparisons.
"""

from enum import IntEnum, StrEnum, auto
from typing import Dict

from snake_universe.components import DOWN, LEFT, RIGHT, UP, Point


class Action(StrEnum):
    """String enum of player actions.

    Members:
        UP, DOWN, LEFT, RIGHT: Steer the head.
        PAUSE: Toggle the paused flag.
        QUIT: End the game immediately.
    """

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    PAUSE = auto()
    QUIT = auto()


MOVE_ACTIONS: Dict[Action, Point] = {
    Action.UP: UP,
    Action.DOWN: DOWN,
    Action.LEFT: LEFT,
    Action.RIGHT: RIGHT,
}


class GymAction(IntEnum):
    """Stable integer mapping for integration with Gymnasium ``Discrete`` spaces."""

    UP = 0  # start at 0 for explicitness
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


GYM_ACTIONS: Dict[GymAction, Action] = {
    GymAction.UP: Action.UP,
    GymAction.DOWN: Action.DOWN,
    GymAction.LEFT: Action.LEFT,
    GymAction.RIGHT: Action.RIGHT,
}
