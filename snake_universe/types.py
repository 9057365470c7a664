"""Common type aliases and enumerations.

``PlacementFn`` is the extension point used by the step reducer to pick fresh
cells for food; tests swap it for a scripted placer to make respawns
predictable.
"""

from enum import StrEnum, auto
from random import Random
from typing import AbstractSet, Callable, TYPE_CHECKING


# Forward declaration to avoid circular imports:
if TYPE_CHECKING:
    from snake_universe.components import Point

Seed = int

PlacementFn = Callable[[int, int, AbstractSet["Point"], Random], "Point"]


class GameOverReason(StrEnum):
    """Why a game ended (stored as ``State.message``)."""

    WALL = "hit a wall"
    SELF = "ran into itself"
    OBSTACLE = "hit an obstacle"
    BOARD_FULL = "board full"
    QUIT = "quit"


class Color(StrEnum):
    """Foreground colours understood by the terminal adapter."""

    DEFAULT = auto()
    WHITE = auto()
    GREEN = auto()
    RED = auto()
    MAGENTA = auto()
    BLUE = auto()
    YELLOW = auto()
    CYAN = auto()
