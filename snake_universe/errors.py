"""Exception hierarchy.

Rule violations during play (walls, obstacles, self-collision) are *not*
errors; they end the game through ``State.game_over``. The exceptions here
cover setup problems and exhausted placement.
"""


class SnakeError(Exception):
    """Base class for all snake_universe errors."""


class TerminalInitError(SnakeError):
    """The terminal could not be put into fullscreen game mode."""


class BoardTooSmallError(SnakeError, ValueError):
    """Board dimensions leave no interior room for the initial entities."""


class NoFreeCellError(SnakeError, ValueError):
    """Every interior cell is occupied; nothing more can be placed."""
