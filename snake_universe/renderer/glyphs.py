"""Glyph table.

Every drawable thing maps to a single character plus a foreground colour.
Keeping the table in one place lets the terminal painter and the plain-text
renderer agree exactly on what the board looks like.
"""

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Dict

from snake_universe.types import Color


class AppearanceName(StrEnum):
    """Enumeration of drawable categories."""

    BORDER_HORIZONTAL = auto()
    BORDER_VERTICAL = auto()
    CORNER_TOP_LEFT = auto()
    CORNER_TOP_RIGHT = auto()
    CORNER_BOTTOM_LEFT = auto()
    CORNER_BOTTOM_RIGHT = auto()
    HEAD = auto()
    BODY = auto()
    FOOD = auto()
    OBSTACLE = auto()
    PORTAL = auto()


@dataclass(frozen=True)
class Glyph:
    """Visual rendering metadata.

    Attributes:
        char: Single display character.
        color: Foreground colour.
    """

    char: str
    color: Color = Color.DEFAULT


GLYPHS: Dict[AppearanceName, Glyph] = {
    AppearanceName.BORDER_HORIZONTAL: Glyph("─", Color.WHITE),
    AppearanceName.BORDER_VERTICAL: Glyph("│", Color.WHITE),
    AppearanceName.CORNER_TOP_LEFT: Glyph("┌", Color.WHITE),
    AppearanceName.CORNER_TOP_RIGHT: Glyph("┐", Color.WHITE),
    AppearanceName.CORNER_BOTTOM_LEFT: Glyph("└", Color.WHITE),
    AppearanceName.CORNER_BOTTOM_RIGHT: Glyph("┘", Color.WHITE),
    AppearanceName.HEAD: Glyph("@", Color.GREEN),
    AppearanceName.BODY: Glyph("o", Color.GREEN),
    AppearanceName.FOOD: Glyph("*", Color.RED),
    AppearanceName.OBSTACLE: Glyph("?", Color.MAGENTA),
    AppearanceName.PORTAL: Glyph("O", Color.BLUE),
}

SCORE_COLOR = Color.YELLOW
HIGH_SCORE_COLOR = Color.CYAN
PAUSED_COLOR = Color.YELLOW
GAME_OVER_COLOR = Color.RED

GAME_OVER_TEXT = "GAME OVER"
PAUSED_TEXT = "PAUSED"
