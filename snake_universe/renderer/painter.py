"""Board painter.

Turns an immutable :class:`State` into cells on a :class:`Canvas`. Layers are
painted in a fixed order so later layers win where they overlap:

1. Border frame.
2. Snake (head glyph distinct from body glyph).
3. Food.
4. Obstacles.
5. Both portal cells.
6. Score, high score and (when paused) the pause banner.

The painter never mutates the state.
"""

from typing import Iterable

from snake_universe.components import Point
from snake_universe.renderer.canvas import Canvas, TextCanvas
from snake_universe.renderer.glyphs import (
    GAME_OVER_COLOR,
    GAME_OVER_TEXT,
    GLYPHS,
    HIGH_SCORE_COLOR,
    PAUSED_COLOR,
    PAUSED_TEXT,
    SCORE_COLOR,
    AppearanceName,
)
from snake_universe.state import State
from snake_universe.types import Color


def draw_glyph(canvas: Canvas, pos: Point, name: AppearanceName) -> None:
    glyph = GLYPHS[name]
    canvas.set_cell(pos.x, pos.y, glyph.char, glyph.color)


def draw_glyphs(canvas: Canvas, positions: Iterable[Point], name: AppearanceName) -> None:
    for pos in positions:
        draw_glyph(canvas, pos, name)


def draw_text(canvas: Canvas, x: int, y: int, text: str, color: Color) -> None:
    """Write ``text`` left to right starting at ``(x, y)``."""
    for i, char in enumerate(text):
        canvas.set_cell(x + i, y, char, color)


def draw_border(canvas: Canvas, width: int, height: int) -> None:
    """Frame the outermost ring of a ``width`` x ``height`` board."""
    right, bottom = width - 1, height - 1
    for x in range(width):
        draw_glyph(canvas, Point(x, 0), AppearanceName.BORDER_HORIZONTAL)
        draw_glyph(canvas, Point(x, bottom), AppearanceName.BORDER_HORIZONTAL)
    for y in range(height):
        draw_glyph(canvas, Point(0, y), AppearanceName.BORDER_VERTICAL)
        draw_glyph(canvas, Point(right, y), AppearanceName.BORDER_VERTICAL)
    draw_glyph(canvas, Point(0, 0), AppearanceName.CORNER_TOP_LEFT)
    draw_glyph(canvas, Point(right, 0), AppearanceName.CORNER_TOP_RIGHT)
    draw_glyph(canvas, Point(0, bottom), AppearanceName.CORNER_BOTTOM_LEFT)
    draw_glyph(canvas, Point(right, bottom), AppearanceName.CORNER_BOTTOM_RIGHT)


def paint(canvas: Canvas, state: State) -> None:
    """Paint one full frame of ``state`` and flush it.

    Args:
        canvas (Canvas): Target surface; it is cleared first.
        state (State): Snapshot to draw.
    """
    canvas.clear()
    draw_border(canvas, state.width, state.height)

    draw_glyph(canvas, state.head, AppearanceName.HEAD)
    draw_glyphs(canvas, state.snake[1:], AppearanceName.BODY)
    draw_glyph(canvas, state.food, AppearanceName.FOOD)
    draw_glyphs(canvas, state.obstacles, AppearanceName.OBSTACLE)
    draw_glyphs(canvas, state.portal.cells, AppearanceName.PORTAL)

    draw_text(canvas, 1, 1, f"Score: {state.score}", SCORE_COLOR)
    draw_text(canvas, 1, 2, f"High Score: {state.high_score}", HIGH_SCORE_COLOR)
    if state.paused:
        x = state.width // 2 - len(PAUSED_TEXT) // 2
        draw_text(canvas, x, 0, PAUSED_TEXT, PAUSED_COLOR)

    canvas.flush()


def paint_game_over(canvas: Canvas, width: int, height: int) -> None:
    """Clear the screen and centre the game-over message."""
    canvas.clear()
    x = width // 2 - len(GAME_OVER_TEXT) // 2
    draw_text(canvas, x, height // 2, GAME_OVER_TEXT, GAME_OVER_COLOR)
    canvas.flush()


def render_text(state: State) -> str:
    """Render ``state`` as a multi-line string (one character per cell)."""
    canvas = TextCanvas(state.width, state.height)
    paint(canvas, state)
    return canvas.to_text()
