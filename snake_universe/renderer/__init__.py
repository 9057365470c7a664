"""Rendering subpackage.

Turns immutable ``State`` snapshots into fixed-width character cells. The
renderer focuses on:

* A single glyph table shared by every output (see :mod:`.glyphs`).
* Deterministic layering (border, snake, food, obstacles, portals, text).
* Surface independence: anything implementing :class:`.canvas.Canvas` can be
  painted, from the live terminal to an in-memory text grid.
"""

from .canvas import Canvas, TextCanvas
from .painter import paint, paint_game_over, render_text

__all__ = [
    "Canvas",
    "TextCanvas",
    "paint",
    "paint_game_over",
    "render_text",
]
