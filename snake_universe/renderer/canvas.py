"""Drawing surfaces.

:class:`Canvas` is the small slice of a character terminal the painter needs:
set one cell, clear, flush. :class:`TextCanvas` is an in-memory implementation
that turns a painted frame into a string; the live terminal adapter in
:mod:`snake_universe.terminal` is the other one.
"""

from typing import List, Protocol

from snake_universe.types import Color


class Canvas(Protocol):
    width: int
    height: int

    def set_cell(self, x: int, y: int, char: str, color: Color = Color.DEFAULT) -> None: ...

    def clear(self) -> None: ...

    def flush(self) -> None: ...


class TextCanvas:
    """Character grid that records painted cells (colour is discarded)."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.rows: List[List[str]] = []
        self.clear()

    def set_cell(self, x: int, y: int, char: str, color: Color = Color.DEFAULT) -> None:
        if 0 <= x < self.width and 0 <= y < self.height:
            self.rows[y][x] = char

    def clear(self) -> None:
        self.rows = [[" "] * self.width for _ in range(self.height)]

    def flush(self) -> None:
        pass

    def cell(self, x: int, y: int) -> str:
        return self.rows[y][x]

    def to_text(self) -> str:
        return "\n".join("".join(row) for row in self.rows)
