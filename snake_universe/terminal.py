"""Terminal capability adapter.

Wraps ``blessed.Terminal`` behind the handful of operations the game needs:

* size query (``width`` / ``height``),
* double-buffered cell painting (``set_cell``, ``clear``, ``flush``),
* blocking delivery of the next key event (``next_event``).

Painting is buffered: ``set_cell`` only records the cell, and ``flush`` writes
the cells that differ from the previously flushed frame, which keeps redraws
flicker free. Reading keys and writing frames use different file descriptors,
so the input thread may block in :meth:`Terminal.next_event` while the game
loop flushes.
"""

import logging
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Dict, Iterator, List, Optional, TextIO, Tuple

import blessed

from snake_universe.errors import TerminalInitError
from snake_universe.types import Color

logger = logging.getLogger(__name__)

Cell = Tuple[str, Color]


class EventType(StrEnum):
    KEY = auto()
    NONE = auto()


class Key(StrEnum):
    """Key identities the game distinguishes."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    ESCAPE = auto()
    SPACE = auto()
    OTHER = auto()


@dataclass(frozen=True)
class KeyEvent:
    """One raw input event.

    Attributes:
        type: ``KEY`` for a keystroke, ``NONE`` when the read timed out.
        key: Which key was pressed (``OTHER`` for anything unmapped).
    """

    type: EventType
    key: Key = Key.OTHER


NO_EVENT = KeyEvent(EventType.NONE)

_KEY_CODES: Dict[str, Key] = {
    "KEY_UP": Key.UP,
    "KEY_DOWN": Key.DOWN,
    "KEY_LEFT": Key.LEFT,
    "KEY_RIGHT": Key.RIGHT,
    "KEY_ESCAPE": Key.ESCAPE,
}


def key_for_keystroke(keystroke: "blessed.keyboard.Keystroke") -> KeyEvent:
    """Translate a blessed ``Keystroke`` into a :class:`KeyEvent`."""
    if not keystroke:
        return NO_EVENT
    if keystroke.is_sequence:
        return KeyEvent(EventType.KEY, _KEY_CODES.get(keystroke.name or "", Key.OTHER))
    if str(keystroke) == " ":
        return KeyEvent(EventType.KEY, Key.SPACE)
    if str(keystroke) == "\x1b":
        return KeyEvent(EventType.KEY, Key.ESCAPE)
    return KeyEvent(EventType.KEY, Key.OTHER)


class Terminal:
    """Character-cell display plus keyboard, backed by blessed."""

    def __init__(self, term: blessed.Terminal, stream: Optional[TextIO] = None):
        self._term = term
        self._stream = stream if stream is not None else sys.stdout
        self.width: int = term.width
        self.height: int = term.height
        self._frame: Dict[Tuple[int, int], Cell] = {}
        self._shown: Dict[Tuple[int, int], Cell] = {}

    def set_cell(self, x: int, y: int, char: str, color: Color = Color.DEFAULT) -> None:
        if 0 <= x < self.width and 0 <= y < self.height:
            self._frame[(x, y)] = (char, color)

    def clear(self) -> None:
        self._frame = {}

    def flush(self) -> None:
        """Write every cell that changed since the last flush."""
        out: List[str] = []
        for (x, y), cell in self._frame.items():
            if self._shown.get((x, y)) != cell:
                out.append(self._term.move_xy(x, y) + self._styled(*cell))
        for x, y in self._shown.keys() - self._frame.keys():
            out.append(self._term.move_xy(x, y) + " ")
        self._shown = dict(self._frame)
        if out:
            self._stream.write("".join(out))
        self._stream.flush()

    def next_event(self, timeout: Optional[float] = None) -> KeyEvent:
        """Block until the next keystroke (or ``timeout`` seconds elapse)."""
        return key_for_keystroke(self._term.inkey(timeout=timeout))

    def _styled(self, char: str, color: Color) -> str:
        if color == Color.DEFAULT:
            return char
        return getattr(self._term, color.value)(char)


@contextmanager
def open_terminal(stream: Optional[TextIO] = None) -> Iterator[Terminal]:
    """Enter fullscreen, cbreak, hidden-cursor mode for the game's lifetime.

    Raises:
        TerminalInitError: If blessed cannot drive the terminal or output is
            not attached to a TTY.
    """
    try:
        term = blessed.Terminal(stream=stream)
    except Exception as e:
        raise TerminalInitError(f"Could not initialise terminal: {e}") from e
    if not term.is_a_tty:
        raise TerminalInitError("Output is not a terminal")

    with term.fullscreen(), term.cbreak(), term.hidden_cursor():
        logger.debug("Terminal opened at %dx%d", term.width, term.height)
        yield Terminal(term, stream)
