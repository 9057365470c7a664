"""Input handler.

A daemon thread that blocks on the next key event and translates it into an
:class:`Action` posted on a queue. The game loop drains that queue once per
tick and applies the actions in order, so the loop remains the only writer of
the game state.

Key mapping:

* arrows: ``Action.UP`` / ``DOWN`` / ``LEFT`` / ``RIGHT``
* space: ``Action.PAUSE``
* escape: ``Action.QUIT``, after which the thread stops listening
* anything else: ignored
"""

import logging
import queue
import threading
import time
from typing import Callable, Dict, List, Optional, Protocol

from snake_universe.actions import MOVE_ACTIONS, Action
from snake_universe.terminal import EventType, Key, KeyEvent

logger = logging.getLogger(__name__)

KEY_ACTIONS: Dict[Key, Action] = {
    Key.UP: Action.UP,
    Key.DOWN: Action.DOWN,
    Key.LEFT: Action.LEFT,
    Key.RIGHT: Action.RIGHT,
    Key.SPACE: Action.PAUSE,
    Key.ESCAPE: Action.QUIT,
}


class EventSource(Protocol):
    def next_event(self) -> KeyEvent: ...


def action_for_event(event: KeyEvent) -> Optional[Action]:
    """Map a raw event to an action, or ``None`` if it should be ignored."""
    if event.type != EventType.KEY:
        return None
    return KEY_ACTIONS.get(event.key)


def drain_actions(actions: "queue.Queue[Action]") -> List[Action]:
    """Remove and return every queued action without blocking."""
    drained: List[Action] = []
    while True:
        try:
            drained.append(actions.get_nowait())
        except queue.Empty:
            return drained


class InputHandler(threading.Thread):
    """Reads key events until escape is pressed.

    Besides queueing actions it remembers when the last direction key arrived
    and whether it was a repeat of the one before, which is how terminal
    auto-repeat shows up when a key is held down.
    """

    def __init__(
        self,
        source: EventSource,
        actions: "queue.Queue[Action]",
        clock: Callable[[], float] = time.monotonic,
    ):
        super().__init__(name="snake-input", daemon=True)
        self.source = source
        self.actions = actions
        self._clock = clock
        self._lock = threading.Lock()
        self._last_direction: Optional[Action] = None
        self._last_direction_at: Optional[float] = None
        self._previous_direction_at: Optional[float] = None

    def run(self) -> None:
        while True:
            action = action_for_event(self.source.next_event())
            if action is None:
                continue
            if action in MOVE_ACTIONS:
                self._record_direction(action)
            self.actions.put(action)
            if action == Action.QUIT:
                logger.debug("Escape pressed, input handler stopping")
                return

    def key_held(self, now: float, window: float) -> bool:
        """True if the same direction key repeated recently, within ``window``."""
        with self._lock:
            if self._last_direction_at is None or self._previous_direction_at is None:
                return False
            repeating = self._last_direction_at - self._previous_direction_at <= window
            return repeating and now - self._last_direction_at <= window

    def _record_direction(self, action: Action) -> None:
        now = self._clock()
        with self._lock:
            if action == self._last_direction:
                self._previous_direction_at = self._last_direction_at
            else:
                self._previous_direction_at = None
            self._last_direction = action
            self._last_direction_at = now
