"""Game loop.

Drives the ``Running -> GameOver`` state machine:

1. Start the :class:`InputHandler` thread and paint the first frame.
2. While the game is running: wait one tick interval (level scaled, halved
    while a direction key is held), apply queued actions through the control
    system, advance the simulation with :func:`step`, paint.
3. On game over: persist the high score, paint the game-over screen, hold it
    briefly and return exit status 0.
"""

import logging
import queue
import time
from typing import Callable, Optional, Protocol

from snake_universe.actions import Action
from snake_universe.config import DEFAULT_CONFIG, GameConfig
from snake_universe.highscore import HighScoreStore
from snake_universe.input_handler import EventSource, InputHandler, drain_actions
from snake_universe.renderer import Canvas, paint, paint_game_over
from snake_universe.state import State
from snake_universe.step import step
from snake_universe.systems.control import control_system
from snake_universe.utils.timing import tick_interval

logger = logging.getLogger(__name__)


class TerminalLike(Canvas, EventSource, Protocol):
    """Anything that can both be painted and deliver key events."""


class GameLoop:
    """Owns the current :class:`State` and advances it tick by tick.

    Arguments:
        terminal: Surface to paint and source of key events.
        state: Initial game state.
        store: Where the high score is persisted at the end.
        config: Timing and level pacing.
        sleep / clock: Injected for tests.
    """

    def __init__(
        self,
        terminal: TerminalLike,
        state: State,
        store: HighScoreStore,
        config: GameConfig = DEFAULT_CONFIG,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.terminal = terminal
        self.state = state
        self.store = store
        self.config = config
        self.actions: "queue.Queue[Action]" = queue.Queue()
        self._sleep = sleep
        self._clock = clock
        self.input_handler: Optional[InputHandler] = None

    def run(self) -> int:
        """Play until game over and return the process exit status."""
        self.input_handler = InputHandler(self.terminal, self.actions, self._clock)
        self.input_handler.start()

        paint(self.terminal, self.state)
        while not self.state.game_over:
            self._sleep(self.interval())
            self.tick()

        self.finish()
        return 0

    def interval(self) -> float:
        held = self.input_handler is not None and self.input_handler.key_held(
            self._clock(), self.config.hold_window
        )
        return tick_interval(self.state.level, held, self.config)

    def tick(self) -> State:
        """Apply queued input, advance one step and paint."""
        for action in drain_actions(self.actions):
            self.state = control_system(self.state, action)
        self.state = step(self.state, self.config)
        paint(self.terminal, self.state)
        return self.state

    def finish(self) -> None:
        """Persist the high score and show the game-over screen."""
        best = max(self.state.high_score, self.state.score)
        logger.info(
            "Final score %d (%s), high score %d",
            self.state.score,
            self.state.message,
            best,
        )
        self.store.save(best)
        paint_game_over(self.terminal, self.state.width, self.state.height)
        self._sleep(self.config.game_over_hold)
