"""Command-line entry point: ``python -m snake_universe`` / ``snake-universe``.

Opens the terminal, sizes the board from it, loads the stored high score and
hands everything to :class:`GameLoop`. Log records go to a file so they never
land on top of the game screen; a terminal that cannot be initialised is
reported on stderr as well and exits with status 1.
"""

import logging
import sys
from typing import Optional

from snake_universe.config import DEFAULT_CONFIG, BoardSize, GameConfig
from snake_universe.errors import BoardTooSmallError, TerminalInitError
from snake_universe.highscore import HighScoreStore
from snake_universe.levels.generator import generate_for_board
from snake_universe.loop import GameLoop
from snake_universe.terminal import open_terminal

logger = logging.getLogger("snake_universe")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(config: GameConfig) -> None:
    """Send log records to ``config.log_path`` (or nowhere if it is ``None``)."""
    handler: logging.Handler
    if config.log_path is None:
        handler = logging.NullHandler()
    else:
        handler = logging.FileHandler(config.log_path)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)


def main(config: Optional[GameConfig] = None) -> int:
    config = config or DEFAULT_CONFIG
    setup_logging(config)
    try:
        with open_terminal() as terminal:
            store = HighScoreStore(config.highscore_path)
            board = BoardSize(terminal.width, terminal.height)
            state = generate_for_board(board, high_score=store.load(), config=config)
            return GameLoop(terminal, state, store, config).run()
    except TerminalInitError as e:
        logger.exception("Terminal initialisation failed")
        print(f"snake-universe: {e}", file=sys.stderr)
        return 1
    except BoardTooSmallError as e:
        logger.error("Terminal too small: %s", e)
        print(f"snake-universe: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
