"""High-score persistence.

A single integer stored as text in a well-known file. Reading is forgiving (a
missing or garbled file means "no previous record") and writing is best
effort: a failure is logged and otherwise ignored because it must never stop
the game-over flow.
"""

import logging
from pathlib import Path
from typing import Union

from snake_universe.config import DEFAULT_HIGHSCORE_PATH

logger = logging.getLogger(__name__)


class HighScoreStore:
    """Load and save the best score."""

    def __init__(self, path: Union[str, Path] = DEFAULT_HIGHSCORE_PATH):
        self.path = Path(path)

    def load(self) -> int:
        """Return the stored high score, or 0 if missing or unparsable."""
        try:
            text = self.path.read_text()
        except (OSError, UnicodeDecodeError):
            return 0
        try:
            return int(text.strip())
        except ValueError:
            logger.debug("Ignoring unparsable high score file %s", self.path)
            return 0

    def save(self, value: int) -> None:
        """Overwrite the stored high score with ``value``."""
        try:
            self.path.write_text(str(value))
        except OSError as e:
            logger.warning("Could not save high score to %s: %s", self.path, e)
