"""Game configuration.

``GameConfig`` gathers the tunables of a session (timing, level pacing,
obstacle batches and file locations). ``BoardSize`` is produced once at
startup from the terminal size and passed explicitly to everything that needs
the dimensions.
"""

from dataclasses import dataclass
from typing import Optional

from snake_universe.errors import BoardTooSmallError
from snake_universe.types import Seed


MIN_BOARD_SIZE = 3

DEFAULT_OBSTACLE_BATCH = 5
DEFAULT_LEVEL_STEP = 2
DEFAULT_HIGHSCORE_PATH = "highscore.txt"
DEFAULT_LOG_PATH = "snake_universe.log"


@dataclass(frozen=True)
class BoardSize:
    """Immutable board dimensions (border included)."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < MIN_BOARD_SIZE or self.height < MIN_BOARD_SIZE:
            raise BoardTooSmallError(
                f"Board must be at least {MIN_BOARD_SIZE}x{MIN_BOARD_SIZE}, "
                f"got {self.width}x{self.height}"
            )

    @property
    def interior_area(self) -> int:
        return (self.width - 2) * (self.height - 2)


@dataclass(frozen=True)
class GameConfig:
    """Session tunables.

    Attributes:
        obstacle_batch: Obstacles placed at start and on every level-up.
        level_step: Points needed per level.
        base_interval: Tick interval at level 0, in seconds.
        interval_decrement: Seconds removed from the interval per level.
        min_interval: Lower clamp for the tick interval.
        boost_on_hold: Halve the interval while a direction key is held.
        hold_window: A direction key repeating within this many seconds counts
            as held.
        game_over_hold: Seconds the game-over screen stays up.
        highscore_path: File holding the persisted high score.
        log_path: File receiving log records while the game owns the screen.
        seed: Base RNG seed; ``None`` draws one from the OS.
    """

    obstacle_batch: int = DEFAULT_OBSTACLE_BATCH
    level_step: int = DEFAULT_LEVEL_STEP
    base_interval: float = 0.120
    interval_decrement: float = 0.010
    min_interval: float = 0.020
    boost_on_hold: bool = True
    hold_window: float = 0.15
    game_over_hold: float = 2.0
    highscore_path: str = DEFAULT_HIGHSCORE_PATH
    log_path: Optional[str] = DEFAULT_LOG_PATH
    seed: Optional[Seed] = None


DEFAULT_CONFIG = GameConfig()
