"""Initial board generation.

Builds the starting :class:`State` for a board of a given size:

* a one-segment snake in the centre, heading right;
* a portal pair on two free interior cells (entry and exit always differ);
* food on a further free cell;
* up to ``obstacle_batch`` obstacles on whatever interior cells remain;
* the high score carried in from persistent storage.

Portals and food are placed before obstacles so a small board that fits them
is always playable; obstacles only take the space that is left.

Every random draw comes from a ``random.Random`` seeded with ``seed`` so the
same seed always yields the same board.
"""

import logging
import random
from typing import Optional

from pyrsistent import pset, pvector

from snake_universe.components import RIGHT, Point, Portal
from snake_universe.config import DEFAULT_CONFIG, BoardSize, GameConfig
from snake_universe.errors import BoardTooSmallError, NoFreeCellError
from snake_universe.state import State
from snake_universe.types import Seed
from snake_universe.utils.placement import random_interior_point, random_interior_points
from snake_universe.utils.rng import resolve_seed

logger = logging.getLogger(__name__)


def generate(
    width: int,
    height: int,
    seed: Optional[Seed] = None,
    high_score: int = 0,
    config: GameConfig = DEFAULT_CONFIG,
) -> State:
    """Create a fresh game on a ``width`` x ``height`` board.

    Args:
        width (int): Board width in cells, border included.
        height (int): Board height in cells, border included.
        seed (int | None): RNG seed; ``None`` draws one from system entropy.
        high_score (int): Previously stored best score.
        config (GameConfig): Supplies the initial obstacle batch size.

    Returns:
        State: The starting state.

    Raises:
        BoardTooSmallError: If the board is under 3x3 or its interior cannot
            hold the snake, a portal pair and food.
    """
    board = BoardSize(width, height)
    seed = resolve_seed(seed)
    rng = random.Random(seed)

    snake = pvector([Point(board.width // 2, board.height // 2)])
    occupied = set(snake)

    try:
        entry = random_interior_point(board.width, board.height, occupied, rng)
        occupied.add(entry)
        exit_ = random_interior_point(board.width, board.height, occupied, rng)
        occupied.add(exit_)
        food = random_interior_point(board.width, board.height, occupied, rng)
        occupied.add(food)
    except NoFreeCellError as e:
        raise BoardTooSmallError(
            f"Board {board.width}x{board.height} has no room for portals and food"
        ) from e

    obstacles = random_interior_points(
        board.width, board.height, occupied, rng, config.obstacle_batch
    )

    logger.info(
        "New %dx%d game (seed %d, %d obstacles)",
        board.width,
        board.height,
        seed,
        len(obstacles),
    )
    return State(
        width=board.width,
        height=board.height,
        snake=snake,
        food=food,
        portal=Portal(entry=entry, exit=exit_),
        direction=RIGHT,
        obstacles=pset(obstacles),
        high_score=high_score,
        seed=seed,
    )


def generate_for_board(
    board: BoardSize,
    high_score: int = 0,
    config: GameConfig = DEFAULT_CONFIG,
) -> State:
    """Create a fresh game from an explicit :class:`BoardSize` and config seed."""
    return generate(
        board.width,
        board.height,
        seed=config.seed,
        high_score=high_score,
        config=config,
    )
