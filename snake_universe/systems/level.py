"""Level system.

The level is ``score // level_step``. Each time it rises, a fresh batch of
obstacles is appended on free interior cells (never on the snake, existing
obstacles, the food or a portal). Obstacles are never removed.
"""

import logging
from dataclasses import replace
from random import Random

from snake_universe.config import DEFAULT_CONFIG, GameConfig
from snake_universe.state import State
from snake_universe.utils.placement import random_interior_points

logger = logging.getLogger(__name__)


def level_for_score(score: int, level_step: int) -> int:
    return score // level_step


def level_system(
    state: State, rng: Random, config: GameConfig = DEFAULT_CONFIG
) -> State:
    """Raise the level and grow the obstacle set when the score allows.

    Args:
        state (State): State after scoring.
        rng (Random): Random source for obstacle placement.
        config (GameConfig): Supplies ``level_step`` and ``obstacle_batch``.

    Returns:
        State: Same state if no level-up is due, otherwise one with the new
            level and the enlarged obstacle set.
    """
    new_level = level_for_score(state.score, config.level_step)
    if new_level <= state.level:
        return state

    new_obstacles = random_interior_points(
        state.width, state.height, state.occupied, rng, config.obstacle_batch
    )
    logger.debug(
        "Level %d -> %d, adding %d obstacles", state.level, new_level, len(new_obstacles)
    )
    return replace(
        state,
        level=new_level,
        obstacles=state.obstacles.update(new_obstacles),
    )
