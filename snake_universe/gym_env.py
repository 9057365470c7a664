"""Gymnasium environment wrapper for snake_universe.

Exposes the same pure reducer the terminal game uses, one environment step
per tick. The observation pairs an integer grid encoding of the board with a
structured info dictionary. Reward is the delta of ``state.score`` per step;
``terminated`` is ``True`` once the game is over (collision or full board).

Observation schema:

``{"grid": np.ndarray(H, W) of CellCode, "info": {"status": {...}, "config": {...}}}``

Usage:

``env = SnakeEnv(width=12, height=10, seed=7)``

The environment is purposely *not* vectorized; wrap externally if needed.
"""

from enum import IntEnum
from typing import Any, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np

from snake_universe.actions import GYM_ACTIONS, GymAction
from snake_universe.config import DEFAULT_CONFIG, GameConfig
from snake_universe.levels.generator import generate
from snake_universe.renderer import render_text
from snake_universe.state import State
from snake_universe.step import step
from snake_universe.systems.control import control_system

ObsType = Dict[str, Any]


class CellCode(IntEnum):
    """Integer code stored in each cell of the ``grid`` observation."""

    EMPTY = 0
    HEAD = 1
    BODY = 2
    FOOD = 3
    OBSTACLE = 4
    PORTAL = 5


def grid_observation(state: State) -> np.ndarray:
    """Encode the board as an ``(height, width)`` ``int8`` array.

    Layering matches the terminal painter: later layers overwrite earlier
    ones (body, head, food, obstacles, portals).
    """
    grid = np.full((state.height, state.width), CellCode.EMPTY, dtype=np.int8)
    for segment in state.snake[1:]:
        grid[segment.y, segment.x] = CellCode.BODY
    grid[state.head.y, state.head.x] = CellCode.HEAD
    grid[state.food.y, state.food.x] = CellCode.FOOD
    for obstacle in state.obstacles:
        grid[obstacle.y, obstacle.x] = CellCode.OBSTACLE
    for cell in state.portal.cells:
        grid[cell.y, cell.x] = CellCode.PORTAL
    return grid


def env_status_observation_dict(state: State) -> Dict[str, Any]:
    """Status portion of observation (score, level, phase, turn)."""
    return {
        "score": int(state.score),
        "high_score": int(state.high_score),
        "level": int(state.level),
        "length": len(state.snake),
        "phase": "over" if state.game_over else "ongoing",
        "turn": int(state.turn),
    }


def env_config_observation_dict(state: State) -> Dict[str, Any]:
    """Config portion of observation (seed and dimensions)."""
    return {
        "seed": state.seed if state.seed is not None else -1,
        "width": state.width,
        "height": state.height,
    }


class SnakeEnv(gym.Env[ObsType, np.integer]):
    """Gymnasium ``Env`` implementation for the snake game.

    The action space is ``Discrete(4)``; see :class:`GymAction`. Reversing
    into the neck is ignored exactly as it is for a human player.
    """

    metadata = {"render_modes": ["ansi", "human"]}

    def __init__(
        self,
        width: int = 20,
        height: int = 12,
        seed: Optional[int] = None,
        render_mode: str = "ansi",
        config: GameConfig = DEFAULT_CONFIG,
    ):
        """Create a new environment instance.

        Arguments:
            width: Board width in cells, border included.
            height: Board height in cells, border included.
            seed: Seed for the first episode's board; ``None`` for a random one.
            render_mode: "ansi" to return the board as text, "human" to print it.
            config: Level pacing and obstacle batch size.
        """
        from gymnasium import spaces

        self.width = width
        self.height = height
        self.config = config
        self._seed = seed
        self._render_mode = render_mode
        self.state: Optional[State] = None

        def int_box(low: int, high: int) -> spaces.Box:
            return spaces.Box(
                low=np.array(low, dtype=np.int64),
                high=np.array(high, dtype=np.int64),
                shape=(),
                dtype=np.int64,
            )

        self.observation_space = spaces.Dict(
            {
                "grid": spaces.Box(
                    low=0,
                    high=max(CellCode),
                    shape=(height, width),
                    dtype=np.int8,
                ),
                "info": spaces.Dict(
                    {
                        "status": spaces.Dict(
                            {
                                "score": int_box(0, 1_000_000_000),
                                "high_score": int_box(0, 1_000_000_000),
                                "level": int_box(0, 1_000_000_000),
                                "length": int_box(1, 1_000_000_000),
                                "phase": spaces.Text(max_length=32),
                                "turn": int_box(0, 1_000_000_000),
                            }
                        ),
                        "config": spaces.Dict(
                            {
                                "seed": int_box(-1, 2**31),
                                "width": int_box(3, 10_000),
                                "height": int_box(3, 10_000),
                            }
                        ),
                    }
                ),
            }
        )
        self.action_space = spaces.Discrete(len(GymAction))

        self.reset(seed=seed)

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, object]] = None
    ) -> Tuple[ObsType, Dict[str, object]]:
        """Start a new episode.

        Arguments:
            seed: Board seed for this episode. ``None`` reuses the constructor
                seed for the first episode and draws a fresh one afterwards.
            options: Gymnasium options (unused).

        Returns:
            Observation dict and empty info dict per Gymnasium API.
        """
        super().reset(seed=seed)
        if seed is None:
            seed = self._seed
            self._seed = None
        high_score = self.state.high_score if self.state is not None else 0
        self.state = generate(
            self.width, self.height, seed=seed, high_score=high_score, config=self.config
        )
        return self._get_obs(), self._get_info()

    def step(
        self, action: np.integer
    ) -> Tuple[ObsType, float, bool, bool, Dict[str, object]]:
        """Apply one environment step.

        Arguments:
            action: Integer index into the ``GymAction`` enum.

        Returns:
            (observation, reward, terminated, truncated, info)
        """
        assert self.state is not None

        if not 0 <= int(action) < len(GymAction):
            raise ValueError(f"Invalid action: {action}")
        step_action = GYM_ACTIONS[GymAction(int(action))]

        prev_score = self.state.score
        self.state = control_system(self.state, step_action)
        self.state = step(self.state, self.config)
        reward = float(self.state.score - prev_score)
        return self._get_obs(), reward, self.state.game_over, False, self._get_info()

    def render(self, mode: Optional[str] = None) -> Optional[str]:  # type: ignore
        """Render the current state.

        Args:
            mode: "human" to print, "ansi" to return the text. Defaults to the
                instance's configured render mode.
        """
        render_mode = mode or self._render_mode
        assert self.state is not None
        text = render_text(self.state)
        if render_mode == "human":
            print(text)
            return None
        elif render_mode == "ansi":
            return text
        else:
            raise NotImplementedError(f"Render mode '{render_mode}' not supported.")

    def state_info(self) -> Dict[str, Dict[str, Any]]:
        """Return structured ``info`` sub-dict used in observations."""
        assert self.state is not None
        return {
            "status": env_status_observation_dict(self.state),
            "config": env_config_observation_dict(self.state),
        }

    def _get_obs(self) -> ObsType:
        assert self.state is not None
        return {"grid": grid_observation(self.state), "info": self.state_info()}

    def _get_info(self) -> Dict[str, object]:
        """Return the step info (message explains why an episode ended)."""
        assert self.state is not None
        return {"message": self.state.message} if self.state.message else {}
