from dataclasses import replace

import pytest
from pyrsistent import pvector

from snake_universe.state import State
from snake_universe.step import step
from snake_universe.systems.terminal import game_over_system, turn_system
from snake_universe.types import GameOverReason
from snake_universe.utils.terminal import is_terminal_state, is_valid_state
from tests.test_utils import make_snake_state


@pytest.mark.parametrize("reason", list(GameOverReason))
def test_game_over_records_reason(reason: GameOverReason) -> None:
    state: State = make_snake_state()
    new_state: State = game_over_system(state, reason)
    assert is_terminal_state(new_state)
    assert new_state.message == reason.value
    assert not is_terminal_state(state)


def test_game_over_is_idempotent() -> None:
    state: State = game_over_system(make_snake_state(), GameOverReason.WALL)
    assert game_over_system(state, GameOverReason.QUIT) is state


def test_turn_system_increments() -> None:
    state: State = make_snake_state()
    assert turn_system(turn_system(state)).turn == 2


def test_empty_snake_is_invalid_and_step_is_noop() -> None:
    state: State = replace(make_snake_state(), snake=pvector())
    assert not is_valid_state(state)
    assert step(state) is state


def test_game_over_logged(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level("INFO", logger="snake_universe")
    game_over_system(make_snake_state(score=3), GameOverReason.OBSTACLE)
    assert "hit an obstacle" in caplog.text
