from dataclasses import replace
from random import Random

import pytest

from snake_universe.components import Point
from snake_universe.config import GameConfig
from snake_universe.state import State
from snake_universe.systems.level import level_for_score, level_system
from tests.test_utils import make_snake_state


@pytest.mark.parametrize(
    "score, level",
    [(0, 0), (1, 0), (2, 1), (3, 1), (4, 2), (7, 3)],
)
def test_level_for_score(score: int, level: int) -> None:
    assert level_for_score(score, 2) == level


def test_no_level_up_below_threshold() -> None:
    state: State = make_snake_state(score=1)
    assert level_system(state, Random(0)) is state


def test_level_up_appends_batch_of_obstacles() -> None:
    state: State = make_snake_state([(5, 5), (4, 5)], obstacles=[(2, 2)], score=2)
    new_state: State = level_system(state, Random(0))
    assert new_state.level == 1
    assert len(new_state.obstacles) == 1 + 5
    assert Point(2, 2) in new_state.obstacles
    added = new_state.obstacles - state.obstacles
    assert not added & set(state.snake)
    assert state.food not in added
    assert not added & set(state.portal.cells)


def test_batch_size_is_configurable() -> None:
    state: State = make_snake_state(score=2)
    new_state: State = level_system(state, Random(1), GameConfig(obstacle_batch=3))
    assert len(new_state.obstacles) == 3


def test_level_up_on_small_board_places_what_fits() -> None:
    # 4x4 board: 4 interior cells, snake + food + one portal cell leave one free.
    state: State = make_snake_state(
        [(1, 1)], food=(2, 1), portal=((1, 2), (0, 0)), width=4, height=4, score=2
    )
    new_state: State = level_system(state, Random(0))
    assert new_state.level == 1
    assert new_state.obstacles == state.obstacles.add(Point(2, 2))


def test_each_even_score_raises_level_once_and_never_removes_obstacles() -> None:
    state: State = make_snake_state([(5, 5), (4, 5)], width=14, height=14)
    rng = Random(3)
    for score in range(1, 9):
        previous: State = state
        state = level_system(replace(state, score=score), rng)
        assert state.level == score // 2
        assert previous.obstacles <= state.obstacles
        if state.level > previous.level:
            assert len(state.obstacles) == len(previous.obstacles) + 5
        else:
            assert state.obstacles == previous.obstacles
    assert len(state.obstacles) == 20


def test_level_is_a_high_water_mark() -> None:
    state: State = replace(make_snake_state(score=2), level=3)
    assert level_system(state, Random(0)) is state
