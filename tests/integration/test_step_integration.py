from snake_universe.actions import Action
from snake_universe.components import DOWN, RIGHT, Point
from snake_universe.levels.generator import generate
from snake_universe.state import State
from snake_universe.step import step
from snake_universe.systems.control import control_system
from snake_universe.types import GameOverReason
from tests.test_utils import make_snake_state, scripted_placement


def _play(state: State, actions) -> State:
    for action in actions:
        if action is not None:
            state = control_system(state, action)
        state = step(state)
    return state


def test_step_advances_turn_and_moves_head() -> None:
    state: State = make_snake_state([(5, 5), (4, 5)])
    new_state: State = step(state)
    assert new_state.turn == 1
    assert list(new_state.snake) == [Point(6, 5), Point(5, 5)]
    # input untouched
    assert list(state.snake) == [Point(5, 5), Point(4, 5)]
    assert state.turn == 0


def test_game_over_state_is_frozen() -> None:
    state: State = make_snake_state([(9, 5)], direction=RIGHT)
    over: State = step(state)
    assert over.game_over
    assert step(over) is over
    assert control_system(over, Action.DOWN) is over


def test_same_seed_same_game() -> None:
    moves = [None, Action.DOWN, None, Action.LEFT, None, Action.UP, None, Action.RIGHT]
    first: State = _play(generate(16, 12, seed=42), moves * 3)
    second: State = _play(generate(16, 12, seed=42), moves * 3)
    assert first == second


def test_pause_resume_continues_from_same_position() -> None:
    state: State = make_snake_state([(3, 5)])
    state = control_system(state, Action.PAUSE)
    for _ in range(5):
        state = step(state)
    assert state.head == Point(3, 5)
    assert state.turn == 0
    state = step(control_system(state, Action.PAUSE))
    assert state.head == Point(4, 5)


def test_eat_through_portal_then_level_up() -> None:
    # Entry (3,5) sends the head to (7,2) where the food is waiting.
    state: State = make_snake_state(
        [(2, 5)],
        food=(7, 2),
        portal=((3, 5), (7, 2)),
        score=1,
        width=12,
        height=12,
    )
    new_state: State = step(state, placement_fn=scripted_placement((1, 10)))
    assert new_state.head == Point(7, 2)
    assert new_state.score == 2
    assert new_state.level == 1
    assert len(new_state.obstacles) == 5
    assert new_state.food not in new_state.obstacles
    assert not set(new_state.obstacles) & set(new_state.snake)
    assert not set(new_state.obstacles) & set(new_state.portal.cells)


def test_reverse_input_then_tick_keeps_heading() -> None:
    state: State = make_snake_state([(5, 5), (4, 5)], direction=RIGHT)
    state = _play(state, [Action.LEFT])
    assert not state.game_over
    assert state.direction == RIGHT
    assert state.head == Point(6, 5)


def test_walk_into_wall_after_turn() -> None:
    state: State = make_snake_state([(5, 7)], direction=RIGHT)
    state = _play(state, [Action.DOWN, None, None])
    assert state.direction == DOWN
    assert state.game_over
    assert state.message == GameOverReason.WALL.value
    assert state.head == Point(5, 9)
