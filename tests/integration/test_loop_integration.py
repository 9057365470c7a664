from pathlib import Path
from typing import List, Optional

from snake_universe.actions import Action
from snake_universe.components import DOWN, Point
from snake_universe.config import GameConfig
from snake_universe.highscore import HighScoreStore
from snake_universe.levels.generator import generate
from snake_universe.loop import GameLoop
from snake_universe.state import State
from snake_universe.terminal import Key
from snake_universe.types import GameOverReason
from tests.test_utils import FakeTerminal, key, make_snake_state

CONFIG = GameConfig(log_path=None, game_over_hold=0.0)


def make_loop(
    state: State, tmp_path: Path, events=(), sleeps: Optional[List[float]] = None
) -> GameLoop:
    terminal = FakeTerminal(state.width, state.height, events)
    store = HighScoreStore(tmp_path / "highscore.txt")
    loop: GameLoop

    def sleep(seconds: float) -> None:
        # Let the input thread deliver every scripted event before ticking.
        if sleeps is not None:
            sleeps.append(seconds)
        if loop.input_handler is not None:
            loop.input_handler.join(timeout=1.0)

    loop = GameLoop(terminal, state, store, CONFIG, sleep=sleep)
    return loop


def test_tick_applies_queued_actions_in_order(tmp_path: Path) -> None:
    loop = make_loop(make_snake_state([(5, 5), (4, 5)]), tmp_path)
    loop.actions.put(Action.LEFT)
    loop.actions.put(Action.DOWN)
    state: State = loop.tick()
    assert state.direction == DOWN
    assert state.head == Point(5, 6)
    assert loop.actions.empty()


def test_tick_paints_a_frame(tmp_path: Path) -> None:
    loop = make_loop(make_snake_state([(5, 5)], score=3), tmp_path)
    loop.tick()
    terminal = loop.terminal
    assert terminal.frames
    assert terminal.cells[(6, 5)][0] == "@"
    assert terminal.text_at(1, 1, 8) == "Score: 3"


def test_pause_then_tick_keeps_snake_still(tmp_path: Path) -> None:
    loop = make_loop(make_snake_state([(5, 5)]), tmp_path)
    loop.actions.put(Action.PAUSE)
    state: State = loop.tick()
    assert state.paused
    assert state.head == Point(5, 5)
    assert loop.terminal.text_at(2, 0, 6) == "PAUSED"


def test_escape_quits_and_shows_game_over(tmp_path: Path) -> None:
    state: State = make_snake_state([(5, 5)])
    loop = make_loop(state, tmp_path, events=[key(Key.OTHER), key(Key.ESCAPE)])
    assert loop.run() == 0
    assert loop.state.game_over
    assert loop.state.message == GameOverReason.QUIT.value
    assert loop.terminal.text_at(1, 5, 9) == "GAME OVER"


def test_run_steers_from_scripted_keys(tmp_path: Path) -> None:
    state: State = make_snake_state([(5, 5)])
    events = [key(Key.DOWN), key(Key.ESCAPE)]
    loop = make_loop(state, tmp_path, events=events)
    loop.run()
    # Both actions are queued before the first tick: turn down, then quit.
    assert loop.state.direction == DOWN
    assert loop.state.head == Point(5, 5)


def test_high_score_saved_when_beaten(tmp_path: Path) -> None:
    state: State = make_snake_state(score=7, high_score=7, game_over=True)
    loop = make_loop(state, tmp_path)
    loop.finish()
    assert (tmp_path / "highscore.txt").read_text() == "7"
    assert HighScoreStore(tmp_path / "highscore.txt").load() == 7


def test_high_score_unchanged_when_not_beaten(tmp_path: Path) -> None:
    state: State = make_snake_state(score=2, high_score=9, game_over=True)
    loop = make_loop(state, tmp_path)
    loop.finish()
    assert HighScoreStore(tmp_path / "highscore.txt").load() == 9


def test_interval_follows_level(tmp_path: Path) -> None:
    sleeps: List[float] = []
    state: State = generate(20, 12, seed=1)
    loop = make_loop(state, tmp_path, events=[key(Key.ESCAPE)], sleeps=sleeps)
    loop.run()
    assert sleeps[0] == CONFIG.base_interval
    assert sleeps[-1] == CONFIG.game_over_hold


def test_tick_rejects_reversal_spread_over_queued_keys(tmp_path: Path) -> None:
    loop = make_loop(make_snake_state([(5, 5), (4, 5)]), tmp_path)
    loop.actions.put(Action.DOWN)
    loop.actions.put(Action.LEFT)
    state: State = loop.tick()
    assert not state.game_over
    assert state.head == Point(5, 6)
