"""State reducer and tick orchestration.

This module wires together all systems in the correct order to implement a
single *tick* transition. The exported :func:`step` is the only public entry
point for simulation progress and is intentionally pure: it returns a *new*
:class:`snake_universe.state.State`. Player input is applied separately by
:func:`snake_universe.systems.control.control_system` before each tick.

Ordering (per tick):

1. Terminal, invalid or paused states are returned unchanged.
2. ``candidate_head`` computes head + direction.
3. ``collision_system`` checks bounds, body, then obstacles; a hit ends the
    game with no further change.
4. ``portal_system`` performs a single hop if the candidate is a portal cell.
    The destination is checked against the body again so the snake can never
    overlap itself.
5. ``movement_system`` prepends the head, keeping the tail only when the head
    lands on food.
6. ``food_system`` scores and respawns food; ``level_system`` may add
    obstacles.
7. ``turn_system`` bumps the tick counter.
"""

from random import Random
from typing import Optional

from snake_universe.components import Point
from snake_universe.config import DEFAULT_CONFIG, GameConfig
from snake_universe.state import State
from snake_universe.systems.collision import collision_system
from snake_universe.systems.food import food_system
from snake_universe.systems.level import level_system
from snake_universe.systems.movement import candidate_head, movement_system
from snake_universe.systems.portal import portal_system
from snake_universe.systems.terminal import game_over_system, turn_system
from snake_universe.types import GameOverReason, PlacementFn
from snake_universe.utils.grid import hits_body
from snake_universe.utils.placement import random_interior_point
from snake_universe.utils.rng import tick_rng
from snake_universe.utils.terminal import is_terminal_state, is_valid_state


def step(
    state: State,
    config: GameConfig = DEFAULT_CONFIG,
    placement_fn: PlacementFn = random_interior_point,
    rng: Optional[Random] = None,
) -> State:
    """Advance the simulation by one tick.

    Args:
        state (State): Previous immutable game state.
        config (GameConfig): Level pacing and obstacle batch size.
        placement_fn (PlacementFn): Chooses the respawned food cell.
        rng (Random | None): Random source for this tick. Defaults to one
            derived from ``state.seed`` and ``state.turn``.

    Returns:
        State: Next state snapshot. If the input state is terminal, invalid or
            paused the same object is returned unchanged.
    """
    if not is_valid_state(state) or is_terminal_state(state) or state.paused:
        return state

    if rng is None:
        rng = tick_rng(state)

    target = candidate_head(state)
    state = collision_system(state, target)
    if is_terminal_state(state):
        return state

    new_head = portal_system(state, target)
    if new_head != target and hits_body(state, new_head):
        return game_over_system(state, GameOverReason.SELF)

    return _after_move(state, new_head, rng, config, placement_fn)


def _after_move(
    state: State,
    new_head: Point,
    rng: Random,
    config: GameConfig,
    placement_fn: PlacementFn,
) -> State:
    """Commit the move and run scoring systems.

    Growth is decided before moving: the tail stays only when the resolved
    head is the food cell.
    """
    ate = new_head == state.food
    state = movement_system(state, new_head, grow=ate)
    if ate:
        state = food_system(state, rng, placement_fn)
        if is_terminal_state(state):
            return state
        state = level_system(state, rng, config)
    return turn_system(state)
