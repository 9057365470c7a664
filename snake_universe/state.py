"""Core immutable game `State` dataclass.

This module defines the frozen :class:`State` object that represents the
whole board at a single tick. All systems are pure functions that take a
previous ``State`` (plus, for input, an ``Action``) and return a *new*
``State``; no mutation happens in-place. The game loop simply rebinds its
reference each tick, so the input thread and renderer can never observe a
half-updated board.

Design notes:

* The snake body is a **persistent vector** (``pyrsistent.PVector``) ordered
    head first. Prepending a head and dropping the tail both produce a new
    vector sharing structure with the old one.
* Obstacles are a **persistent set** (``pyrsistent.PSet``); they only ever
    grow (on level-up).
* ``game_over`` is the single terminal marker. The reducer short-circuits on
    terminal states, and ``message`` records why the game ended.

See :mod:`snake_universe.step` for how the reducer orchestrates systems.
"""

from dataclasses import dataclass
from typing import FrozenSet, Optional

from pyrsistent import PSet, PVector, pset

from snake_universe.components import RIGHT, Point, Portal
from snake_universe.types import Seed


@dataclass(frozen=True)
class State:
    """Immutable game state.

    Instances are *value objects*; every transition creates a new ``State``.
    Only include serializable data here (no open handles, threads or
    terminals).

    Attributes:
        width (int): Board width in cells, border included.
        height (int): Board height in cells, border included.
        snake (PVector[Point]): Body segments, head first.
        food (Point): Current food cell.
        portal (Portal): The teleport pair.
        direction (Point): Unit vector the head moves along each tick.
        heading (Point): Direction the head actually moved on the last tick.
        obstacles (PSet[Point]): Static blocking cells (append-only).
        score (int): Food eaten this game.
        high_score (int): Best score seen, including this game.
        level (int): ``score // level_step`` high-water mark.
        paused (bool): True while the player has paused the game.
        game_over (bool): True once any collision or quit happened.
        turn (int): Count of ticks that advanced the simulation.
        message (str | None): Reason the game ended, if it has.
        seed (int | None): Base RNG seed for placement.
    """

    # Board
    width: int
    height: int

    # Entities
    snake: PVector[Point]
    food: Point
    portal: Portal
    direction: Point = RIGHT
    heading: Point = RIGHT
    obstacles: PSet[Point] = pset()

    # Status
    score: int = 0
    high_score: int = 0
    level: int = 0
    paused: bool = False
    game_over: bool = False
    turn: int = 0
    message: Optional[str] = None

    # RNG
    seed: Optional[Seed] = None

    @property
    def head(self) -> Point:
        """The first snake segment."""
        return self.snake[0]

    @property
    def occupied(self) -> FrozenSet[Point]:
        """Cells a newly placed entity must avoid."""
        return (
            frozenset(self.snake)
            | frozenset(self.obstacles)
            | frozenset(self.portal.cells)
            | {self.food}
        )
