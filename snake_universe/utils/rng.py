"""Deterministic random sources.

The engine never touches the global ``random`` module. Each tick gets its own
``random.Random`` derived from ``(state.seed, state.turn)`` so a game started
from a fixed seed and fed the same inputs replays identically.
"""

import random
from typing import Optional

from snake_universe.state import State
from snake_universe.types import Seed


def tick_rng(state: State) -> random.Random:
    """Return the RNG for the tick that ``state`` is about to advance."""
    base_seed = hash((state.seed if state.seed is not None else 0, state.turn))
    return random.Random(base_seed)


def resolve_seed(seed: Optional[Seed]) -> Seed:
    """Return ``seed`` or draw a fresh one from system entropy."""
    if seed is not None:
        return seed
    return random.SystemRandom().randrange(2**31)
