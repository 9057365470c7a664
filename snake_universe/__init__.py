"""snake_universe: a terminal Snake game built on an immutable state reducer.

The simulation lives in :func:`snake_universe.step.step` (pure ``State ->
State``); :mod:`snake_universe.loop` drives it against a blessed-backed
terminal, and :mod:`snake_universe.gym_env` exposes the same engine as a
Gymnasium environment.
"""

__version__ = "0.1.0"
