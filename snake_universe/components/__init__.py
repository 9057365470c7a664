"""snake_universe.components
=================================

Aggregate import surface for the value types used by the engine.

All components are frozen ``@dataclass`` value objects compared by equality;
they carry no behavior beyond tiny helpers and are combined into the
immutable :class:`snake_universe.state.State` snapshot. See the ``systems``
package for transformation logic::

    from snake_universe.components import Point, Portal, RIGHT
"""

from .direction import DOWN, LEFT, RIGHT, UP
from .direction import is_reverse, opposite
from .point import Point
from .portal import Portal

__all__ = [
    # Values
    "Point",
    "Portal",
    # Directions
    "DOWN",
    "LEFT",
    "RIGHT",
    "UP",
    "is_reverse",
    "opposite",
]
