"""Tick pacing.

The interval shrinks by a fixed decrement per level and is halved while a
direction key is held down. The result depends only on ``(level, key_held)``
and the config, and is clamped so it never reaches zero.
"""

from snake_universe.config import DEFAULT_CONFIG, GameConfig


def tick_interval(
    level: int, key_held: bool = False, config: GameConfig = DEFAULT_CONFIG
) -> float:
    """Seconds to wait before the next tick."""
    interval = config.base_interval - level * config.interval_decrement
    if key_held and config.boost_on_hold:
        interval /= 2
    return max(interval, config.min_interval)
