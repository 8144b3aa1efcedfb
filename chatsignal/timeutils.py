"""
Time helpers for ChatSignal v1
Epoch-millisecond conversion into the configured analysis timezone
"""

import math
from datetime import datetime

from . import config
from .stats import round_half_up

SECOND_MS = 1000
MINUTE_MS = 60 * SECOND_MS
HOUR_MS = 60 * MINUTE_MS
DAY_MS = 24 * HOUR_MS

# Late night: 22:00 - 04:00
LATE_NIGHT_START_HOUR = 22
LATE_NIGHT_END_HOUR = 4


def to_local(timestamp_ms: int) -> datetime:
    """Convert epoch milliseconds to an aware datetime in the analysis timezone."""
    return datetime.fromtimestamp(timestamp_ms / 1000, tz=config.get_timezone())


def month_key(timestamp_ms: int) -> str:
    """YYYY-MM bucket key."""
    return to_local(timestamp_ms).strftime("%Y-%m")


def day_key(timestamp_ms: int) -> str:
    """YYYY-MM-DD bucket key."""
    return to_local(timestamp_ms).strftime("%Y-%m-%d")


def local_hour(timestamp_ms: int) -> int:
    return to_local(timestamp_ms).hour


def day_of_week(timestamp_ms: int) -> int:
    """Day of week with 0 = Sunday ... 6 = Saturday."""
    return (to_local(timestamp_ms).weekday() + 1) % 7


def is_late_night(timestamp_ms: int) -> bool:
    hour = local_hour(timestamp_ms)
    return hour >= LATE_NIGHT_START_HOUR or hour < LATE_NIGHT_END_HOUR


def is_weekend(timestamp_ms: int) -> bool:
    return day_of_week(timestamp_ms) in (0, 6)


def format_duration(ms: float) -> str:
    """
    Human-readable duration.

    Examples: 45s, 3min 20s, 3min, 2h 5min, 2h
    """
    if ms < MINUTE_MS:
        return f"{round_half_up(ms / SECOND_MS)}s"
    if ms < HOUR_MS:
        minutes = math.floor(ms / MINUTE_MS)
        seconds = round_half_up((ms % MINUTE_MS) / SECOND_MS)
        return f"{minutes}min {seconds}s" if seconds > 0 else f"{minutes}min"
    hours = math.floor(ms / HOUR_MS)
    minutes = round_half_up((ms % HOUR_MS) / MINUTE_MS)
    return f"{hours}h {minutes}min" if minutes > 0 else f"{hours}h"
