# stationflow/traffic/window.py
from __future__ import annotations

from typing import List, Optional, Sequence

from stationflow.traffic.clock import MINUTES_PER_DAY
from stationflow.traffic.types import Trip

WINDOW_RADIUS_MINUTES = 60

# control value the slider sends for "any time"
NO_FILTER = -1


def parse_time_filter(value) -> Optional[int]:
    """
    Slider value -> time filter.

    -1 (or None) means no filter and becomes None, so minute 0 stays a real minute.
    Anything else must be an int in [0, 1439].
    """
    if value is None:
        return None
    t = int(value)
    if t == NO_FILTER:
        return None
    if not (0 <= t < MINUTES_PER_DAY):
        raise ValueError(f"time filter must be -1 or in [0, {MINUTES_PER_DAY - 1}], got {t}")
    return t


def window_bounds(center: int, radius: int = WINDOW_RADIUS_MINUTES) -> tuple[int, int]:
    """(min_minute, max_minute); min is inclusive, max is exclusive."""
    min_minute = (center - radius + MINUTES_PER_DAY) % MINUTES_PER_DAY
    max_minute = (center + radius) % MINUTES_PER_DAY
    return min_minute, max_minute


def window_minutes(center: Optional[int], radius: int = WINDOW_RADIUS_MINUTES) -> List[int]:
    """Bucket indices covered by the window, in the order they are concatenated."""
    if center is None:
        return list(range(MINUTES_PER_DAY))
    if not (0 <= center < MINUTES_PER_DAY):
        raise ValueError(f"window center must be in [0, {MINUTES_PER_DAY - 1}], got {center}")

    min_minute, max_minute = window_bounds(center, radius)
    if min_minute > max_minute:
        # crosses midnight
        return list(range(min_minute, MINUTES_PER_DAY)) + list(range(0, max_minute))
    return list(range(min_minute, max_minute))


def filter_by_minute(
    trips_by_minute: Sequence[Sequence[Trip]],
    center: Optional[int],
    radius: int = WINDOW_RADIUS_MINUTES,
) -> List[Trip]:
    """
    Flatten the buckets inside the circular window around `center`.
    center=None returns every bucket; any other center outside [0, 1439] raises ValueError.
    """
    out: List[Trip] = []
    for i in window_minutes(center, radius):
        out.extend(trips_by_minute[i])
    return out
