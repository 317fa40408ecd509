# stationflow/traffic/clock.py
from __future__ import annotations

import math

MINUTES_PER_DAY = 1440


def minute_of_day(ts) -> int:
    """
    Minutes since local midnight (0..1439) from the timestamp's own wall clock.

    Works for datetime and pandas.Timestamp. Missing values (None, NaT)
    raise ValueError.
    """
    if ts is None:
        raise ValueError("timestamp is missing")
    try:
        hour = ts.hour
        minute = ts.minute
    except AttributeError:
        raise ValueError(f"not a timestamp: {ts!r}") from None

    # pd.NaT reports nan for every field
    if isinstance(hour, float) and math.isnan(hour):
        raise ValueError("timestamp is NaT")

    m = int(hour) * 60 + int(minute)
    if not (0 <= m < MINUTES_PER_DAY):
        raise ValueError(f"minute of day out of range: {m}")
    return m


def format_time(minutes: int) -> str:
    """Minute of day -> 'h:mm AM/PM' (e.g. 0 -> '12:00 AM', 750 -> '12:30 PM')."""
    h, m = divmod(int(minutes) % MINUTES_PER_DAY, 60)
    suffix = "AM" if h < 12 else "PM"
    h12 = h % 12 or 12
    return f"{h12}:{m:02d} {suffix}"
