# stationflow/traffic/bucketer.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List

from stationflow.traffic.clock import MINUTES_PER_DAY, minute_of_day
from stationflow.traffic.types import Trip


def _empty_table() -> List[List[Trip]]:
    return [[] for _ in range(MINUTES_PER_DAY)]


@dataclass
class MinuteBuckets:
    """
    departures[i]: trips whose start minute == i
    arrivals[i]:   trips whose end minute == i

    n_trips counts trips that made it into both tables,
    n_skipped counts trips rejected for unusable timestamps.
    """
    departures: List[List[Trip]] = field(default_factory=_empty_table)
    arrivals: List[List[Trip]] = field(default_factory=_empty_table)
    n_trips: int = 0
    n_skipped: int = 0

    def departures_per_bin(self, bin_minutes: int = 60) -> List[int]:
        """Departure counts per bin of `bin_minutes` (bin_minutes must divide 1440)."""
        bin_minutes = int(bin_minutes)
        if bin_minutes <= 0 or MINUTES_PER_DAY % bin_minutes != 0:
            raise ValueError("bin_minutes must divide 1440 (e.g., 60, 30, 15, 10, 5, 1)")

        counts = [0] * (MINUTES_PER_DAY // bin_minutes)
        for minute, slot in enumerate(self.departures):
            counts[minute // bin_minutes] += len(slot)
        return counts


def bucket_trips(trips: Iterable[Trip]) -> MinuteBuckets:
    buckets = MinuteBuckets()

    for trip in trips:
        # both minutes are checked before either append: a trip lands in both tables or neither
        try:
            start_m = minute_of_day(trip.started_at)
            end_m = minute_of_day(trip.ended_at)
        except ValueError:
            buckets.n_skipped += 1
            continue

        buckets.departures[start_m].append(trip)
        buckets.arrivals[end_m].append(trip)
        buckets.n_trips += 1

    return buckets
