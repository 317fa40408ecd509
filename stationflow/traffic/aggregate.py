# stationflow/traffic/aggregate.py
from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence

from stationflow.traffic.bucketer import MinuteBuckets
from stationflow.traffic.types import Station, StationWithTraffic, Trip
from stationflow.traffic.window import (
    WINDOW_RADIUS_MINUTES,
    filter_by_minute,
    parse_time_filter,
)


def count_by_station(trips: Iterable[Trip], key: str) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for t in trips:
        sid = getattr(t, key)
        counts[sid] = counts.get(sid, 0) + 1
    return counts


def compute_station_traffic(
    stations: Sequence[Station],
    buckets: MinuteBuckets,
    time_filter: Optional[int] = None,
    *,
    radius: int = WINDOW_RADIUS_MINUTES,
) -> List[StationWithTraffic]:
    """
    Per-station departures/arrivals inside the time window.

    One record per input station, same order, zero-traffic stations included.
    time_filter may also be the slider value -1, which means no filter.
    Trips pointing at stations outside `stations` are counted but never emitted.
    """
    time_filter = parse_time_filter(time_filter)

    departures = count_by_station(
        filter_by_minute(buckets.departures, time_filter, radius),
        "start_station_id",
    )
    arrivals = count_by_station(
        filter_by_minute(buckets.arrivals, time_filter, radius),
        "end_station_id",
    )

    out: List[StationWithTraffic] = []
    for s in stations:
        dep = departures.get(s.short_name, 0)
        arr = arrivals.get(s.short_name, 0)
        out.append(
            StationWithTraffic(
                station=s,
                departures=dep,
                arrivals=arr,
                total_traffic=dep + arr,
            )
        )
    return out
