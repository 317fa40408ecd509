# stationflow/traffic/session.py
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from colorama import Fore, Style

from stationflow.traffic.aggregate import compute_station_traffic
from stationflow.traffic.bucketer import MinuteBuckets, bucket_trips
from stationflow.traffic.types import Station, StationWithTraffic, Trip
from stationflow.traffic.window import WINDOW_RADIUS_MINUTES
from stationflow.util.load_trips import load_trips
from stationflow.util.stations import load_stations


class DataLoadError(RuntimeError):
    """Stations or trips could not be loaded; nothing downstream should run."""


@dataclass
class TrafficSession:
    """
    Holds the fixed station list and the minute buckets for one map session.

    Buckets are built once in from_trips() and only read afterwards; every
    slider move is a fresh station_traffic() call.
    """
    stations: List[Station]
    buckets: MinuteBuckets
    radius: int = WINDOW_RADIUS_MINUTES
    _max_total: Optional[int] = field(default=None, init=False, repr=False)

    @classmethod
    def from_trips(
        cls,
        stations: Sequence[Station],
        trips: Iterable[Trip],
        *,
        radius: int = WINDOW_RADIUS_MINUTES,
    ) -> "TrafficSession":
        print(f"{Fore.CYAN}Bucketing trips by minute of day…{Style.RESET_ALL}")
        buckets = bucket_trips(trips)
        if buckets.n_skipped:
            print(
                f"{Fore.YELLOW}Skipped {buckets.n_skipped} trips without a usable "
                f"minute of day{Style.RESET_ALL}"
            )
        print(
            f"{Fore.GREEN}Bucketed {buckets.n_trips} trips for "
            f"{len(stations)} stations.{Style.RESET_ALL}"
        )
        return cls(stations=list(stations), buckets=buckets, radius=radius)

    def station_traffic(self, time_filter: Optional[int] = None) -> List[StationWithTraffic]:
        return compute_station_traffic(
            self.stations,
            self.buckets,
            time_filter,
            radius=self.radius,
        )

    @property
    def max_total_traffic(self) -> int:
        """Largest unfiltered station total; the radius scale domain for every filter."""
        if self._max_total is None:
            self._max_total = max(
                (r.total_traffic for r in self.station_traffic(None)),
                default=0,
            )
        return self._max_total

    def departures_per_bin(self, bin_minutes: int = 60) -> List[int]:
        return self.buckets.departures_per_bin(bin_minutes)


def load_session(
    stations_path: str | Path,
    trips_path: str | Path,
    *,
    local_tz: str | None = None,
) -> TrafficSession:
    print(f"{Fore.CYAN}Loading station registry…{Style.RESET_ALL}")
    try:
        stations = load_stations(stations_path)
        trips = load_trips(trips_path, local_tz=local_tz)
    except (OSError, ValueError, KeyError) as e:
        raise DataLoadError(f"Error loading station or trip data: {e}") from e

    return TrafficSession.from_trips(stations, trips)
