# stationflow/traffic/types.py
from __future__ import annotations

from dataclasses import dataclass, asdict
from datetime import datetime

from stationflow.traffic.clock import minute_of_day


@dataclass(frozen=True)
class Trip:
    start_station_id: str
    end_station_id: str
    started_at: datetime
    ended_at: datetime

    @property
    def start_minute(self) -> int:
        return minute_of_day(self.started_at)

    @property
    def end_minute(self) -> int:
        return minute_of_day(self.ended_at)


@dataclass(frozen=True)
class Station:
    short_name: str
    name: str
    lat: float
    lon: float
    capacity: int | None = None


@dataclass(frozen=True)
class StationWithTraffic:
    """
    A station plus its traffic counts for one time filter.
    Built fresh on every aggregation pass; the wrapped Station is never touched.
    """
    station: Station
    departures: int
    arrivals: int
    total_traffic: int

    @property
    def short_name(self) -> str:
        return self.station.short_name

    @property
    def name(self) -> str:
        return self.station.name

    @property
    def lat(self) -> float:
        return self.station.lat

    @property
    def lon(self) -> float:
        return self.station.lon

    @property
    def departure_ratio(self) -> float | None:
        if self.total_traffic <= 0:
            return None
        return self.departures / self.total_traffic

    def as_dict(self) -> dict:
        out = asdict(self.station)
        out["departures"] = self.departures
        out["arrivals"] = self.arrivals
        out["totalTraffic"] = self.total_traffic
        return out
