from __future__ import annotations

import json
from datetime import datetime

import pytest

from stationflow.traffic.session import DataLoadError, TrafficSession, load_session
from stationflow.traffic.types import Station, Trip


def _make_session() -> TrafficSession:
    stations = [
        Station("A", "Alpha", 42.36, -71.09),
        Station("B", "Bravo", 42.37, -71.10),
    ]
    trips = [
        Trip("A", "B", datetime(2024, 3, 1, 8, 0), datetime(2024, 3, 1, 8, 20)),
        Trip("A", "B", datetime(2024, 3, 1, 8, 5), datetime(2024, 3, 1, 8, 30)),
        Trip("B", "A", datetime(2024, 3, 1, 17, 0), datetime(2024, 3, 1, 17, 15)),
        Trip("B", "A", None, datetime(2024, 3, 1, 17, 15)),
    ]
    return TrafficSession.from_trips(stations, trips)


def test_session_buckets_once_and_skips_bad_trips():
    session = _make_session()
    assert session.buckets.n_trips == 3
    assert session.buckets.n_skipped == 1


def test_session_station_traffic():
    session = _make_session()

    morning = {r.short_name: r.total_traffic for r in session.station_traffic(8 * 60)}
    assert morning == {"A": 2, "B": 2}

    evening = {r.short_name: (r.departures, r.arrivals) for r in session.station_traffic(17 * 60)}
    assert evening == {"A": (0, 1), "B": (1, 0)}


def test_max_total_traffic_uses_unfiltered_counts():
    session = _make_session()
    assert session.max_total_traffic == 3
    # stays fixed whatever filter is being looked at
    session.station_traffic(0)
    assert session.max_total_traffic == 3


def test_departures_per_bin():
    session = _make_session()
    hourly = session.departures_per_bin(60)
    assert hourly[8] == 2
    assert hourly[17] == 1


def test_load_session(tmp_path):
    stations_path = tmp_path / "stations.json"
    stations_path.write_text(
        json.dumps(
            {
                "data": {
                    "stations": [
                        {"short_name": "A32000", "name": "Kendall T", "lat": 42.36, "lon": -71.08},
                        {"short_name": "M32006", "name": "MIT", "lat": 42.35, "lon": -71.1},
                    ]
                }
            }
        )
    )
    trips_path = tmp_path / "trips.csv"
    trips_path.write_text(
        "ride_id,rideable_type,started_at,ended_at,start_station_id,end_station_id,member_casual\n"
        "r1,classic_bike,2024-03-01 08:10:00,2024-03-01 08:25:00,A32000,M32006,member\n"
        "r2,electric_bike,not a time,2024-03-01 09:00:00,A32000,M32006,casual\n"
    )

    session = load_session(stations_path, trips_path)
    assert [s.short_name for s in session.stations] == ["A32000", "M32006"]
    assert session.buckets.n_trips == 1

    records = {r.short_name: r.total_traffic for r in session.station_traffic(None)}
    assert records == {"A32000": 1, "M32006": 1}


def test_load_session_wraps_failures(tmp_path):
    with pytest.raises(DataLoadError):
        load_session(tmp_path / "missing.json", tmp_path / "missing.csv")


def test_load_session_wraps_malformed_stations(tmp_path):
    stations_path = tmp_path / "stations.json"
    stations_path.write_text(
        json.dumps({"data": {"stations": [{"short_name": "A", "name": "Alpha", "lat": None, "lon": 1}, 5]}})
    )
    trips_path = tmp_path / "trips.csv"
    trips_path.write_text("started_at,ended_at,start_station_id,end_station_id\n")

    with pytest.raises(DataLoadError):
        load_session(stations_path, trips_path)
