from __future__ import annotations

from datetime import datetime

import pandas as pd
import pytest

from stationflow.traffic.bucketer import MinuteBuckets, bucket_trips
from stationflow.traffic.clock import MINUTES_PER_DAY, format_time, minute_of_day
from stationflow.traffic.types import Trip


def _at(minute: int, day: int = 1) -> datetime:
    return datetime(2024, 3, day, minute // 60, minute % 60, 30)


def _trip(start_min: int, end_min: int, start="A", end="B") -> Trip:
    return Trip(
        start_station_id=start,
        end_station_id=end,
        started_at=_at(start_min),
        ended_at=_at(end_min),
    )


def test_minute_of_day_uses_wall_clock():
    assert minute_of_day(datetime(2024, 3, 1, 0, 0)) == 0
    assert minute_of_day(datetime(2024, 3, 1, 11, 40, 59)) == 700
    assert minute_of_day(datetime(2024, 3, 1, 23, 59)) == 1439
    assert minute_of_day(pd.Timestamp("2024-03-01 17:05")) == 1025


@pytest.mark.parametrize("bad", [None, pd.NaT, "08:00"])
def test_minute_of_day_rejects_missing_values(bad):
    with pytest.raises(ValueError):
        minute_of_day(bad)


def test_trip_minutes():
    trip = _trip(700, 705)
    assert trip.start_minute == 700
    assert trip.end_minute == 705


def test_every_trip_lands_in_one_slot_per_table():
    trips = [_trip(700, 705), _trip(700, 10), _trip(1439, 0), _trip(0, 1439)]
    buckets = bucket_trips(trips)

    assert len(buckets.departures) == MINUTES_PER_DAY
    assert len(buckets.arrivals) == MINUTES_PER_DAY
    assert buckets.n_trips == 4
    assert buckets.n_skipped == 0

    for trip in trips:
        dep_slots = [i for i, slot in enumerate(buckets.departures) if trip in slot]
        arr_slots = [i for i, slot in enumerate(buckets.arrivals) if trip in slot]
        assert dep_slots == [trip.start_minute]
        assert arr_slots == [trip.end_minute]

    assert len(buckets.departures[700]) == 2
    assert len(buckets.arrivals[0]) == 1


def test_trips_with_unusable_timestamps_are_skipped():
    good = _trip(60, 75)
    bad_start = Trip("A", "B", None, _at(10))
    bad_end = Trip("A", "B", _at(10), pd.NaT)

    buckets = bucket_trips([good, bad_start, bad_end])

    assert buckets.n_trips == 1
    assert buckets.n_skipped == 2
    assert sum(len(s) for s in buckets.departures) == 1
    assert sum(len(s) for s in buckets.arrivals) == 1


def test_departures_per_bin():
    buckets = bucket_trips([_trip(0, 5), _trip(59, 65), _trip(60, 61), _trip(1439, 2)])

    hourly = buckets.departures_per_bin(60)
    assert len(hourly) == 24
    assert hourly[0] == 2
    assert hourly[1] == 1
    assert hourly[23] == 1
    assert sum(hourly) == 4

    with pytest.raises(ValueError):
        buckets.departures_per_bin(7)


def test_empty_buckets():
    buckets = MinuteBuckets()
    assert buckets.n_trips == 0
    assert all(slot == [] for slot in buckets.departures)


@pytest.mark.parametrize(
    "minutes, expected",
    [(0, "12:00 AM"), (59, "12:59 AM"), (700, "11:40 AM"), (750, "12:30 PM"), (1439, "11:59 PM")],
)
def test_format_time(minutes, expected):
    assert format_time(minutes) == expected
