from __future__ import annotations

import pytest

from stationflow.traffic.types import Station, StationWithTraffic
from stationflow.viz.scales import (
    ARRIVALS_COLOR,
    BALANCED_COLOR,
    DEPARTURES_COLOR,
    NO_TRAFFIC_COLOR,
    departure_flow,
    flow_color,
    radius_scale,
    traffic_tooltip,
)


def test_radius_scale_unfiltered():
    assert radius_scale(0, 100, filtered=False) == 0.0
    assert radius_scale(100, 100, filtered=False) == 25.0
    assert radius_scale(25, 100, filtered=False) == pytest.approx(12.5)


def test_radius_scale_filtered():
    assert radius_scale(0, 100, filtered=True) == 3.0
    assert radius_scale(100, 100, filtered=True) == 50.0


def test_radius_scale_empty_domain():
    assert radius_scale(0, 0, filtered=False) == 12.5
    assert radius_scale(0, 0, filtered=True) == 26.5


@pytest.mark.parametrize(
    "ratio, flow",
    [(None, None), (0.0, 0.0), (0.3, 0.0), (0.5, 0.5), (0.66, 0.5), (0.7, 1.0), (1.0, 1.0)],
)
def test_departure_flow(ratio, flow):
    assert departure_flow(ratio) == flow


def test_flow_color():
    assert flow_color(None) == NO_TRAFFIC_COLOR
    assert flow_color(0.0) == ARRIVALS_COLOR
    assert flow_color(0.5) == BALANCED_COLOR
    assert flow_color(1.0) == DEPARTURES_COLOR


def test_traffic_tooltip():
    rec = StationWithTraffic(Station("A", "Alpha", 0.0, 0.0), departures=3, arrivals=2, total_traffic=5)
    assert traffic_tooltip(rec) == "5 trips (3 departures, 2 arrivals)"
