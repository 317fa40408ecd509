# stationflow/viz/scales.py
from __future__ import annotations

import math

UNFILTERED_RADIUS_RANGE = (0.0, 25.0)
# fewer trips in a window, so circles get a bigger range
FILTERED_RADIUS_RANGE = (3.0, 50.0)

DEPARTURES_COLOR = "#4682b4"  # steelblue
ARRIVALS_COLOR = "#ff8c00"    # darkorange
BALANCED_COLOR = "#a2878f"
NO_TRAFFIC_COLOR = "#999999"


def radius_scale(total_traffic: int, max_total_traffic: int, *, filtered: bool) -> float:
    """
    Square-root scale from [0, max_total_traffic] onto the radius range.

    A zero-width domain maps everything to the middle of the range.
    """
    r0, r1 = FILTERED_RADIUS_RANGE if filtered else UNFILTERED_RADIUS_RANGE

    hi = math.sqrt(max(0, max_total_traffic))
    if hi == 0:
        return (r0 + r1) / 2

    t = math.sqrt(max(0, total_traffic)) / hi
    return r0 + (r1 - r0) * t


def departure_flow(ratio: float | None) -> float | None:
    """
    Quantize departures/total into three flow levels:
      0.0 -> mostly arrivals, 0.5 -> balanced, 1.0 -> mostly departures.
    """
    if ratio is None or math.isnan(ratio):
        return None
    if ratio < 1 / 3:
        return 0.0
    if ratio < 2 / 3:
        return 0.5
    return 1.0


def flow_color(flow: float | None) -> str:
    if flow is None:
        return NO_TRAFFIC_COLOR
    if flow == 1.0:
        return DEPARTURES_COLOR
    if flow == 0.0:
        return ARRIVALS_COLOR
    return BALANCED_COLOR


def traffic_tooltip(record) -> str:
    return (
        f"{record.total_traffic} trips "
        f"({record.departures} departures, {record.arrivals} arrivals)"
    )
