# stationflow/viz/maps/render.py
import json

import folium

from stationflow.viz.overlays.bike_lanes import add_bike_lanes
from stationflow.viz.overlays.stations import add_station_markers
from stationflow.viz.widgets.legend import build_legend_widget
from stationflow.viz.widgets.map_wrap import MAP_WRAP_CSS, on_map_wrap
from stationflow.viz.widgets.time_slider import build_time_slider

CENTER_LAT = 42.36027
CENTER_LON = -71.09415
ZOOM_START = 12
MIN_ZOOM = 5
MAX_ZOOM = 18
TILES = "cartodbpositron"

TITLE_CSS = """
#map-title {
  position: absolute;
  top: 12px;
  left: 50%;
  transform: translateX(-50%);
  background: rgba(255,255,255,0.95);
  padding: 6px 16px;
  border-radius: 999px;
  font-size: 14px;
  font-weight: 600;
  z-index: 1300;
}
"""


def render_map_document(
    *,
    session,
    time_filter=None,
    title: str | None = None,
    bike_lanes: dict[str, dict] | None = None,
    bin_minutes: int = 60,
):
    """
    Single place that assembles the full Folium map HTML document
    for one time filter (None = any time).
    bike_lanes: GeoJSON already loaded with load_bike_lanes(), drawn under the stations.
    """
    records = session.station_traffic(time_filter)

    m = folium.Map(
        location=[CENTER_LAT, CENTER_LON],
        zoom_start=ZOOM_START,
        min_zoom=MIN_ZOOM,
        max_zoom=MAX_ZOOM,
        tiles=TILES,
        prefer_canvas=True,
    )

    if bike_lanes:
        add_bike_lanes(m, bike_lanes)

    # stations
    add_station_markers(
        m,
        records,
        session.max_total_traffic,
        filtered=time_filter is not None,
    )

    # slider + departures histogram
    m.get_root().html.add_child(
        build_time_slider(
            time_filter,
            session.departures_per_bin(bin_minutes),
            bin_minutes=bin_minutes,
        )
    )

    m.get_root().html.add_child(build_legend_widget(include_lanes=bool(bike_lanes)))
    # title + timebar moved inside the map wrapper
    title_js = ""
    if title:
        title_js = (
            "  const t = document.createElement('div');\n"
            "  t.id = 'map-title';\n"
            f"  t.textContent = {json.dumps(title)};\n"
            "  wrap.appendChild(t);\n"
        )

    m.get_root().html.add_child(
        on_map_wrap(
            f"""
  const existingTitle = document.getElementById("map-title");
  if (existingTitle) existingTitle.remove();
{title_js}
  const timebar = document.getElementById("timebar");
  if (timebar) wrap.appendChild(timebar);
""",
            css=MAP_WRAP_CSS + TITLE_CSS,
        )
    )

    return m.get_root().render()
