# stationflow/viz/widgets/legend.py
from stationflow.viz.scales import (
    ARRIVALS_COLOR,
    BALANCED_COLOR,
    DEPARTURES_COLOR,
    NO_TRAFFIC_COLOR,
)
from stationflow.viz.widgets.map_wrap import on_map_wrap

LEGEND_CSS = """
#map-legend {
  position: absolute;
  bottom: 140px;
  left: 16px;
  background: rgba(255,255,255,0.95);
  padding: 8px 12px;
  border-radius: 10px;
  font-size: 12px;
  z-index: 1200;
}
"""


def build_legend_widget(*, include_lanes: bool = False):
    """
    Floating legend for the flow colours (and bike lanes when drawn).
    """
    rows = [
        (DEPARTURES_COLOR, "●", "more departures"),
        (BALANCED_COLOR, "●", "balanced"),
        (ARRIVALS_COLOR, "●", "more arrivals"),
        (NO_TRAFFIC_COLOR, "●", "no trips"),
    ]
    items = [f'<div><span style="color:{c}">{sym}</span> {label}</div>' for c, sym, label in rows]
    if include_lanes:
        items.append("<hr>")
        items.append('<div><span style="color:#32D400">━</span> bike lane</div>')

    return on_map_wrap(
        f"""
  const existing = document.getElementById("map-legend");
  if (existing) existing.remove();

  const legend = document.createElement("div");
  legend.id = "map-legend";
  legend.innerHTML = `{''.join(items)}`;
  wrap.appendChild(legend);
""",
        css=LEGEND_CSS,
    )
