# stationflow/viz/widgets/time_slider.py
import folium

from stationflow.traffic.clock import MINUTES_PER_DAY, format_time
from stationflow.traffic.window import NO_FILTER, window_minutes


def build_time_slider(time_filter, departures_per_bin, *, bin_minutes=60):
    """
    Time slider:
      - range input from -1 ("any time") to 1439
      - bars = departures per bin, the bins inside the current window drawn solid

    Moving the slider reloads the page with ?t=<minute>.
    """
    slider_value = NO_FILTER if time_filter is None else int(time_filter)
    label = "" if time_filter is None else format_time(time_filter)
    any_time_display = "block" if time_filter is None else "none"

    max_count = max(departures_per_bin, default=0)
    in_window = set(window_minutes(time_filter))

    bars = []
    for i, cnt in enumerate(departures_per_bin):
        t = i * bin_minutes
        if max_count > 0:
            height = int((cnt / max_count) * 48)
        else:
            height = 0

        active = t in in_window or (t + bin_minutes - 1) in in_window

        bars.append(
            f"""
            <div class="timebar-item"
                 onclick="setTime({t})"
                 title="{format_time(t)}: {cnt} departures">
              <div class="timebar-bar"
                   style="height:{height}px; opacity:{'1.0' if active else '0.35'};">
              </div>
            </div>
            """
        )

    return folium.Element(
        f"""
<style>
#timebar {{
  position: absolute;
  left: 0;
  right: 0;
  bottom: 14px;
  height: 110px;
  z-index: 1200;
  pointer-events: auto;
  background: linear-gradient(
    to top,
    rgba(255,255,255,0.92),
    rgba(255,255,255,0.55),
    rgba(255,255,255,0)
  );
  font-family: sans-serif;
}}

#timebar-controls {{
  position: absolute;
  top: 0;
  left: 16px;
  right: 16px;
  display: flex;
  align-items: baseline;
  gap: 12px;
  font-size: 12px;
}}

#time-slider {{
  flex: 1;
}}

#any-time {{
  color: #777;
  font-style: italic;
}}

#timebar-bars {{
  position: absolute;
  bottom: 6px;
  left: 16px;
  right: 16px;
  display: flex;
  align-items: flex-end;
  gap: 2px;
}}

.timebar-item {{
  flex: 1;
  display: inline-flex;
  align-items: flex-end;
  height: 52px;
  cursor: pointer;
}}

.timebar-bar {{
  width: 100%;
  background: #4682b4;
  border-radius: 2px;
}}
</style>

<div id="timebar">
  <div id="timebar-controls">
    <label for="time-slider">Filter by time:</label>
    <input id="time-slider" type="range" min="{NO_FILTER}" max="{MINUTES_PER_DAY - 1}" value="{slider_value}">
    <time id="selected-time">{label}</time>
    <em id="any-time" style="display:{any_time_display}">(any time)</em>
  </div>

  <div id="timebar-bars">
    {''.join(bars)}
  </div>
</div>

<script>
function setTime(t) {{
  const url = new URL(window.location.href);
  url.searchParams.set("t", String(t));
  window.location.href = url.toString();
}}

document.addEventListener("DOMContentLoaded", () => {{
  const slider = document.getElementById("time-slider");
  if (!slider) return;
  slider.addEventListener("change", () => setTime(Number(slider.value)));
}});
</script>
"""
    )
