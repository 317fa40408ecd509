# stationflow/viz/widgets/map_wrap.py
import folium

MAP_WRAP_CSS = """
#map-wrap {
  position: relative;
  width: 100%;
}
#map-wrap .leaflet-container {
  width: 100% !important;
  height: 75vh !important;
  min-height: 520px;
}
"""


def on_map_wrap(body_js: str, *, css: str = "") -> folium.Element:
    """
    Run `body_js` once the page has loaded, with `wrap` bound to the
    #map-wrap div around the leaflet container. Whichever widget runs first creates it.
    """
    return folium.Element(
        f"""
<style>
{css}
</style>

<script>
document.addEventListener("DOMContentLoaded", () => {{
  const mapEl = document.querySelector(".leaflet-container");
  if (!mapEl) return;

  let wrap = document.getElementById("map-wrap");
  if (!wrap) {{
    wrap = document.createElement("div");
    wrap.id = "map-wrap";
    mapEl.parentNode.insertBefore(wrap, mapEl);
    wrap.appendChild(mapEl);
  }}

{body_js}
}});
</script>
"""
    )
