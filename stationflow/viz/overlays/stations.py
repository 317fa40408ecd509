import folium

from stationflow.viz.scales import (
    departure_flow,
    flow_color,
    radius_scale,
    traffic_tooltip,
)


def add_station_markers(m, records, max_total_traffic, *, filtered):
    """
    One circle per station.
    radius: sqrt of total traffic, color: departure/arrival balance.
    """
    for r in records:
        fill_color = flow_color(departure_flow(r.departure_ratio))
        tip = traffic_tooltip(r)

        popup = [
            f"<b>{r.name}</b>",
            f"Station: {r.short_name}",
            tip,
        ]

        folium.CircleMarker(
            location=[float(r.lat), float(r.lon)],
            radius=radius_scale(r.total_traffic, max_total_traffic, filtered=filtered),
            fill=True,
            fill_color=fill_color,
            fill_opacity=0.6,
            color="white",
            weight=1,
            tooltip=tip,
            popup="<br>".join(popup),
        ).add_to(m)
