# stationflow/viz/app/single.py
from __future__ import annotations

from flask import Flask, jsonify, request

from stationflow.traffic.window import parse_time_filter
from stationflow.viz.maps.render import render_map_document
from stationflow.viz.overlays.bike_lanes import load_bike_lanes


def _requested_filter():
    """?t= -> time filter; raises ValueError for junk or out-of-range values."""
    t_raw = request.args.get("t", None)
    if t_raw is None or t_raw == "":
        return None
    return parse_time_filter(int(t_raw))


def build_app(
    session,
    *,
    title: str | None = "Bluebikes Station Traffic",
    show_bike_lanes: bool = False,
) -> Flask:
    """
    Flask app over one TrafficSession.

      /             map page, ?t=<minute> or ?t=-1 for any time
      /api/traffic  per-station counts as JSON for the same ?t=
    """
    if session is None:
        raise ValueError("build_app requires a TrafficSession")

    # fetched once here, every page reuses it
    bike_lanes = load_bike_lanes() if show_bike_lanes else {}

    app = Flask(__name__)

    @app.route("/")
    def _index():
        try:
            time_filter = _requested_filter()
        except ValueError:
            time_filter = None

        return render_map_document(
            session=session,
            time_filter=time_filter,
            title=title,
            bike_lanes=bike_lanes,
        )

    @app.route("/api/traffic")
    def _traffic():
        try:
            time_filter = _requested_filter()
        except ValueError as e:
            return jsonify({"error": str(e)}), 400

        records = session.station_traffic(time_filter)
        return jsonify(
            {
                "time_filter": -1 if time_filter is None else time_filter,
                "stations": [r.as_dict() for r in records],
            }
        )

    return app


def serve_traffic_map(
    *,
    session,
    host: str = "127.0.0.1",
    port: int = 8080,
    debug: bool = False,
    title: str | None = "Bluebikes Station Traffic",
    show_bike_lanes: bool = False,
):
    app = build_app(session, title=title, show_bike_lanes=show_bike_lanes)
    app.run(host=host, port=int(port), debug=bool(debug))
