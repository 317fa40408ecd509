# stationflow/main.py

import sys

from colorama import Fore, Style

from stationflow.traffic.clock import format_time
from stationflow.traffic.session import DataLoadError, load_session
from stationflow.util.export import write_station_traffic_csv
from stationflow.viz.app.single import serve_traffic_map


STATIONS = "bluebikes-stations.json"
TRIPS = "bluebikes-traffic-2024-03.csv"

# slider positions summarised on the console before serving
PREVIEW_MINUTES = [8 * 60, 12 * 60, 17 * 60 + 30]


def main():
    try:
        session = load_session(STATIONS, TRIPS)
    except DataLoadError as e:
        print(f"{Fore.RED}{e}{Style.RESET_ALL}")
        sys.exit(1)

    # ---- any time ----
    all_day = session.station_traffic(None)
    write_station_traffic_csv(all_day, "station_traffic_all_day.csv")

    # ---- busiest stations per window ----
    for t in PREVIEW_MINUTES:
        records = session.station_traffic(t)
        top = sorted(records, key=lambda r: r.total_traffic, reverse=True)[:5]

        print(f"\nBusiest stations around {format_time(t)}:\n")
        for i, r in enumerate(top, 1):
            print(
                f"{i:02d}. "
                f"{r.short_name:>8} | "
                f"{r.total_traffic:5d} trips "
                f"({r.departures} out, {r.arrivals} in) "
                f"{r.name}"
            )

    # ---- UI ----
    serve_traffic_map(
        session=session,
        port=8080,
        title="Bluebikes Station Traffic",
        show_bike_lanes=True,
    )


if __name__ == "__main__":
    main()
