import csv
from pathlib import Path

FIELDS = ["short_name", "name", "lat", "lon", "departures", "arrivals", "total_traffic"]


def write_station_traffic_csv(records, out_csv_path: str | Path) -> Path:
    """
    One row per station, same order as `records`.
    """
    out_csv_path = Path(out_csv_path)
    out_csv_path.parent.mkdir(parents=True, exist_ok=True)

    with open(out_csv_path, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(FIELDS)
        for r in records:
            writer.writerow(
                [r.short_name, r.name, r.lat, r.lon, r.departures, r.arrivals, r.total_traffic]
            )

    return out_csv_path
