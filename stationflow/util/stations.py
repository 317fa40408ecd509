import json

from stationflow.traffic.types import Station


def load_stations(path):
    """
    Load Bluebikes stations from a GBFS station_information.json
    Returns a list of Station records keyed by short_name, in file order.
    """
    with open(path) as f:
        raw = json.load(f)

    try:
        raw = raw["data"]["stations"]
    except (KeyError, TypeError):
        raise ValueError("station JSON must contain data.stations") from None
    if not isinstance(raw, list):
        raise ValueError("data.stations must be a list")

    stations = []
    seen = set()
    for s in raw:
        if not isinstance(s, dict):
            raise ValueError(f"station entry is not an object: {s!r}")

        short_name = s.get("short_name")
        if short_name is None:
            raise ValueError(f"station without short_name: {s.get('name', s)!r}")
        short_name = str(short_name)
        if short_name in seen:
            continue
        seen.add(short_name)

        try:
            lat = float(s["lat"])
            lon = float(s["lon"])
            cap = s.get("capacity")
            cap = int(cap) if cap is not None else None
        except (KeyError, TypeError, ValueError):
            raise ValueError(f"station {short_name} has bad lat/lon/capacity") from None

        stations.append(
            Station(
                short_name=short_name,
                name=s.get("name", short_name),
                lat=lat,
                lon=lon,
                capacity=cap,
            )
        )

    return stations
