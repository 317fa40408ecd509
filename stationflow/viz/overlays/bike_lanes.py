# stationflow/viz/overlays/bike_lanes.py
from __future__ import annotations

import folium
import requests
from colorama import Fore, Style

BIKE_LANE_SOURCES = {
    "Boston bike lanes": (
        "https://bostonopendata-boston.opendata.arcgis.com/datasets/"
        "boston::existing-bike-network-2022.geojson"
    ),
    "Cambridge bike lanes": (
        "https://raw.githubusercontent.com/cambridgegis/cambridgegis_data/main/"
        "Recreation/Bike_Facilities/RECREATION_BikeFacilities.geojson"
    ),
}

FETCH_TIMEOUT_S = 30

LANE_STYLE = {
    "color": "#32D400",
    "weight": 3,
    "opacity": 0.4,
}


def _fetch_geojson(url: str) -> dict:
    resp = requests.get(url, timeout=FETCH_TIMEOUT_S)
    resp.raise_for_status()
    data = resp.json()

    features = data.get("features") if isinstance(data, dict) else None
    if not isinstance(features, list):
        raise ValueError(f"not a GeoJSON FeatureCollection: {url}")

    # folium keys features by id; the lane files do not always carry one
    for i, feat in enumerate(features):
        if isinstance(feat, dict) and "id" not in feat:
            feat["id"] = str(i)
    return data


def load_bike_lanes(sources: dict[str, str] | None = None) -> dict[str, dict]:
    """
    Download each lane network once.
    A source that cannot be fetched or parsed is left out with a warning.
    """
    sources = BIKE_LANE_SOURCES if sources is None else sources

    lanes: dict[str, dict] = {}
    for name, url in sources.items():
        try:
            lanes[name] = _fetch_geojson(url)
        except (requests.RequestException, ValueError) as e:
            print(f"{Fore.YELLOW}Skipping {name}: {e}{Style.RESET_ALL}")
    return lanes


def add_bike_lanes(m: folium.Map, lanes: dict[str, dict]):
    """Draw already-loaded lane networks as GeoJSON line layers."""
    for name, data in lanes.items():
        folium.GeoJson(
            data,
            name=name,
            style_function=lambda _feature: dict(LANE_STYLE),
            embed=True,
        ).add_to(m)
