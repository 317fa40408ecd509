# stationflow/util/load_trips.py
from __future__ import annotations

from pathlib import Path
from typing import List

import pandas as pd
from colorama import Fore, Style
from tqdm import tqdm

from stationflow.traffic.types import Trip

REQUIRED_COLUMNS = ["started_at", "ended_at", "start_station_id", "end_station_id"]


def read_trip_frame(trips_csv: str | Path, *, local_tz: str | None = None) -> pd.DataFrame:
    """
    Loads a Bluebikes trips CSV with columns like:

      ride_id, rideable_type, started_at, ended_at,
      start_station_id, end_station_id, member_casual

    Returns cleaned DataFrame with:
      - start_station_id (str)
      - end_station_id (str)
      - started_at (datetime, wall clock)
      - ended_at (datetime, wall clock)

    Rows whose timestamps do not parse are dropped here, before bucketing.
    """
    trips_csv = Path(trips_csv)

    df = pd.read_csv(
        trips_csv,
        dtype={"start_station_id": str, "end_station_id": str},
    )
    df.columns = [c.strip() for c in df.columns]

    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Trips CSV missing columns: {', '.join(missing)}")

    out = pd.DataFrame()
    out["start_station_id"] = df["start_station_id"].astype(str).str.strip()
    out["end_station_id"] = df["end_station_id"].astype(str).str.strip()

    out["started_at"] = pd.to_datetime(df["started_at"], errors="coerce")
    out["ended_at"] = pd.to_datetime(df["ended_at"], errors="coerce")

    # aware timestamps are moved onto the map's wall clock
    if local_tz is not None:
        for col in ("started_at", "ended_at"):
            if out[col].dt.tz is not None:
                out[col] = out[col].dt.tz_convert(local_tz).dt.tz_localize(None)

    n_before = len(out)
    out = out.dropna(subset=["started_at", "ended_at"])
    dropped = n_before - len(out)
    if dropped:
        print(f"{Fore.YELLOW}Dropped {dropped} trips with unparsable timestamps{Style.RESET_ALL}")

    return out


def load_trips(trips_csv: str | Path, *, local_tz: str | None = None) -> List[Trip]:
    print(f"{Fore.CYAN}Loading trips from {trips_csv}…{Style.RESET_ALL}")
    df = read_trip_frame(trips_csv, local_tz=local_tz)

    trips: List[Trip] = []
    for row in tqdm(df.itertuples(index=False), total=len(df), desc="Reading trips"):
        trips.append(
            Trip(
                start_station_id=row.start_station_id,
                end_station_id=row.end_station_id,
                started_at=row.started_at.to_pydatetime(),
                ended_at=row.ended_at.to_pydatetime(),
            )
        )

    return trips
