import os
import sys

from colorama import Fore, Style

from stationflow.traffic.session import DataLoadError, load_session
from stationflow.viz.app.single import build_app

STATIONS = os.environ.get("STATIONS_JSON", "bluebikes-stations.json")
TRIPS = os.environ.get("TRIPS_CSV", "bluebikes-traffic-2024-03.csv")
LOCAL_TZ = os.environ.get("LOCAL_TZ") or None
BIKE_LANES = os.environ.get("BIKE_LANES", "1") != "0"


def create_app():
  try:
      session = load_session(STATIONS, TRIPS, local_tz=LOCAL_TZ)
  except DataLoadError as e:
      print(f"{Fore.RED}{e}{Style.RESET_ALL}")
      sys.exit(1)

  return build_app(
      session,
      title="Bluebikes Station Traffic",
      show_bike_lanes=BIKE_LANES,
  )


def main():
  app = create_app()

  port = int(os.environ.get("PORT", "8080"))
  host = os.environ.get("HOST", "0.0.0.0")

  app.run(host=host, port=port)


if __name__ == "__main__":
  main()
