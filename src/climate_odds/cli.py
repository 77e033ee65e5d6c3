"""CLI entry point for climate-odds."""

import argparse
from datetime import date
import json
import logging
import sys


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(
        prog="climate-odds",
        description="Historical odds of uncomfortable weather for a place and day of year",
    )
    subparsers = parser.add_subparsers(dest="command")

    # odds subcommand
    odds_parser = subparsers.add_parser("odds", help="Compute odds for one coordinate and date")
    odds_parser.add_argument("--lat", type=float, required=True, help="Latitude in degrees")
    odds_parser.add_argument("--lon", type=float, required=True, help="Longitude in degrees")
    odds_parser.add_argument("--date", type=date.fromisoformat, required=True, help="Target date (YYYY-MM-DD)")
    odds_parser.add_argument("--hot", type=float, help="Too hot above this max temperature (°C)")
    odds_parser.add_argument("--cold", type=float, help="Too cold below this min temperature (°C)")
    odds_parser.add_argument("--rain", type=float, help="Rain at or above this daily total (mm)")
    odds_parser.add_argument("--wind", type=float, help="Wind at or above this mean speed (km/h)")

    # serve subcommand
    subparsers.add_parser("serve", help="Start the FastAPI server")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")

    if args.command == "serve":
        _serve()
    elif args.command == "odds":
        _odds(args)


def _serve() -> None:
    import os
    import uvicorn

    port = int(os.environ.get("PORT", "8000"))
    uvicorn.run("climate_odds.api.app:create_app", factory=True, host="0.0.0.0", port=port)


def _odds(args: argparse.Namespace) -> None:
    from climate_odds.api.schemas import OddsResponse
    from climate_odds.ingest.nasa_power import RemoteFetchError
    from climate_odds.models import Coordinate, Thresholds
    from climate_odds.service import OddsService

    thresholds = Thresholds(hot=args.hot, cold=args.cold, rain=args.rain, wind=args.wind)
    try:
        report = OddsService().get_odds(Coordinate(args.lat, args.lon), args.date, thresholds)
    except RemoteFetchError as exc:
        print(f"Failed to fetch historical data: {exc}", file=sys.stderr)
        sys.exit(1)

    print(json.dumps(OddsResponse.from_report(report).model_dump(mode="json"), indent=2))


if __name__ == "__main__":
    main()
