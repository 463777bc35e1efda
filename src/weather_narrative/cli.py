"""CLI entry point for weather-narrative."""

import argparse
import logging
import sys

from weather_narrative.config import DEFAULT_PORT


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="weather-narrative",
        description="Current weather for a city, told in plain English",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log at DEBUG level")
    subparsers = parser.add_subparsers(dest="command")

    # serve subcommand
    subparsers.add_parser("serve", help="Start the web server")

    # describe subcommand
    describe_parser = subparsers.add_parser("describe", help="Print the narrative for a city")
    describe_parser.add_argument("city", help='City name (e.g. "London" or "Paris,FR")')

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.command == "serve":
        _serve()
    elif args.command == "describe":
        _describe(args)


def _serve() -> None:
    import os
    import uvicorn

    port = int(os.environ.get("PORT", str(DEFAULT_PORT)))
    uvicorn.run("weather_narrative.api.app:create_app", factory=True, host="0.0.0.0", port=port)


def _describe(args: argparse.Namespace) -> None:
    from weather_narrative.compute.narrative import assemble
    from weather_narrative.ingest.openweather import fetch_current, fetch_yesterday

    today = fetch_current(args.city)
    if today is None:
        print(f"City not found: {args.city}", file=sys.stderr)
        sys.exit(1)

    narrative = assemble(today, fetch_yesterday(today))
    place = f"{narrative.city}, {narrative.country}" if narrative.country else narrative.city
    print(f"{place}: {narrative.temperature}°C with {narrative.description}.")
    if narrative.comparison:
        print(narrative.comparison)


if __name__ == "__main__":
    main()
