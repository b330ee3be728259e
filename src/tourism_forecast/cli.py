# Project: tourism-forecast
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
cli.py — Command-line interface for tourism-forecast.

Commands:
  tourism-forecast analyze --location PLACE --start DATE --end DATE
      — fetch the forecast and print the weather analysis
  tourism-forecast locations
      — list the built-in destination keys
"""

import argparse
import json
from pathlib import Path

from tourism_forecast.config import default_config, load_config, resolve_api_key
from tourism_forecast.exceptions import ConfigurationError, ProviderFetchError
from tourism_forecast.forecast import get_weather_analysis
from tourism_forecast.geocode import KNOWN_LOCATIONS, LocationNotFoundError, resolve_location
from tourism_forecast.report import render_analysis_report, weather_prompt_summary
from tourism_forecast.utils import parse_date


def _load(config_path: str | None) -> dict:
    if config_path is None:
        path = Path("config.toml")
        return load_config(path) if path.exists() else default_config()
    return load_config(Path(config_path))


def cmd_analyze(args) -> None:
    """Resolve the location, analyse its forecast and print the result."""
    try:
        config = _load(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"[error] {e}")
        raise SystemExit(1)

    try:
        start = parse_date(args.start)
        end = parse_date(args.end)
    except ValueError:
        print(f"[error] Dates must look like YYYY-MM-DD, got '{args.start}' and '{args.end}'.")
        raise SystemExit(1)
    if start > end:
        print("[error] --start must not be after --end.")
        raise SystemExit(1)

    try:
        api_key = resolve_api_key(config)
    except ConfigurationError:
        api_key = None  # known destinations still resolve; analysis will report the missing key

    try:
        loc = resolve_location(args.location, api_key=api_key)
    except (LocationNotFoundError, ProviderFetchError) as e:
        print(f"[error] {e}")
        raise SystemExit(1)

    print(f"Fetching forecast for {loc['name']}...")
    analysis = get_weather_analysis(
        latitude=loc["latitude"],
        longitude=loc["longitude"],
        start_date=start,
        end_date=end,
        config=config,
    )

    if args.json:
        print(json.dumps(analysis, indent=2, ensure_ascii=False))
    elif args.prose:
        print(weather_prompt_summary(analysis))
    else:
        print()
        print(render_analysis_report(loc["name"], analysis))

    if analysis is None:
        raise SystemExit(1)


def cmd_locations(args) -> None:
    """Print the built-in destination keys."""
    for key, loc in KNOWN_LOCATIONS.items():
        print(f"  {key:<14} {loc['name']} ({loc['latitude']}, {loc['longitude']})")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tourism-forecast",
        description="Weather outlook and impact score for tourism demand forecasting",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="command")
    subparsers.required = True

    p_analyze = subparsers.add_parser("analyze", help="Analyse the weather forecast for a trip")
    p_analyze.add_argument(
        "--location",
        metavar="PLACE",
        required=True,
        help='Destination key (e.g. "kingston") or place name (e.g. "Castries, LC")',
    )
    p_analyze.add_argument("--start", metavar="DATE", required=True, help="Trip start date, YYYY-MM-DD")
    p_analyze.add_argument("--end", metavar="DATE", required=True, help="Trip end date, YYYY-MM-DD")
    p_analyze.add_argument(
        "--config",
        metavar="PATH",
        default=None,
        help="Path to config.toml (default: ./config.toml if present)",
    )
    output = p_analyze.add_mutually_exclusive_group()
    output.add_argument("--json", action="store_true", help="Print the raw analysis as JSON")
    output.add_argument("--prose", action="store_true", help="Print the one-paragraph prompt summary")

    subparsers.add_parser("locations", help="List built-in destination keys")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    commands = {
        "analyze": cmd_analyze,
        "locations": cmd_locations,
    }
    commands[args.command](args)


if __name__ == "__main__":
    main()
