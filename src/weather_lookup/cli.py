"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import logging
import sys

import requests

from weather_lookup import __version__
from weather_lookup.config import Settings, get_settings
from weather_lookup.datasources.open_meteo import LocationNotFoundError, suggest
from weather_lookup.history import SearchHistoryStore
from weather_lookup.lookup import default_location, lookup, resolve
from weather_lookup.presentation import ICON_GLYPHS, MISSING_DISPLAY, format_temperature
from weather_lookup.schemas import Forecast
from weather_lookup.store import FileBlobStore

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="weather-lookup",
        description="Current conditions and short forecasts for any city (Open-Meteo)",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # 'show' command - forecast for a city
    show_parser = subparsers.add_parser("show", help="Show the forecast for a city")
    show_parser.add_argument(
        "city",
        nargs="?",
        default=None,
        help="City to look up (default: default_location from settings)",
    )
    units = show_parser.add_mutually_exclusive_group()
    units.add_argument(
        "-f",
        "--fahrenheit",
        dest="celsius",
        action="store_false",
        default=None,
        help="Show temperatures in °F",
    )
    units.add_argument(
        "-c",
        "--celsius",
        dest="celsius",
        action="store_true",
        help="Show temperatures in °C",
    )
    show_parser.set_defaults(celsius=None)

    # 'suggest' command - autocomplete a city name
    suggest_parser = subparsers.add_parser("suggest", help="List matching city names")
    suggest_parser.add_argument("query", help="Partial city name")
    suggest_parser.add_argument(
        "--count",
        type=int,
        default=5,
        help="Maximum number of suggestions (default: 5)",
    )

    # 'history' command - recent searches
    history_parser = subparsers.add_parser("history", help="Show recent searches")
    history_parser.add_argument(
        "--clear",
        action="store_true",
        help="Forget all recent searches",
    )

    # 'info' command
    subparsers.add_parser("info", help="Show application info")

    return parser


def history_store(settings: Settings) -> SearchHistoryStore:
    """Search history persisted under the configured data directory."""
    return SearchHistoryStore(FileBlobStore(settings.data_dir))


def render_forecast(forecast: Forecast, is_celsius: bool = True) -> str:
    """Plain-text summary of a forecast."""
    current = forecast.current
    lines = [
        forecast.location.name,
        f"  {format_temperature(current.temperature, is_celsius)}  {current.condition}",
        f"  Feels like {format_temperature(current.feels_like, is_celsius)}",
    ]
    humidity = MISSING_DISPLAY if current.humidity is None else f"{current.humidity:g}%"
    wind = MISSING_DISPLAY if current.wind_speed is None else f"{current.wind_speed} km/h"
    lines.append(f"  Humidity {humidity}  Wind {wind}")

    if forecast.hourly:
        lines.append("")
        lines.append("Next hours:")
        for hour in forecast.hourly:
            temp = format_temperature(hour.temp, is_celsius)
            lines.append(f"  {hour.time}  {ICON_GLYPHS[hour.icon]}  {temp}")

    if forecast.daily:
        lines.append("")
        lines.append("Next days:")
        for day in forecast.daily:
            high = format_temperature(day.high, is_celsius)
            low = format_temperature(day.low, is_celsius)
            lines.append(
                f"  {day.day:<10} {ICON_GLYPHS[day.icon]}  {high} / {low}  {day.condition}"
            )

    return "\n".join(lines)


def cmd_show(args: argparse.Namespace) -> int:
    """Handle the 'show' command."""
    settings = get_settings()
    is_celsius = settings.celsius if args.celsius is None else args.celsius
    store = history_store(settings)
    history = store.load()

    try:
        location = resolve(args.city, history) if args.city else default_location(settings)
        forecast = lookup(location, settings)
    except LocationNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except requests.RequestException as e:
        logger.debug("Lookup failed", exc_info=True)
        print(f"Error: unable to load weather ({e})", file=sys.stderr)
        return 1

    print(render_forecast(forecast, is_celsius))

    if args.city:
        store.push(history, location)
    return 0


def cmd_suggest(args: argparse.Namespace) -> int:
    """Handle the 'suggest' command."""
    try:
        matches = suggest(args.query, count=args.count)
    except requests.RequestException as e:
        print(f"Error: unable to search ({e})", file=sys.stderr)
        return 1

    if not matches:
        print("No results found.", file=sys.stderr)
        return 1
    for loc in matches:
        print(f"{loc.name}  ({loc.lat:.4f}, {loc.lon:.4f})")
    return 0


def cmd_history(args: argparse.Namespace) -> int:
    """Handle the 'history' command."""
    store = history_store(get_settings())

    if args.clear:
        store.clear()
        print("Search history cleared.")
        return 0

    history = store.load()
    if not history:
        print("No recent searches.")
        return 0
    print("Recent Searches")
    for i, loc in enumerate(history, start=1):
        print(f"  {i}. {loc.name}")
    return 0


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Data directory: {settings.data_dir}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    debug = args.debug or get_settings().debug
    logging.basicConfig(
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        level=logging.DEBUG if debug else logging.WARNING,
    )

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "show": cmd_show,
        "suggest": cmd_suggest,
        "history": cmd_history,
        "info": cmd_info,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
