"""Search -> geocode -> forecast, the way the main screen drives it.

Ties the datasource, presentation and history modules together so the CLI
(or any other front end) only has to deal with ``Location`` and ``Forecast``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from weather_lookup.datasources.open_meteo import fetch_forecast, geocode
from weather_lookup.presentation import current_weather, daily_forecast, hourly_forecast
from weather_lookup.schemas import Forecast, Location

if TYPE_CHECKING:
    from weather_lookup.config import Settings
    from weather_lookup.schemas import SearchHistory

logger = logging.getLogger(__name__)


def has_coordinates(loc: Location) -> bool:
    """False for history entries upgraded from the name-only format."""
    return not (loc.lat == 0 and loc.lon == 0)


def default_location(settings: Settings) -> Location:
    """The location shown before anything has been searched."""
    return Location(
        name=settings.default_location,
        lat=settings.default_lat,
        lon=settings.default_lon,
    )


def resolve(query: str, history: SearchHistory | None = None) -> Location:
    """Find coordinates for ``query``.

    A history entry with the same name (case-insensitive) is reused without
    calling the geocoder, unless it came from the legacy name-only format
    and has no coordinates yet.

    Raises:
        LocationNotFoundError: Nothing matched ``query``.
        requests.RequestException: The geocoder could not be reached.
    """
    wanted = query.strip().casefold()
    for item in history or []:
        if item.name.casefold() == wanted and has_coordinates(item):
            logger.debug("Using stored coordinates for %s", item.name)
            return item
    return geocode(query)


def lookup(location: Location, settings: Settings) -> Forecast:
    """Fetch and summarize the forecast for ``location``.

    Raises:
        requests.RequestException: The forecast API could not be reached.
    """
    payload = fetch_forecast(
        location.lat,
        location.lon,
        forecast_days=settings.forecast_days,
        forecast_hours=settings.forecast_hours,
    )
    return Forecast(
        location=location,
        current=current_weather(payload),
        hourly=hourly_forecast(payload, limit=settings.forecast_hours),
        daily=daily_forecast(payload),
    )
