"""Open-Meteo weather and geocoding data source (free, no API key).

Public API:
  - geocoding: geocode (best match), suggest (autocomplete), LocationNotFoundError
  - forecast: fetch_forecast (current + hourly + daily)
  - client: API URLs, requested variables
"""

from weather_lookup.datasources.open_meteo.client import OPEN_METEO_API, OPEN_METEO_GEOCODING
from weather_lookup.datasources.open_meteo.forecast import fetch_forecast
from weather_lookup.datasources.open_meteo.geocoding import (
    LocationNotFoundError,
    geocode,
    suggest,
)

__all__ = [
    "OPEN_METEO_API",
    "OPEN_METEO_GEOCODING",
    "LocationNotFoundError",
    "fetch_forecast",
    "geocode",
    "suggest",
]
