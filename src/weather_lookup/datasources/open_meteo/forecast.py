"""Current, hourly and daily forecast from the Open-Meteo Forecast API."""

from __future__ import annotations

from typing import Any

from weather_lookup.datasources.open_meteo.client import (
    CURRENT_VARS,
    DAILY_VARS,
    HOURLY_VARS,
    OPEN_METEO_API,
)
from weather_lookup.services.http import session


def fetch_forecast(
    lat: float,
    lon: float,
    *,
    forecast_days: int = 5,
    forecast_hours: int = 12,
) -> dict[str, Any]:
    """
    Fetch current conditions plus short hourly and daily forecasts.

    Args:
        lat: Latitude.
        lon: Longitude.
        forecast_days: Number of daily entries (max 16).
        forecast_hours: Number of hourly entries from now.

    Returns:
        Raw API response dict with ``current``, ``hourly`` and ``daily`` keys.
    """
    params: dict[str, str | int | float | list[str]] = {
        "latitude": lat,
        "longitude": lon,
        "current": CURRENT_VARS,
        "hourly": HOURLY_VARS,
        "daily": DAILY_VARS,
        "timezone": "auto",
        "forecast_days": forecast_days,
        "forecast_hours": forecast_hours,
    }

    resp = session.get(OPEN_METEO_API, params=params)
    resp.raise_for_status()
    result: dict[str, Any] = resp.json()
    return result
