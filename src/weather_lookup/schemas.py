"""
Domain models for weather lookup.

Pydantic models for data from the Open-Meteo APIs and for what the
presentation layer hands to the screen. Datasources normalize API responses
to these.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field

# =============================================================================
# Locations
# =============================================================================


class Location(BaseModel):
    """A searched or geocoded place.

    ``name`` is the display label (``"Dublin, Leinster, Ireland"``) and the
    identity used by the search history.
    """

    model_config = {"frozen": True, "str_strip_whitespace": True}

    name: str = Field(..., min_length=1, description="Display label")
    lat: float = Field(default=0.0, ge=-90, le=90)
    lon: float = Field(default=0.0, ge=-180, le=180)


#: Most-recent-first list of locations, at most ``MAX_HISTORY`` long.
SearchHistory = list[Location]


# =============================================================================
# Weather
# =============================================================================


class Icon(StrEnum):
    """Symbolic weather glyph, coarser than the WMO condition labels."""

    SUNNY = "sunny"
    CLOUD = "cloud"
    FOG = "fog"
    RAIN = "rain"
    SNOW = "snow"
    STORM = "storm"


class CurrentWeather(BaseModel):
    """Conditions right now at the selected location."""

    temperature: int | None = None
    condition: str = "Unknown"
    humidity: float | None = None
    wind_speed: int | None = None
    feels_like: int | None = None


class HourlyForecastItem(BaseModel):
    """One hour of the short-range forecast."""

    time: str = Field(..., description="Local hour as HH:00")
    temp: int | None = None
    icon: Icon = Icon.SUNNY


class DailyForecastItem(BaseModel):
    """One day of the multi-day forecast."""

    day: str = Field(..., description="Today, Tomorrow, or weekday name")
    high: int | None = None
    low: int | None = None
    condition: str = "Unknown"
    icon: Icon = Icon.SUNNY


class Forecast(BaseModel):
    """Everything the screen shows for one location."""

    location: Location
    current: CurrentWeather = Field(default_factory=CurrentWeather)
    hourly: list[HourlyForecastItem] = Field(default_factory=list)
    daily: list[DailyForecastItem] = Field(default_factory=list)
