"""
Application settings.

Values come from environment variables prefixed ``WEATHER_LOOKUP_`` (or a
local ``.env`` file), falling back to the defaults below::

    WEATHER_LOOKUP_DEBUG=true
    WEATHER_LOOKUP_DATA_DIR=~/.local/share/weather-lookup
    WEATHER_LOOKUP_CELSIUS=false
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration."""

    model_config = SettingsConfigDict(
        env_prefix="WEATHER_LOOKUP_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "weather-lookup"
    app_env: str = "development"
    debug: bool = False

    data_dir: Path = Field(default=Path(".weather-lookup"), description="Where history is kept")

    # Shown before the user has searched for anything
    default_location: str = "Dublin, Leinster, Ireland"
    default_lat: float = Field(default=53.33306, ge=-90, le=90)
    default_lon: float = Field(default=-6.24889, ge=-180, le=180)

    celsius: bool = True
    forecast_days: int = Field(default=5, ge=1, le=16)
    forecast_hours: int = Field(default=12, ge=1, le=48)


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
