"""Pure presentation functions: raw forecast fields -> display values.

All presentation functions follow the same pattern:
  - Input: numbers, strings or a raw payload dict already fetched by the caller
  - Output: display strings or ``schemas`` models
  - No side effects, no I/O, never raise on odd input

Public API:
  - weather_codes: condition, icon, describe, ICON_GLYPHS
  - temperature: format_temperature, c_to_f, round_half_away
  - forecast: current_weather, hourly_forecast, daily_forecast, is_daytime
"""

from weather_lookup.presentation.forecast import (
    current_weather,
    daily_forecast,
    hourly_forecast,
    is_daytime,
)
from weather_lookup.presentation.temperature import (
    MISSING,
    MISSING_DISPLAY,
    c_to_f,
    format_temperature,
    round_half_away,
)
from weather_lookup.presentation.weather_codes import ICON_GLYPHS, condition, describe, icon

__all__ = [
    "ICON_GLYPHS",
    "MISSING",
    "MISSING_DISPLAY",
    "c_to_f",
    "condition",
    "current_weather",
    "daily_forecast",
    "describe",
    "format_temperature",
    "hourly_forecast",
    "icon",
    "is_daytime",
    "round_half_away",
]
