"""Turn a raw Open-Meteo forecast payload into display models.

Every function here tolerates missing keys, short arrays and ``null``
values in the payload: the affected field becomes ``None`` (which formats
as ``--°``) rather than raising.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from weather_lookup.presentation.temperature import parse_temperature, round_half_away
from weather_lookup.presentation.weather_codes import condition, icon
from weather_lookup.schemas import CurrentWeather, DailyForecastItem, HourlyForecastItem

WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

DAY_START_HOUR = 6
NIGHT_START_HOUR = 18


def _at(values: list[Any] | None, index: int) -> Any:
    if not values or index >= len(values):
        return None
    return values[index]


def _rounded(value: Any) -> int | None:
    number = parse_temperature(value)
    return None if number is None else round_half_away(number)


def is_daytime(hour: int) -> bool:
    """True between 06:00 (inclusive) and 18:00 (exclusive)."""
    return DAY_START_HOUR <= hour < NIGHT_START_HOUR


def day_label(index: int, day: str) -> str:
    """``Today``, ``Tomorrow``, then the weekday name of ``day`` (ISO date)."""
    if index == 0:
        return "Today"
    if index == 1:
        return "Tomorrow"
    try:
        return WEEKDAYS[date.fromisoformat(day).weekday()]
    except (TypeError, ValueError):
        return day or "--"


def hour_label(timestamp: str) -> str:
    """``"2026-10-19T08:00"`` -> ``"08:00"``."""
    try:
        return f"{datetime.fromisoformat(timestamp).hour:02d}:00"
    except (TypeError, ValueError):
        return "--:--"


def current_weather(payload: dict[str, Any]) -> CurrentWeather:
    """Extract current conditions from the ``current`` block."""
    current = payload.get("current") or {}
    return CurrentWeather(
        temperature=_rounded(current.get("temperature_2m")),
        condition=condition(current.get("weather_code")),
        humidity=parse_temperature(current.get("relative_humidity_2m")),
        wind_speed=_rounded(current.get("wind_speed_10m")),
        feels_like=_rounded(current.get("apparent_temperature")),
    )


def hourly_forecast(payload: dict[str, Any], limit: int = 12) -> list[HourlyForecastItem]:
    """Next ``limit`` hours from the ``hourly`` block."""
    hourly = payload.get("hourly") or {}
    times: list[str] = (hourly.get("time") or [])[:limit]
    temps = hourly.get("temperature_2m")
    codes = hourly.get("weather_code")

    return [
        HourlyForecastItem(
            time=hour_label(t),
            temp=_rounded(_at(temps, i)),
            icon=icon(_at(codes, i)),
        )
        for i, t in enumerate(times)
    ]


def daily_forecast(payload: dict[str, Any]) -> list[DailyForecastItem]:
    """One entry per day in the ``daily`` block."""
    daily = payload.get("daily") or {}
    days: list[str] = daily.get("time") or []
    highs = daily.get("temperature_2m_max")
    lows = daily.get("temperature_2m_min")
    codes = daily.get("weather_code")

    items = []
    for i, day in enumerate(days):
        code = _at(codes, i)
        items.append(
            DailyForecastItem(
                day=day_label(i, day),
                high=_rounded(_at(highs, i)),
                low=_rounded(_at(lows, i)),
                condition=condition(code),
                icon=icon(code),
            )
        )
    return items
