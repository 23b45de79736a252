"""WMO weather code interpretation.

Pure lookups with no external dependencies. Both ``condition`` and ``icon``
are total: any integer (negative, above 99, or simply undefined in the WMO
table) resolves to the fallback instead of raising.
"""

from __future__ import annotations

from collections.abc import Container

from weather_lookup.schemas import Icon

UNKNOWN_CONDITION = "Unknown"
FALLBACK_ICON = Icon.SUNNY

# WMO Weather Interpretation Codes (https://open-meteo.com/en/docs)
WMO_CONDITIONS: dict[int, str] = {
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Fog",
    48: "Depositing rime fog",
    51: "Light drizzle",
    53: "Moderate drizzle",
    55: "Dense drizzle",
    56: "Light freezing drizzle",
    57: "Dense freezing drizzle",
    61: "Slight rain",
    63: "Moderate rain",
    65: "Heavy rain",
    66: "Light freezing rain",
    67: "Heavy freezing rain",
    71: "Slight snow fall",
    73: "Moderate snow fall",
    75: "Heavy snow fall",
    77: "Snow grains",
    80: "Slight rain showers",
    81: "Moderate rain showers",
    82: "Violent rain showers",
    85: "Slight snow showers",
    86: "Heavy snow showers",
    95: "Thunderstorm",
    96: "Thunderstorm with slight hail",
    99: "Thunderstorm with heavy hail",
}

# Rows are disjoint; anything not covered falls back to FALLBACK_ICON.
WMO_ICONS: tuple[tuple[Container[int], Icon], ...] = (
    (range(0, 2), Icon.SUNNY),
    (range(2, 4), Icon.CLOUD),
    ((45, 48), Icon.FOG),
    (range(51, 68), Icon.RAIN),
    (range(71, 78), Icon.SNOW),
    (range(80, 83), Icon.RAIN),
    (range(85, 87), Icon.SNOW),
    ((95, 96, 99), Icon.STORM),
)

#: Terminal-friendly glyph for each icon.
ICON_GLYPHS: dict[Icon, str] = {
    Icon.SUNNY: "☀️",
    Icon.CLOUD: "☁️",
    Icon.FOG: "\U0001f32b️",
    Icon.RAIN: "\U0001f327️",
    Icon.SNOW: "\U0001f328️",
    Icon.STORM: "⛈️",
}


def condition(code: int) -> str:
    """Convert a WMO weather code to a human-readable condition label."""
    return WMO_CONDITIONS.get(code, UNKNOWN_CONDITION)


def icon(code: int) -> Icon:
    """Convert a WMO weather code to its display icon."""
    for codes, glyph in WMO_ICONS:
        if code in codes:
            return glyph
    return FALLBACK_ICON


def describe(code: int) -> tuple[str, Icon]:
    """Return ``(condition, icon)`` for a weather code."""
    return condition(code), icon(code)
