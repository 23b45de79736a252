"""Temperature display formatting.

Readings from Open-Meteo are always degrees Celsius; the unit preference is
owned by the caller and passed in on every call.
"""

from __future__ import annotations

import math

#: Literal marker the screen uses for "no reading yet".
MISSING = "--"
MISSING_DISPLAY = "--°"

Temperature = float | int | str | None


def c_to_f(celsius: float) -> float:
    """Convert Celsius to Fahrenheit."""
    return celsius * 9 / 5 + 32


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero (32.5 -> 33, -0.5 -> -1)."""
    magnitude = abs(value)
    whole = math.floor(magnitude)
    # Compare the exact fractional part; adding 0.5 first can round up.
    if magnitude - whole >= 0.5:
        whole += 1
    return int(math.copysign(whole, value))


def parse_temperature(temp: Temperature) -> float | None:
    """Return the numeric reading, or None for the missing sentinel.

    ``None``, ``"--"``, NaN, booleans and unparseable strings are all missing.
    """
    if temp is None or isinstance(temp, bool):
        return None
    if isinstance(temp, str) and temp.strip() == MISSING:
        return None
    try:
        value = float(temp)
    except (TypeError, ValueError):
        return None
    if math.isnan(value) or math.isinf(value):
        return None
    return value


def _as_supplied(value: float) -> str:
    if value.is_integer():
        return str(int(value))
    return str(value)


def format_temperature(temp: Temperature, is_celsius: bool = True) -> str:
    """Render a Celsius reading as ``25°C`` or ``77°F``.

    Celsius values are shown as supplied; Fahrenheit values are converted
    and rounded with :func:`round_half_away`. Missing readings render as
    ``--°`` regardless of unit.
    """
    value = parse_temperature(temp)
    if value is None:
        return MISSING_DISPLAY
    if is_celsius:
        return f"{_as_supplied(value)}°C"
    return f"{round_half_away(c_to_f(value))}°F"
