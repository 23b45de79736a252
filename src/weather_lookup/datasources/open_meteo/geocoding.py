"""City name -> coordinates via the Open-Meteo Geocoding API."""

from __future__ import annotations

import logging
from typing import Any

from weather_lookup.datasources.open_meteo.client import GEOCODING_LANGUAGE, OPEN_METEO_GEOCODING
from weather_lookup.schemas import Location
from weather_lookup.services.http import session

logger = logging.getLogger(__name__)


class LocationNotFoundError(LookupError):
    """The geocoder returned no match for a place name."""

    def __init__(self, query: str) -> None:
        super().__init__(f"Location not found: {query!r}")
        self.query = query


def display_name(result: dict[str, Any]) -> str:
    """Build ``"Dublin, Leinster, Ireland"`` from a geocoding result.

    The admin region is left out when the API doesn't return one.
    """
    parts = [result["name"]]
    if result.get("admin1"):
        parts.append(result["admin1"])
    if result.get("country"):
        parts.append(result["country"])
    return ", ".join(parts)


def to_location(result: dict[str, Any]) -> Location:
    """Normalize one geocoding result to a ``Location``."""
    return Location(
        name=display_name(result),
        lat=result["latitude"],
        lon=result["longitude"],
    )


def search(name: str, count: int = 1) -> list[dict[str, Any]]:
    """
    Query the geocoding API.

    Args:
        name: Free-text place name.
        count: Maximum number of results.

    Returns:
        Raw ``results`` list (empty when nothing matched).
    """
    params: dict[str, str | int] = {
        "name": name,
        "count": count,
        "language": GEOCODING_LANGUAGE,
        "format": "json",
    }
    resp = session.get(OPEN_METEO_GEOCODING, params=params)
    resp.raise_for_status()
    data: dict[str, Any] = resp.json()
    results: list[dict[str, Any]] = data.get("results") or []
    return results


def geocode(name: str) -> Location:
    """Resolve a place name to its best match.

    Raises:
        LocationNotFoundError: The API returned no results.
        requests.RequestException: Network or HTTP failure.
    """
    query = name.strip()
    if not query:
        raise LocationNotFoundError(name)

    results = search(query, count=1)
    if not results:
        raise LocationNotFoundError(query)

    loc = to_location(results[0])
    logger.debug("Geocoded %r -> %s (%.4f, %.4f)", query, loc.name, loc.lat, loc.lon)
    return loc


def suggest(query: str, count: int = 5) -> list[Location]:
    """Autocomplete suggestions for a partially typed place name.

    A blank query returns no suggestions without calling the API.
    """
    if not query.strip():
        return []
    return [to_location(r) for r in search(query.strip(), count=count)]
