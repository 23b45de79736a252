"""Weather Lookup - city search, forecasts and a recent-searches list.

Architecture::

    datasources/   External APIs (Open-Meteo geocoding and forecast)
    presentation/  Pure data -> display values (WMO codes, temperatures, forecast rows)
    history.py     Most-recently-used search history (5 entries, deduplicated by name)
    store.py       Opaque key-value blob storage (file or in-memory)
    lookup.py      Search -> geocode -> forecast for one location
    services/      Shared utilities (HTTP session with default timeout)

Data flow: user query -> lookup (geocode + fetch) -> presentation -> CLI,
with each successful search recorded in history -> store.
"""

__version__ = "0.1.0"

from weather_lookup.config import Settings
from weather_lookup.schemas import Icon, Location

__all__ = ["Icon", "Location", "Settings", "__version__"]
