"""Most-recently-used search history.

The history is a short list of ``Location`` records, newest first, with no
two entries sharing a ``name``. It lives in the caller's session and is
persisted as a JSON array under ``HISTORY_KEY`` in a ``KeyValueStore``.

Two persisted shapes exist in the wild::

    ["Paris", "Tokyo"]                                   # legacy, names only
    [{"name": "Paris", "lat": 48.85, "lon": 2.35}, ...]  # current

``load()`` accepts both and upgrades legacy names to ``lat=0, lon=0``.

Persistence never raises to the caller: read failures and malformed blobs
load as an empty history, write and delete failures are logged and the
in-memory history carries on.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from weather_lookup.schemas import Location, SearchHistory
from weather_lookup.store import StoreError

if TYPE_CHECKING:
    from weather_lookup.store import KeyValueStore

logger = logging.getLogger(__name__)

HISTORY_KEY = "weather_search_history"
MAX_HISTORY = 5


def record(history: SearchHistory, loc: Location) -> SearchHistory:
    """Return a new history with ``loc`` at the front.

    Any earlier entry with the same name is dropped (the new coordinates
    win) and the result is capped at ``MAX_HISTORY``. ``history`` itself is
    not modified.
    """
    rest = [item for item in history if item.name != loc.name]
    return [loc, *rest][:MAX_HISTORY]


def normalize(history: list[Location]) -> SearchHistory:
    """Drop repeated names (first one wins) and cap the length."""
    seen: set[str] = set()
    result: SearchHistory = []
    for item in history:
        if item.name in seen:
            continue
        seen.add(item.name)
        result.append(item)
    return result[:MAX_HISTORY]


def _upgrade_entry(entry: Any) -> Location:
    if isinstance(entry, str):
        return Location(name=entry, lat=0, lon=0)
    return Location.model_validate(entry)


def deserialize(raw: bytes | str) -> SearchHistory:
    """Parse a persisted history blob, upgrading legacy name-only entries.

    Raises:
        ValueError: The blob is not JSON or is not a JSON array.
    """
    parsed = json.loads(raw)
    if not isinstance(parsed, list):
        msg = f"Expected a JSON array, got {type(parsed).__name__}"
        raise ValueError(msg)

    entries: list[Location] = []
    for entry in parsed:
        try:
            loc = _upgrade_entry(entry)
        except ValidationError:
            logger.warning("Skipping malformed history entry: %r", entry)
            continue
        entries.append(loc)
    return normalize(entries)


def serialize(history: SearchHistory) -> bytes:
    """Encode a history as the current ``[{name, lat, lon}, ...]`` form."""
    return json.dumps([loc.model_dump() for loc in history]).encode("utf-8")


class SearchHistoryStore:
    """Loads, saves and clears the search history in a key-value store."""

    def __init__(self, store: KeyValueStore, key: str = HISTORY_KEY) -> None:
        self.store = store
        self.key = key

    def load(self) -> SearchHistory:
        """Read the persisted history. Anything unreadable loads as empty."""
        try:
            raw = self.store.get(self.key)
        except StoreError:
            logger.warning("Failed to load search history", exc_info=True)
            return []
        if raw is None:
            return []

        try:
            return deserialize(raw)
        except (ValueError, RecursionError):
            logger.warning("Discarding unreadable search history blob", exc_info=True)
            return []

    def save(self, history: SearchHistory) -> bool:
        """Persist ``history``. Returns False if the write failed."""
        try:
            self.store.set(self.key, serialize(history))
        except StoreError:
            logger.warning("Failed to save search history", exc_info=True)
            return False
        return True

    def push(self, history: SearchHistory, loc: Location) -> SearchHistory:
        """Record ``loc`` and persist the result.

        The updated history is returned even if persisting it failed.
        """
        updated = record(history, loc)
        self.save(updated)
        return updated

    def clear(self) -> SearchHistory:
        """Delete the persisted history and return an empty one."""
        try:
            self.store.delete(self.key)
        except StoreError:
            logger.warning("Failed to clear search history", exc_info=True)
        return []

    def record(self, history: SearchHistory, loc: Location) -> SearchHistory:
        """Same as the module-level :func:`record`; nothing is persisted."""
        return record(history, loc)
