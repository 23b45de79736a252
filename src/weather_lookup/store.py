"""Opaque key-value blob storage.

The search history (and anything else the app wants to survive a restart)
is persisted as a single bytes value under a fixed key. The store knows
nothing about what the bytes mean.

Two backends:
  - FileBlobStore: one file per key under a base directory
  - MemoryBlobStore: dict-backed, for one-off sessions and tests

Every backend failure is raised as ``StoreError`` so callers have a single
exception to recover from.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pathlib import Path


class StoreError(Exception):
    """A blob could not be read, written or deleted."""


class KeyValueStore(Protocol):
    """Minimal interface the history layer needs from a durable store."""

    def get(self, key: str) -> bytes | None: ...

    def set(self, key: str, value: bytes) -> None: ...

    def delete(self, key: str) -> None: ...


class FileBlobStore:
    """Stores each key as ``<base_dir>/<key>.json``."""

    suffix = ".json"

    def __init__(self, base_dir: Path) -> None:
        self.base = base_dir

    def get(self, key: str) -> bytes | None:
        """Return the stored bytes, or None if the key was never written."""
        full = self._resolve(key)
        try:
            return full.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as e:
            msg = f"Could not read {key!r} from {full}"
            raise StoreError(msg) from e

    def set(self, key: str, value: bytes) -> None:
        """Write ``value`` under ``key``, replacing any previous value."""
        full = self._resolve(key)
        try:
            full.parent.mkdir(parents=True, exist_ok=True)
            full.write_bytes(value)
        except OSError as e:
            msg = f"Could not write {key!r} to {full}"
            raise StoreError(msg) from e

    def delete(self, key: str) -> None:
        """Remove ``key``. Deleting a missing key is a no-op."""
        full = self._resolve(key)
        try:
            full.unlink(missing_ok=True)
        except OSError as e:
            msg = f"Could not delete {key!r} at {full}"
            raise StoreError(msg) from e

    def path_for(self, key: str) -> Path:
        """Absolute location of the file backing ``key``."""
        return self._resolve(key)

    def _resolve(self, key: str) -> Path:
        full = self.base / f"{key}{self.suffix}"
        try:
            full.resolve().relative_to(self.base.resolve())
        except ValueError:
            msg = f"Key escapes store base directory: {key}"
            raise ValueError(msg) from None
        return full


class MemoryBlobStore:
    """In-process store; contents vanish with the process."""

    def __init__(self, initial: dict[str, bytes] | None = None) -> None:
        self._data: dict[str, bytes] = dict(initial or {})

    def get(self, key: str) -> bytes | None:
        return self._data.get(key)

    def set(self, key: str, value: bytes) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self._data
