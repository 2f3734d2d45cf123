"""Persistent key/value preferences.

Preferences live in a single JSON file wrapped in a metadata envelope::

    {"meta": {"updated_at": "2026-10-19T08:00:00+00:00"}, "data": {"theme": "dark"}}

Only string keys and string values are stored. Anything satisfying the
``KeyValueStore`` protocol can stand in for the file store (tests use an
in-memory dict).
"""

from __future__ import annotations

import json
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from pathlib import Path


class StoreError(Exception):
    """The preference file exists but cannot be used."""


class KeyValueStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class JsonFileStore:
    """Key/value store backed by one JSON file."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def get(self, key: str) -> str | None:
        """Return the stored value, or None if the key or file is missing."""
        value = self._read_data().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        """Write ``key`` and flush the whole file.

        Raises:
            StoreError: The existing file is not a JSON envelope.
            OSError: The file or its directory cannot be written.
        """
        data = self._read_data()
        data[key] = value

        envelope = {
            "meta": {"updated_at": datetime.now(UTC).isoformat()},
            "data": data,
        }
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as f:
            json.dump(envelope, f, indent=2)

    def _read_data(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open(encoding="utf-8") as f:
                envelope = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            msg = f"Preference file is not valid JSON: {self.path}"
            raise StoreError(msg) from exc

        data = envelope.get("data") if isinstance(envelope, dict) else None
        if not isinstance(data, dict):
            msg = f"Preference file has no data section: {self.path}"
            raise StoreError(msg)
        return data
