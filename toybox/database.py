"""A key/value store kept in memory and backed by an append-only file."""

from __future__ import annotations

import os

from toybox.storage import Storage


class Database:
    """String keys mapped to string values; later writes win."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._storage = Storage(path)
        self._data: dict[str, str] = dict(self._storage.records())

    def put(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, on disk and in memory."""
        self._storage.append(key, value)
        self._data[key] = value

    def get(self, key: str) -> str | None:
        """Return the value stored under ``key``, or ``None``."""
        return self._data.get(key)