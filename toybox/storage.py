"""An append-only file of length-prefixed key/value records."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import BinaryIO

_LENGTH_SIZE = 8


class Storage:
    """Records are stored as 8-byte big-endian lengths followed by UTF-8 text."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = path

    def append(self, key: str, value: str) -> None:
        """Append one key/value record to the end of the file."""
        with open(self.path, "ab") as handle:
            for text in (key, value):
                encoded = text.encode("utf-8")
                handle.write(len(encoded).to_bytes(_LENGTH_SIZE, "big"))
                handle.write(encoded)

    def open_reader(self) -> BinaryIO:
        """Create the file if needed and open it for reading from the start."""
        with open(self.path, "ab"):
            pass
        return open(self.path, "rb")

    def read_record(self, file: BinaryIO) -> tuple[str, str] | None:
        """Read the next record from ``file``, or ``None`` if none is complete."""
        key = self._read_text(file)
        if key is None:
            return None
        value = self._read_text(file)
        if value is None:
            return None
        return key, value

    def records(self) -> Iterator[tuple[str, str]]:
        """Yield every complete record in the file, oldest first."""
        with self.open_reader() as file:
            while (record := self.read_record(file)) is not None:
                yield record

    @staticmethod
    def _read_text(file: BinaryIO) -> str | None:
        prefix = file.read(_LENGTH_SIZE)
        if len(prefix) != _LENGTH_SIZE:
            return None
        size = int.from_bytes(prefix, "big")
        data = file.read(size)
        if len(data) != size:
            return None
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError:
            return None