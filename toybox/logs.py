"""Print a log file line by line."""

from __future__ import annotations

import sys
from pathlib import Path

DEFAULT_LOG_FILE = "logs.txt"


def read_lines(path: str | Path) -> list[str]:
    """Read ``path`` and split its text on newline characters."""
    with open(path, encoding="utf-8", newline="") as handle:
        return handle.read().split("\n")


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else DEFAULT_LOG_FILE
    try:
        lines = read_lines(path)
    except OSError as error:
        print(f"Failed to read file: {error}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())