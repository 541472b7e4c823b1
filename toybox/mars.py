"""Convert a weight on Earth to the corresponding weight on Mars."""

from __future__ import annotations

import sys

EARTH_GRAVITY = 9.81
MARS_GRAVITY = 3.711


def calculate_weight_on_mars(weight: float) -> float:
    """Return the weight an object of Earth weight ``weight`` has on Mars."""
    return (weight / EARTH_GRAVITY) * MARS_GRAVITY


def main(argv: list[str] | None = None) -> int:
    print("Enter your weight (kg): ")
    line = sys.stdin.readline()
    try:
        weight = float(line.strip())
    except ValueError:
        print(f"Invalid weight: {line.strip()!r}", file=sys.stderr)
        return 1
    print(f"Weight on Mars: {calculate_weight_on_mars(weight)}kg")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())