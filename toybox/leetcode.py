"""Solutions to a few classic array and number puzzles."""

from __future__ import annotations

import argparse


def is_palindrome(x: int) -> bool:
    """Whether the decimal digits of ``x`` read the same both ways."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def generate(num_rows: int) -> list[list[int]]:
    """Return the first ``num_rows`` rows of Pascal's triangle.

    At least one row is always returned.
    """
    triangle = [[1]]
    for _ in range(num_rows - 1):
        previous = triangle[-1]
        inner = [a + b for a, b in zip(previous, previous[1:])]
        triangle.append([1, *inner, 1])
    return triangle


def remove_duplicates(nums: list[int]) -> int:
    """Compact a sorted list in place so its unique values lead it.

    Returns the number of unique values; elements past that count are left
    as they were.
    """
    if not nums:
        return 0
    write = 0
    for value in nums[1:]:
        if value != nums[write]:
            write += 1
            nums[write] = value
    return write + 1


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="leetcode", description="Run one of the puzzle solutions."
    )
    commands = parser.add_subparsers(dest="command")

    palindrome = commands.add_parser("palindrome", help="check a palindrome number")
    palindrome.add_argument("number", type=int)

    pascal = commands.add_parser("pascal", help="print rows of Pascal's triangle")
    pascal.add_argument("rows", type=int)

    dedupe = commands.add_parser("dedupe", help="compact a sorted list of integers")
    dedupe.add_argument("numbers", type=int, nargs="*")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Greet when run bare, or run the puzzle named on the command line."""
    args = _build_parser().parse_args(argv)

    if args.command == "palindrome":
        print(str(is_palindrome(args.number)).lower())
    elif args.command == "pascal":
        for row in generate(args.rows):
            print(" ".join(map(str, row)))
    elif args.command == "dedupe":
        numbers = list(args.numbers)
        count = remove_duplicates(numbers)
        print(count)
        print(" ".join(map(str, numbers[:count])))
    else:
        print("Hello, world!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())