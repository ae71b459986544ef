"""Binary boarding: decode seat codes into seat ids."""

from __future__ import annotations

import argparse
from pathlib import Path

_TO_BINARY = str.maketrans("BFRL", "1010")


def seat_id(code: str) -> int:
    """Decode a boarding pass such as 'FBFBBFFRLR' into its seat id."""
    return int(code.translate(_TO_BINARY), 2)


def _seat_ids(text: str) -> list[int]:
    return [seat_id(line) for line in text.splitlines()]


def part1(text: str) -> int:
    """Highest seat id on any boarding pass."""
    return max([0, *_seat_ids(text)])


def part2(text: str) -> int:
    """First free seat id between 8 and the highest id minus 8, or 0."""
    ids = set(_seat_ids(text))
    highest = max([0, *ids])
    return next((n for n in range(8, highest - 7) if n not in ids), 0)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Decode boarding passes.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    args = parser.parse_args(argv)
    text = Path(args.input).read_text()
    print(part1(text))
    print(part2(text))


if __name__ == "__main__":
    main()