"""Report repair: find entries that sum to 2020 and multiply them."""

from __future__ import annotations

import argparse
from itertools import product
from math import prod
from pathlib import Path

TARGET = 2020


def _numbers(text: str) -> list[int]:
    return [int(line) for line in text.splitlines()]


def _find_product(text: str, count: int) -> int:
    numbers = _numbers(text)
    for combo in product(numbers, repeat=count):
        if sum(combo) == TARGET:
            return prod(combo)
    raise ValueError(f"no {count} entries sum to {TARGET}")


def part1(text: str) -> int:
    """Product of the first two entries (in input order) summing to 2020."""
    return _find_product(text, 2)


def part2(text: str) -> int:
    """Product of the first three entries (in input order) summing to 2020."""
    return _find_product(text, 3)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Find expense entries summing to 2020.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    args = parser.parse_args(argv)
    text = Path(args.input).read_text()
    print(part1(text))
    print(part2(text))


if __name__ == "__main__":
    main()