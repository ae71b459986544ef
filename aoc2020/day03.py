"""Toboggan trajectory: count trees hit on slopes through a repeating map."""

from __future__ import annotations

import argparse
from math import prod
from pathlib import Path

SLOPES = ((1, 1), (3, 1), (5, 1), (7, 1), (1, 2))


def count_trees(text: str, dx: int, dy: int) -> int:
    """Count '#' cells met moving dx right and dy down from the top-left."""
    lines = text.splitlines()
    if not lines:
        return 0
    width = len(lines[0])
    x = 0
    trees = 0
    for y, line in enumerate(lines[1:], start=1):
        if y % dy:
            continue
        x = (x + dx) % width
        if line[x] == "#":
            trees += 1
    return trees


def part1(text: str) -> int:
    """Trees hit on the slope right 3, down 1."""
    return count_trees(text, 3, 1)


def part2(text: str) -> int:
    """Product of trees hit over all the standard slopes."""
    return prod(count_trees(text, dx, dy) for dx, dy in SLOPES)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Count trees on toboggan slopes.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    args = parser.parse_args(argv)
    text = Path(args.input).read_text()
    print(part1(text))
    print(part2(text))


if __name__ == "__main__":
    main()