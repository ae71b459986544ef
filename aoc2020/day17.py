"""Conway cubes: run a three or four dimensional game of life."""

from __future__ import annotations

import argparse
from collections import Counter
from itertools import product
from pathlib import Path

CYCLES = 6

Cell = tuple[int, ...]


def _parse(text: str, dimensions: int) -> set[Cell]:
    if dimensions < 2:
        raise ValueError(f"need at least two dimensions, got {dimensions}")
    padding = (0,) * (dimensions - 2)
    return {
        (x, y, *padding)
        for y, line in enumerate(text.splitlines())
        for x, cell in enumerate(line)
        if cell == "#"
    }


def _step(active: set[Cell], offsets: list[Cell]) -> set[Cell]:
    neighbours = Counter(
        tuple(c + d for c, d in zip(cell, offset)) for cell in active for offset in offsets
    )
    return {
        cell
        for cell, count in neighbours.items()
        if count == 3 or (count == 2 and cell in active)
    }


def simulate(text: str, dimensions: int = 3, cycles: int = CYCLES) -> int:
    """Number of active cubes after the given cycles in the given dimensions."""
    active = _parse(text, dimensions)
    offsets = [offset for offset in product((-1, 0, 1), repeat=dimensions) if any(offset)]
    for _ in range(cycles):
        active = _step(active, offsets)
    return len(active)


def part1(text: str) -> int:
    """Active cubes after six cycles in three dimensions."""
    return simulate(text, 3, CYCLES)


def part2(text: str) -> int:
    """Active cubes after six cycles in four dimensions."""
    return simulate(text, 4, CYCLES)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Simulate the pocket dimension.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    args = parser.parse_args(argv)
    text = Path(args.input).read_text()
    print(part1(text))
    print(part2(text))


if __name__ == "__main__":
    main()