"""Octagon packing: size the smallest octagon holding a given population."""

from __future__ import annotations

import argparse
from pathlib import Path


def octagon_size(inhabitants: int) -> int:
    """Smallest side length whose octagon area reaches the number of inhabitants."""
    size = 1
    while True:
        corner = size * (size + 1) // 2
        area = (size * 3) ** 2 - corner * 4
        if area >= inhabitants:
            return size
        size += 1


def _parse(line: str) -> int:
    return int(line.strip().replace(".", ""))


def part1(text: str) -> int:
    """Octagon side length for the population given in the input."""
    return octagon_size(_parse(text))


def part2(text: str) -> int:
    """Total perimeter of octagons for every population, one per line."""
    return sum(8 * octagon_size(_parse(line)) for line in text.splitlines())


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Size octagons for populations.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    args = parser.parse_args(argv)
    text = Path(args.input).read_text()
    print(part1(text))
    print(part2(text))


if __name__ == "__main__":
    main()