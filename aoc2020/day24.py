"""Lobby layout: flip hexagonal tiles and let them evolve."""

from __future__ import annotations

import argparse
from collections import Counter
from pathlib import Path

Hex = tuple[int, int]

DAYS = 100

# Pointy-top axial coordinates.
_STEPS: dict[str, Hex] = {
    "nw": (0, -1),
    "ne": (1, -1),
    "w": (-1, 0),
    "e": (1, 0),
    "sw": (-1, 1),
    "se": (0, 1),
}
_NEIGHBOURS = tuple(_STEPS.values())


def locate(line: str) -> Hex:
    """Axial coordinates reached by following the directions in the line."""
    q = r = 0
    chars = iter(line)
    for char in chars:
        if char in ("n", "s"):
            following = next(chars, None)
            if following is None:
                raise ValueError(f"direction cut short in {line!r}")
            dq, dr = _STEPS.get(char + following, (0, 0))
        else:
            dq, dr = _STEPS.get(char, (0, 0))
        q += dq
        r += dr
    return q, r


def initial_black_tiles(text: str) -> set[Hex]:
    """Tiles flipped an odd number of times by the input lines."""
    black: set[Hex] = set()
    for line in text.splitlines():
        black ^= {locate(line)}
    return black


def _step(black: set[Hex]) -> set[Hex]:
    counts = Counter(
        (q + dq, r + dr) for q, r in black for dq, dr in _NEIGHBOURS
    )
    return {
        tile
        for tile, count in counts.items()
        if count == 2 or (count == 1 and tile in black)
    }


def part1(text: str) -> int:
    """Number of black tiles after following every line."""
    return len(initial_black_tiles(text))


def part2(text: str, days: int = DAYS) -> int:
    """Number of black tiles after the given days of flipping."""
    black = initial_black_tiles(text)
    for _ in range(days):
        black = _step(black)
    return len(black)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Lay out the lobby floor.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    parser.add_argument("--days", type=int, default=DAYS, help="days for part 2")
    args = parser.parse_args(argv)
    text = Path(args.input).read_text()
    print(part1(text))
    print(part2(text, args.days))


if __name__ == "__main__":
    main()