"""Rambunctious recitation: play the elves' memory game."""

from __future__ import annotations

import argparse
from pathlib import Path

PART1_TURNS = 2020
PART2_TURNS = 30_000_000


def _starting(text: str) -> list[int]:
    return [int(number) for number in text.strip().split(",")]


def _play(numbers: list[int], turns: int) -> int:
    """Number spoken on the given turn (or the last starting one if earlier)."""
    last_seen = {number: turn for turn, number in enumerate(numbers[:-1], start=1)}
    last = numbers[-1]
    for turn in range(len(numbers), turns):
        previous = last_seen.get(last)
        last_seen[last] = turn
        last = 0 if previous is None else turn - previous
    return last


def part1(text: str) -> int:
    """Number spoken on turn 2020."""
    return _play(_starting(text), PART1_TURNS)


def part2(text: str, turns: int = PART2_TURNS) -> int:
    """Number spoken on the given turn, thirty million by default."""
    return _play(_starting(text), turns)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Play the memory game.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    parser.add_argument("--turns", type=int, default=PART2_TURNS, help="turns for part 2")
    args = parser.parse_args(argv)
    text = Path(args.input).read_text()
    print(part1(text))
    print(part2(text, args.turns))


if __name__ == "__main__":
    main()