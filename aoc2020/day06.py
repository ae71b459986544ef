"""Custom customs: count answered questions per group."""

from __future__ import annotations

import argparse
from collections import Counter
from pathlib import Path


def part1(text: str) -> int:
    """Sum over groups of questions anyone answered."""
    return sum(len(set(group.replace("\n", ""))) for group in text.split("\n\n"))


def part2(text: str) -> int:
    """Sum over groups of questions answered as many times as there are people."""
    total = 0
    for group in text.strip().split("\n\n"):
        people = group.split("\n")
        answers = Counter("".join(people))
        total += sum(1 for count in answers.values() if count == len(people))
    return total


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Count customs declaration answers.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    args = parser.parse_args(argv)
    text = Path(args.input).read_text()
    print(part1(text))
    print(part2(text))


if __name__ == "__main__":
    main()