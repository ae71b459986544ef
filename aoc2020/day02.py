"""Password philosophy: check passwords against their policies."""

from __future__ import annotations

import argparse
import re
from pathlib import Path

_POLICY = re.compile(r"(\d+)-(\d+) ([a-z]): ([a-z]+)")


def _policies(text: str):
    for match in _POLICY.finditer(text):
        yield int(match[1]), int(match[2]), match[3], match[4]


def _char_at(password: str, position: int) -> str | None:
    if position < 1:
        raise ValueError(f"positions are 1-based, got {position}")
    return password[position - 1] if position <= len(password) else None


def part1(text: str) -> int:
    """Count passwords whose letter count lies within the policy range."""
    return sum(
        1
        for low, high, letter, password in _policies(text)
        if low <= password.count(letter) <= high
    )


def part2(text: str) -> int:
    """Count passwords with the letter at exactly one of the two positions."""
    return sum(
        1
        for first, second, letter, password in _policies(text)
        if (_char_at(password, first) == letter) != (_char_at(password, second) == letter)
    )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Validate passwords against policies.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    args = parser.parse_args(argv)
    text = Path(args.input).read_text()
    print(part1(text))
    print(part2(text))


if __name__ == "__main__":
    main()