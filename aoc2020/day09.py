"""Encoding error: find the number breaking the XMAS sum rule and its weakness."""

from __future__ import annotations

import argparse
from itertools import combinations
from pathlib import Path

PREAMBLE = 25


def _scan(text: str, preamble: int) -> tuple[list[int], int]:
    """Return the numbers accepted before the first invalid one, and that number.

    When every number is valid, the last number is returned instead.
    """
    accepted: list[int] = []
    number = 0
    for index, number in enumerate(int(line) for line in text.splitlines()):
        if index >= preamble:
            window = accepted[len(accepted) - preamble:]
            if not any(a + b == number for a, b in combinations(window, 2)):
                break
        accepted.append(number)
    return accepted, number


def part1(text: str, preamble: int = PREAMBLE) -> int:
    """First number that is not the sum of two of the preceding ones."""
    return _scan(text, preamble)[1]


def part2(text: str, preamble: int = PREAMBLE) -> int:
    """Sum of the smallest and largest of a contiguous run adding up to the invalid number."""
    numbers, target = _scan(text, preamble)
    begin = end = total = 0
    while total != target:
        if total > target:
            if begin >= end:
                raise ValueError("no contiguous range sums to the target")
            total -= numbers[begin]
            begin += 1
        else:
            if end >= len(numbers):
                raise ValueError("no contiguous range sums to the target")
            total += numbers[end]
            end += 1
    span = numbers[begin:end]
    if not span:
        raise ValueError("the contiguous range is empty")
    return min(span) + max(span)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Find the XMAS encoding weakness.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    parser.add_argument("--preamble", type=int, default=PREAMBLE, help="preamble length")
    args = parser.parse_args(argv)
    text = Path(args.input).read_text()
    print(part1(text, args.preamble))
    print(part2(text, args.preamble))


if __name__ == "__main__":
    main()