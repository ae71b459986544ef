"""Adapter array: chain joltage adapters and count arrangements."""

from __future__ import annotations

import argparse
from pathlib import Path


def _adapters(text: str) -> list[int]:
    return sorted(int(line) for line in text.splitlines())


def part1(text: str) -> int:
    """Number of 1-jolt differences times number of 3-jolt differences."""
    ones = threes = 0
    current = 0
    for adapter in _adapters(text):
        if current + 1 <= adapter <= current + 3:
            if adapter == current + 1:
                ones += 1
            elif adapter == current + 3:
                threes += 1
            current = adapter
    return ones * (threes + 1)


def part2(text: str) -> int:
    """Number of distinct adapter arrangements from the outlet to the device."""
    joltages = [0, *_adapters(text)]
    joltages.append(joltages[-1] + 3)
    ways = [1] + [0] * (len(joltages) - 1)
    for index, joltage in enumerate(joltages):
        ways[index] += sum(
            ways[index - step]
            for step in range(1, 4)
            if index >= step and joltage - joltages[index - step] <= 3
        )
    return ways[-1]


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Analyse joltage adapters.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    args = parser.parse_args(argv)
    text = Path(args.input).read_text()
    print(part1(text))
    print(part2(text))


if __name__ == "__main__":
    main()