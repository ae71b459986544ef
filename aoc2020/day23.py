"""Crab cups: shuffle a circle of labelled cups."""

from __future__ import annotations

import argparse
from pathlib import Path

PART1_MOVES = 100
PART2_MOVES = 10_000_000
PART2_SIZE = 1_000_000
_MIN_CUPS = 5


def _labels(text: str) -> list[int]:
    labels = [int(char) for char in text.strip()]
    if sorted(labels) != list(range(1, len(labels) + 1)):
        raise ValueError("cup labels must be 1..n, each once")
    return labels


def play(text: str, moves: int = PART1_MOVES, size: int | None = None) -> list[int]:
    """Play the given moves; return the successor of each cup.

    Entry ``n`` of the result is the cup clockwise of cup ``n``; entry 0 is
    the current cup. Cups beyond the labelled ones are numbered upwards up to
    ``size``.
    """
    labels = _labels(text)
    size = len(labels) if size is None else size
    if size < len(labels):
        raise ValueError(f"size {size} is smaller than the {len(labels)} labelled cups")
    if moves > 0 and size < _MIN_CUPS:
        raise ValueError(f"need at least {_MIN_CUPS} cups to play")
    cups = labels + list(range(len(labels) + 1, size + 1))
    successor = [0] * (size + 1)
    for cup, following in zip(cups, cups[1:] + cups[:1]):
        successor[cup] = following
    current = cups[0] if cups else 0
    for _ in range(moves):
        first = successor[current]
        second = successor[first]
        third = successor[second]
        destination = current - 1 or size
        while destination in (first, second, third):
            destination = destination - 1 or size
        successor[current] = successor[third]
        successor[third] = successor[destination]
        successor[destination] = first
        current = successor[current]
    successor[0] = current
    return successor


def part1(text: str) -> str:
    """Labels clockwise after cup 1, after a hundred moves."""
    successor = play(text, PART1_MOVES)
    result = []
    cup = 1
    for _ in range(len(successor) - 2):
        cup = successor[cup]
        result.append(str(cup))
    return "".join(result)


def part2(text: str, moves: int = PART2_MOVES, size: int = PART2_SIZE) -> int:
    """Product of the two cups clockwise of cup 1 in the big game."""
    successor = play(text, moves, size)
    first = successor[1]
    return first * successor[first]


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Play crab cups.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    args = parser.parse_args(argv)
    text = Path(args.input).read_text()
    print(part1(text))
    print(part2(text))


if __name__ == "__main__":
    main()