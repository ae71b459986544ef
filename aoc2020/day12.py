"""Rain risk: navigate a ferry by compass and waypoint instructions."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from pathlib import Path

Vector = tuple[int, int]


def _instructions(text: str) -> Iterator[tuple[str, int]]:
    for line in text.splitlines():
        if not line:
            raise ValueError("empty instruction")
        yield line[0], int(line[1:])


def _rotate(vector: Vector, letter: str, angle: int) -> Vector:
    x, y = vector
    match (letter, angle):
        case ("L", 90) | ("R", 270):
            return y, -x
        case ("R", 90) | ("L", 270):
            return -y, x
        case ("L", 180) | ("R", 180):
            return -x, -y
    raise ValueError(f"unexpected angle: {angle}")


def _move(vector: Vector, letter: str, amount: int) -> Vector:
    x, y = vector
    match letter:
        case "N":
            return x, y - amount
        case "S":
            return x, y + amount
        case "E":
            return x + amount, y
        case "W":
            return x - amount, y
    return vector


def part1(text: str) -> int:
    """Manhattan distance after steering the ship itself."""
    position: Vector = (0, 0)
    direction: Vector = (1, 0)
    for letter, amount in _instructions(text):
        if letter in ("L", "R"):
            direction = _rotate(direction, letter, amount)
        elif letter == "F":
            position = (position[0] + direction[0] * amount, position[1] + direction[1] * amount)
        else:
            position = _move(position, letter, amount)
    return abs(position[0]) + abs(position[1])


def part2(text: str) -> int:
    """Manhattan distance after steering by a waypoint relative to the ship."""
    position: Vector = (0, 0)
    waypoint: Vector = (10, -1)
    for letter, amount in _instructions(text):
        if letter in ("L", "R"):
            waypoint = _rotate(waypoint, letter, amount)
        elif letter == "F":
            position = (position[0] + waypoint[0] * amount, position[1] + waypoint[1] * amount)
        else:
            waypoint = _move(waypoint, letter, amount)
    return abs(position[0]) + abs(position[1])


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Navigate the ferry.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    args = parser.parse_args(argv)
    text = Path(args.input).read_text()
    print(part1(text))
    print(part2(text))


if __name__ == "__main__":
    main()