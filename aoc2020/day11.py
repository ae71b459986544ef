"""Seating system: simulate passengers taking and leaving seats until stable."""

from __future__ import annotations

import argparse
from pathlib import Path

Seat = tuple[int, int]

DIRECTIONS = tuple(
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)
)


def _parse(text: str) -> tuple[set[Seat], int]:
    """Return the empty seats and the side of the square that bounds the map."""
    seats: set[Seat] = set()
    max_x = max_y = 0
    for y, line in enumerate(text.splitlines()):
        max_y = max(max_y, y)
        for x, cell in enumerate(line):
            max_x = max(max_x, x)
            if cell == "L":
                seats.add((x, y))
    return seats, max(max_x, max_y) + 1


def _adjacent(seats: set[Seat]) -> dict[Seat, list[Seat]]:
    return {
        (x, y): [(x + dx, y + dy) for dx, dy in DIRECTIONS if (x + dx, y + dy) in seats]
        for x, y in seats
    }


def _first_visible(seats: set[Seat], size: int, seat: Seat, dx: int, dy: int) -> Seat | None:
    x, y = seat
    for distance in range(1, size):
        nx, ny = x + dx * distance, y + dy * distance
        if not (0 <= nx < size and 0 <= ny < size):
            return None
        if (nx, ny) in seats:
            return nx, ny
    return None


def _visible(seats: set[Seat], size: int) -> dict[Seat, list[Seat]]:
    neighbours: dict[Seat, list[Seat]] = {}
    for seat in seats:
        found = (_first_visible(seats, size, seat, dx, dy) for dx, dy in DIRECTIONS)
        neighbours[seat] = [other for other in found if other is not None]
    return neighbours


def _settle(neighbours: dict[Seat, list[Seat]], tolerance: int) -> int:
    """Apply the seating rules until nothing changes; return the occupied count."""
    occupied: set[Seat] = set()
    while True:
        following: set[Seat] = set()
        for seat, others in neighbours.items():
            busy = sum(1 for other in others if other in occupied)
            if seat in occupied:
                if busy < tolerance:
                    following.add(seat)
            elif busy == 0:
                following.add(seat)
        if following == occupied:
            return len(occupied)
        occupied = following


def part1(text: str) -> int:
    """Occupied seats once stable, judging by the eight adjacent cells."""
    seats, _ = _parse(text)
    return _settle(_adjacent(seats), 4)


def part2(text: str) -> int:
    """Occupied seats once stable, judging by the first seat seen each way."""
    seats, size = _parse(text)
    return _settle(_visible(seats, size), 5)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Simulate the ferry seating system.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    args = parser.parse_args(argv)
    text = Path(args.input).read_text()
    print(part1(text))
    print(part2(text))


if __name__ == "__main__":
    main()