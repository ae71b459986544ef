"""Shuttle search: pick the earliest bus and find the aligned timestamp."""

from __future__ import annotations

import argparse
from pathlib import Path


def _schedule(text: str) -> tuple[str, list[str]]:
    first, sep, rest = text.partition("\n")
    if not sep:
        raise ValueError("expected a timestamp line and a bus line")
    return first, rest.strip().split(",")


def part1(text: str) -> int:
    """Id of the earliest departing bus times the minutes waited for it."""
    first, ids = _schedule(text)
    start = int(first)
    best: tuple[int, int] | None = None
    for bus_id in ids:
        if bus_id == "x":
            continue
        bus = int(bus_id)
        wait = (bus - start % bus) % bus
        if best is None or wait < best[1]:
            best = (bus, wait)
    return 0 if best is None else best[0] * best[1]


def part2(text: str) -> int:
    """Earliest time at which each bus leaves its list offset minutes later."""
    _, ids = _schedule(text)
    step = 1
    time = 0
    for offset, bus_id in enumerate(ids):
        if bus_id == "x":
            continue
        bus = int(bus_id)
        while (time + offset) % bus:
            time += step
        step *= bus
    return time


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Search the shuttle schedule.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    args = parser.parse_args(argv)
    text = Path(args.input).read_text()
    print(part1(text))
    print(part2(text))


if __name__ == "__main__":
    main()