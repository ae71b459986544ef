"""Ticket translation: validate tickets and work out which column is which field."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from math import prod
from pathlib import Path

Range = tuple[int, int]


@dataclass
class Notes:
    """Field rules, our own ticket and the nearby tickets."""

    fields: dict[str, list[Range]] = field(default_factory=dict)
    ticket: list[int] = field(default_factory=list)
    nearby: list[list[int]] = field(default_factory=list)


def _parse_range(text: str) -> Range:
    bounds = text.split("-")
    if len(bounds) < 2:
        raise ValueError(f"malformed range: {text!r}")
    return int(bounds[0]), int(bounds[1])


def _parse_numbers(line: str) -> list[int]:
    return [int(number) for number in line.split(",")]


def parse_notes(text: str) -> Notes:
    """Parse the rules, 'your ticket' and 'nearby tickets' sections."""
    sections = text.strip().split("\n\n")
    if len(sections) < 3:
        raise ValueError("expected rules, your ticket and nearby tickets")
    fields: dict[str, list[Range]] = {}
    for line in sections[0].split("\n"):
        name, sep, ranges = line.partition(": ")
        if not sep:
            raise ValueError(f"malformed rule: {line!r}")
        fields[name] = [_parse_range(part) for part in ranges.split(" or ")]
    ticket = [n for line in sections[1].split("\n")[1:] for n in _parse_numbers(line)]
    nearby = [_parse_numbers(line) for line in sections[2].split("\n")[1:]]
    return Notes(fields, ticket, nearby)


def _in_ranges(number: int, ranges: list[Range]) -> bool:
    return any(low <= number <= high for low, high in ranges)


def _fits_any(notes: Notes, number: int) -> bool:
    return any(_in_ranges(number, ranges) for ranges in notes.fields.values())


def resolve_fields(notes: Notes) -> dict[str, int]:
    """Map field names to ticket columns using only the valid nearby tickets."""
    count = len(notes.fields)
    options = {column: set(notes.fields) for column in range(count)}
    valid = (t for t in notes.nearby if all(_fits_any(notes, n) for n in t))
    for ticket in valid:
        for column, number in enumerate(ticket):
            if column not in options:
                continue
            for name, ranges in notes.fields.items():
                if not _in_ranges(number, ranges):
                    options[column].discard(name)
    mapping: dict[str, int] = {}
    for _ in range(count):
        for column in range(count):
            if len(options[column]) == 1:
                name = next(iter(options[column]))
                mapping[name] = column
                for remaining in options.values():
                    remaining.discard(name)
    return mapping


def part1(text: str) -> int:
    """Sum of nearby ticket values that fit no field at all."""
    notes = parse_notes(text)
    return sum(n for ticket in notes.nearby for n in ticket if not _fits_any(notes, n))


def part2(text: str) -> int:
    """Product of our ticket's values in the fields named 'departure ...'."""
    notes = parse_notes(text)
    return prod(
        notes.ticket[column]
        for name, column in resolve_fields(notes).items()
        if len(name) > 9 and name.startswith("departure")
    )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Translate train tickets.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    args = parser.parse_args(argv)
    text = Path(args.input).read_text()
    print(part1(text))
    print(part2(text))


if __name__ == "__main__":
    main()