"""Docking data: apply bitmasks to values and to memory addresses."""

from __future__ import annotations

import argparse
import re
from collections.abc import Iterator
from itertools import product
from pathlib import Path

_LINE = re.compile(r"(mask = ([X01]+)|mem\[([0-9]+)\] = ([0-9]+))")


def _commands(text: str) -> Iterator[tuple[str | None, int, int]]:
    """Yield (mask, 0, 0) for mask lines and (None, address, value) for writes."""
    for line in text.splitlines():
        match = _LINE.search(line)
        if match is None:
            raise ValueError(f"unrecognised line: {line!r}")
        if match[2] is not None:
            yield match[2], 0, 0
        else:
            yield None, int(match[3]), int(match[4])


def _floating(mask: str) -> Iterator[tuple[int, int]]:
    """Yield (or, and) pairs covering every assignment of the floating bits."""
    or_template = mask.replace("X", "{}")
    and_template = mask.replace("0", "1").replace("X", "{}")
    for bits in product("01", repeat=mask.count("X")):
        yield int(or_template.format(*bits), 2), int(and_template.format(*bits), 2)


def part1(text: str) -> int:
    """Sum of memory after masking every written value."""
    or_bits = and_bits = 0
    memory: dict[int, int] = {}
    for mask, address, value in _commands(text):
        if mask is not None:
            or_bits = int(mask.replace("X", "0"), 2)
            and_bits = int(mask.replace("X", "1"), 2)
        else:
            memory[address] = (value & and_bits) | or_bits
    return sum(memory.values())


def part2(text: str) -> int:
    """Sum of memory after writing to every address the mask decodes to."""
    masks: list[tuple[int, int]] = []
    memory: dict[int, int] = {}
    for mask, address, value in _commands(text):
        if mask is not None:
            masks = list(_floating(mask))
        else:
            for or_bits, and_bits in masks:
                memory[(address | or_bits) & and_bits] = value
    return sum(memory.values())


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Initialise the docking program.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    args = parser.parse_args(argv)
    text = Path(args.input).read_text()
    print(part1(text))
    print(part2(text))


if __name__ == "__main__":
    main()