"""Handy haversacks: reason about bags that contain other bags."""

from __future__ import annotations

import argparse
import re
from collections import defaultdict
from pathlib import Path

TARGET = "shiny gold"

_CONTENT = re.compile(r"([0-9]) ([a-z ]+) bags?")


def parse_rules(text: str) -> dict[str, list[tuple[int, str]]]:
    """Map each bag colour to the (count, colour) pairs it directly contains."""
    rules: dict[str, list[tuple[int, str]]] = {}
    for line in text.splitlines():
        source, sep, targets = line.partition(" bags contain ")
        if not sep:
            raise ValueError(f"malformed rule: {line!r}")
        contents = [(int(m[1]), m[2]) for m in _CONTENT.finditer(targets)]
        if contents:
            rules.setdefault(source, []).extend(contents)
    return rules


def part1(text: str) -> int:
    """Number of bag colours that can eventually hold a shiny gold bag."""
    holders: defaultdict[str, set[str]] = defaultdict(set)
    for source, contents in parse_rules(text).items():
        for _, colour in contents:
            holders[colour].add(source)
    seen = {TARGET}
    pending = [TARGET]
    while pending:
        for holder in holders[pending.pop()]:
            if holder not in seen:
                seen.add(holder)
                pending.append(holder)
    return len(seen) - 1


def part2(text: str) -> int:
    """Total number of bags inside one shiny gold bag."""
    rules = parse_rules(text)
    total = 0
    frontier = [(1, TARGET)]
    while frontier:
        following = []
        for count, colour in frontier:
            for inner_count, inner in rules.get(colour, ()):
                bags = count * inner_count
                following.append((bags, inner))
                total += bags
        frontier = following
    return total


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Analyse bag containment rules.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    args = parser.parse_args(argv)
    text = Path(args.input).read_text()
    print(part1(text))
    print(part2(text))


if __name__ == "__main__":
    main()