"""Monster messages: match messages against a grammar of numbered rules."""

from __future__ import annotations

import argparse
import re
from itertools import count
from pathlib import Path
from typing import Union

Token = Union[int, str]
Rules = dict[int, list[tuple[Token, ...]]]


def _token(text: str) -> Token:
    if len(text) >= 2 and text[0] == text[-1] == '"':
        return text[1:-1]
    return int(text)


def parse_input(text: str) -> tuple[Rules, set[str]]:
    """Return the rules and the distinct messages; a blank line separates them."""
    rules: Rules = {}
    messages: set[str] = set()
    section = 1
    for line in text.splitlines():
        if not line:
            section += 1
            continue
        if section == 1:
            number, sep, body = line.partition(": ")
            if not sep:
                raise ValueError(f"malformed rule: {line!r}")
            rules[int(number)] = [
                tuple(_token(token) for token in option.split(" "))
                for option in body.split(" | ")
            ]
        else:
            messages.add(line)
    return rules, messages


def build_pattern(rules: Rules, rule: int, depth: int = 0, limit: int | None = None) -> str:
    """Regular expression for a rule; nesting deeper than limit yields nothing."""
    if limit is not None and depth > limit:
        return ""
    try:
        options = rules[rule]
    except KeyError:
        raise ValueError(f"undefined rule {rule}") from None
    alternatives = [
        "".join(
            re.escape(token)
            if isinstance(token, str)
            else build_pattern(rules, token, depth + 1, limit)
            for token in option
        )
        for option in options
    ]
    if len(alternatives) > 1:
        return "(?:" + "|".join(alternatives) + ")"
    return alternatives[0]


def _count_matches(pattern: str, messages: set[str]) -> int:
    compiled = re.compile(pattern)
    return sum(1 for message in messages if compiled.fullmatch(message))


def part1(text: str) -> int:
    """Number of distinct messages that fully match rule 0."""
    rules, messages = parse_input(text)
    return _count_matches(build_pattern(rules, 0), messages)


def part2(text: str) -> int:
    """Matches of rule 0 once rules 8 and 11 loop, deepening until the count settles."""
    rules, messages = parse_input(text)
    rules = dict(rules)
    rules[8] = [(42,), (42, 8)]
    rules[11] = [(42, 31), (42, 11, 31)]
    last = 0
    for depth in count():
        matches = _count_matches(build_pattern(rules, 0, 0, depth), messages)
        if matches > 0 and matches == last:
            break
        last = matches
    return last


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Validate satellite messages.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    args = parser.parse_args(argv)
    text = Path(args.input).read_text()
    print(part1(text))
    print(part2(text))


if __name__ == "__main__":
    main()