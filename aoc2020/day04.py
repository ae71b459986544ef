"""Passport processing: count passports with required, valid fields."""

from __future__ import annotations

import argparse
import re
from pathlib import Path

REQUIRED_FIELDS = 7

_DEFAULT_PATTERN = re.compile(r"[0-9]{4}")
_PATTERNS = {
    "hgt": re.compile(r"[0-9]+(cm|in)"),
    "hcl": re.compile(r"#[0-9a-f]{6}"),
    "ecl": re.compile(r"(amb|blu|brn|gry|grn|hzl|oth)"),
    "pid": re.compile(r"[0-9]{9}"),
}
_RANGES = {
    ("byr", ""): (1920, 2002),
    ("iyr", ""): (2010, 2020),
    ("eyr", ""): (2020, 2030),
    ("hgt", "cm"): (150, 193),
    ("hgt", "in"): (59, 76),
}


def _fields(passport: str):
    for prop in passport.split():
        key, sep, value = prop.partition(":")
        if not sep:
            raise ValueError(f"property without value: {prop!r}")
        if key == "cid":
            continue
        yield key, value


def _is_valid(key: str, value: str) -> bool:
    if not _PATTERNS.get(key, _DEFAULT_PATTERN).fullmatch(value):
        return False
    letters = "".join(c for c in value if c.isalpha())
    digits = "".join(c for c in value if c.isascii() and c.isdigit())
    number = int(digits) if digits else 0
    bounds = _RANGES.get((key, letters))
    return bounds is None or bounds[0] <= number <= bounds[1]


def part1(text: str) -> int:
    """Count passports that have seven distinct fields besides cid."""
    return sum(
        1 for passport in text.split("\n\n") if len(dict(_fields(passport))) == REQUIRED_FIELDS
    )


def _valid_fields(passport: str) -> dict[str, str]:
    found: dict[str, str] = {}
    for key, value in _fields(passport):
        if not _is_valid(key, value):
            break
        found[key] = value
    return found


def part2(text: str) -> int:
    """Count passports whose fields are all present and valid."""
    return sum(
        1 for passport in text.split("\n\n") if len(_valid_fields(passport)) == REQUIRED_FIELDS
    )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Validate passports.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    args = parser.parse_args(argv)
    text = Path(args.input).read_text()
    print(part1(text))
    print(part2(text))


if __name__ == "__main__":
    main()