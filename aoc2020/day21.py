"""Allergen assessment: deduce which ingredients contain which allergens."""

from __future__ import annotations

import argparse
from collections import Counter
from pathlib import Path

Food = tuple[list[str], list[str]]


def parse_foods(text: str) -> list[Food]:
    """Parse lines such as 'a b (contains x, y)' into (ingredients, allergens)."""
    foods: list[Food] = []
    for line in text.splitlines():
        ingredients, sep, allergens = line.strip(")").partition(" (contains ")
        if not sep:
            raise ValueError(f"food without allergens: {line!r}")
        foods.append((ingredients.split(" "), allergens.split(", ")))
    return foods


def _candidates(foods: list[Food]) -> dict[str, set[str]]:
    candidates: dict[str, set[str]] = {}
    for ingredients, allergens in foods:
        for allergen in allergens:
            if allergen in candidates:
                candidates[allergen] &= set(ingredients)
            else:
                candidates[allergen] = set(ingredients)
    return candidates


def part1(text: str) -> int:
    """Occurrences of ingredients that cannot contain any allergen."""
    foods = parse_foods(text)
    counts = Counter(ingredient for ingredients, _ in foods for ingredient in ingredients)
    suspicious = set().union(*_candidates(foods).values())
    return sum(n for ingredient, n in counts.items() if ingredient not in suspicious)


def part2(text: str) -> int | str:
    """Dangerous ingredients, comma separated, ordered by their allergen."""
    candidates = _candidates(parse_foods(text))
    mapping: dict[str, str] = {}
    for _ in range(len(candidates)):
        for allergen, ingredients in candidates.items():
            remaining = ingredients - mapping.keys()
            if len(remaining) == 1:
                mapping[next(iter(remaining))] = allergen
    ordered = sorted(mapping.items(), key=lambda item: item[1])
    return ",".join(ingredient for ingredient, _ in ordered)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Assess food allergens.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    args = parser.parse_args(argv)
    text = Path(args.input).read_text()
    print(part1(text))
    print(part2(text))


if __name__ == "__main__":
    main()