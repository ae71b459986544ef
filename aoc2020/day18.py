"""Operation order: evaluate expressions under unusual precedence rules."""

from __future__ import annotations

import argparse
import operator
import re
from collections.abc import Callable
from math import prod
from pathlib import Path

_OPERATORS = {"+": operator.add, "*": operator.mul}
_INNERMOST = re.compile(r"\(([^()]+)\)")


def evaluate_flat(expression: str) -> int:
    """Evaluate a parenthesis-free expression strictly left to right."""
    tokens = expression.split(" ")
    result = int(tokens[0])
    for symbol, number in zip(tokens[1::2], tokens[2::2]):
        try:
            apply = _OPERATORS[symbol]
        except KeyError:
            raise ValueError(f"invalid operator: {symbol!r}") from None
        result = apply(result, int(number))
    return result


def _addition_first_flat(expression: str) -> int:
    return prod(evaluate_flat(term) for term in expression.split(" * "))


def _reduce(expression: str, flat: Callable[[str], int]) -> int:
    current = f"({expression})"
    while True:
        reduced = _INNERMOST.sub(lambda match: str(flat(match[1])), current)
        if reduced == current:
            break
        current = reduced
    try:
        return int(current)
    except ValueError:
        raise ValueError(f"cannot evaluate expression: {expression!r}") from None


def evaluate_left_to_right(expression: str) -> int:
    """Evaluate with + and * at equal precedence, honouring parentheses."""
    return _reduce(expression, evaluate_flat)


def evaluate_addition_first(expression: str) -> int:
    """Evaluate with + binding tighter than *, honouring parentheses."""
    return _reduce(expression, _addition_first_flat)


def part1(text: str) -> int:
    """Sum of all lines evaluated left to right."""
    return sum(evaluate_left_to_right(line) for line in text.splitlines())


def part2(text: str) -> int:
    """Sum of all lines evaluated with addition first."""
    return sum(evaluate_addition_first(line) for line in text.splitlines())


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Evaluate homework expressions.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    args = parser.parse_args(argv)
    text = Path(args.input).read_text()
    print(part1(text))
    print(part2(text))


if __name__ == "__main__":
    main()