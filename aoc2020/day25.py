"""Combo breaker: derive the door's encryption key from two public keys."""

from __future__ import annotations

import argparse
from math import isqrt
from pathlib import Path

MODULUS = 20201227
SUBJECT = 7


def _loop_size(public_key: int) -> int | None:
    """Exponent e in 1..MODULUS-1 with SUBJECT**e == public_key, if there is one."""
    if not 0 < public_key < MODULUS:
        return None
    order = MODULUS - 1
    step = isqrt(order) + 1
    baby: dict[int, int] = {}
    value = 1
    for j in range(step):
        baby.setdefault(value, j)
        value = value * SUBJECT % MODULUS
    factor = pow(SUBJECT, -step, MODULUS)
    gamma = public_key
    for i in range(step + 1):
        if gamma in baby:
            exponent = i * step + baby[gamma]
            return exponent if exponent else order
        gamma = gamma * factor % MODULUS
    return None


def part1(text: str) -> int:
    """Encryption key from the card's loop size and the door's public key."""
    lines = text.splitlines()
    if len(lines) < 2:
        raise ValueError("expected two public keys")
    card_key, door_key = int(lines[0]), int(lines[1])
    loop = _loop_size(card_key) or 0
    return pow(door_key, loop, MODULUS)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Break the door's encryption key.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    args = parser.parse_args(argv)
    print(part1(Path(args.input).read_text()))


if __name__ == "__main__":
    main()