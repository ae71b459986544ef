"""Crab combat: play the card game, plainly and recursively."""

from __future__ import annotations

import argparse
from collections import deque
from collections.abc import Iterable, Sequence
from itertools import islice
from pathlib import Path

PLAYERS = 2


def parse_hands(text: str) -> list[list[int]]:
    """Return both players' decks, top card first; a blank line separates them."""
    hands: list[list[int]] = [[] for _ in range(PLAYERS)]
    player = 0
    for line in text.splitlines():
        if not line:
            player += 1
            continue
        try:
            card = int(line)
        except ValueError:
            continue
        if player >= PLAYERS:
            raise ValueError(f"cards for more than {PLAYERS} players")
        hands[player].append(card)
    return hands


def _score(deck: Iterable[int]) -> int:
    return sum(position * card for position, card in enumerate(reversed(list(deck)), start=1))


def _decks(hands: Sequence[Iterable[int]]) -> list[deque[int]]:
    if len(hands) != PLAYERS:
        raise ValueError(f"expected {PLAYERS} hands, got {len(hands)}")
    return [deque(hand) for hand in hands]


def combat(hands: Sequence[Iterable[int]]) -> tuple[int, int]:
    """Play recursive combat; return the winning player's index and score.

    A round whose starting position was seen before in the same game goes
    to the first player.
    """
    decks = _decks(hands)
    winner = 0
    seen: set[tuple[tuple[int, ...], tuple[int, ...]]] = set()
    while decks[0] and decks[1]:
        state = (tuple(decks[0]), tuple(decks[1]))
        card0 = decks[0].popleft()
        card1 = decks[1].popleft()
        if state in seen:
            winner = 0
        else:
            seen.add(state)
            if card0 <= len(decks[0]) and card1 <= len(decks[1]):
                winner, _ = combat(
                    [list(islice(decks[0], card0)), list(islice(decks[1], card1))]
                )
            else:
                winner = 0 if card0 > card1 else 1
        if winner == 0:
            decks[0].extend((card0, card1))
        else:
            decks[1].extend((card1, card0))
    return winner, _score(decks[winner])


def part1(text: str) -> int:
    """Winning player's score in plain combat."""
    decks = _decks(parse_hands(text))
    winner = 0
    while decks[0] and decks[1]:
        card0 = decks[0].popleft()
        card1 = decks[1].popleft()
        if card0 > card1:
            winner = 0
            decks[0].extend((card0, card1))
        else:
            winner = 1
            decks[1].extend((card1, card0))
    return _score(decks[winner])


def part2(text: str) -> int:
    """Winning player's score in recursive combat."""
    return combat(parse_hands(text))[1]


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Play crab combat.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    args = parser.parse_args(argv)
    text = Path(args.input).read_text()
    print(part1(text))
    print(part2(text))


if __name__ == "__main__":
    main()