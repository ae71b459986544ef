import pytest

from aoc2020.day23 import play, part1, part2

EXAMPLE = "389125467"


def _after_one(successor):
    cups = []
    cup = successor[1]
    while cup != 1:
        cups.append(cup)
        cup = successor[cup]
    return cups


def test_part1_example():
    assert part1(EXAMPLE + "\n") == "67384529"


def test_play_ten_moves_example():
    assert "".join(map(str, _after_one(play(EXAMPLE, 10)))) == "92658374"


def test_part2_small_game_matches_play():
    assert part2(EXAMPLE, moves=10, size=9) == 9 * 2


def test_play_without_moves_keeps_order():
    successor = play(EXAMPLE, 0)
    assert successor[0] == 3
    assert _after_one(successor) == [2, 5, 4, 6, 7, 3, 8, 9]


def test_play_extends_circle_and_keeps_single_cycle():
    successor = play(EXAMPLE, 50, 20)
    seen = []
    cup = successor[0]
    for _ in range(20):
        seen.append(cup)
        cup = successor[cup]
    assert cup == successor[0]
    assert sorted(seen) == list(range(1, 21))


@pytest.mark.parametrize("text", ["112", "12a", "2345"])
def test_bad_labels_raise(text):
    with pytest.raises(ValueError):
        play(text, 1)


def test_size_smaller_than_labels_raises():
    with pytest.raises(ValueError):
        play(EXAMPLE, 1, 5)


def test_too_few_cups_raise():
    with pytest.raises(ValueError):
        play("1234", 1)