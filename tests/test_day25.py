import pytest

from aoc2020.day25 import part1

MODULUS = 20201227


def test_worked_example():
    assert part1("5764801\n17807724\n") == 14897079


def test_keys_are_symmetric():
    assert part1("17807724\n5764801\n") == part1("5764801\n17807724\n")


@pytest.mark.parametrize("card_loop, door_loop", [(3, 10), (1234, 56789), (999999, 17)])
def test_shared_secret(card_loop, door_loop):
    card = pow(7, card_loop, MODULUS)
    door = pow(7, door_loop, MODULUS)
    assert part1(f"{card}\n{door}\n") == pow(7, card_loop * door_loop, MODULUS)
    assert part1(f"{door}\n{card}\n") == part1(f"{card}\n{door}\n")


def test_unreachable_key_gives_one():
    assert part1(f"{MODULUS}\n5764801\n") == 1


def test_missing_key_raises():
    with pytest.raises(ValueError):
        part1("5764801\n")


def test_non_numeric_key_raises():
    with pytest.raises(ValueError):
        part1("abc\n17807724\n")