import pytest

from aoc2020.day15 import part1, part2


def test_part1_example():
    assert part1("0,3,6") == 436


@pytest.mark.parametrize("start", ["0,3,6", "1,3,2", "2,1,3"])
def test_part2_at_2020_matches_part1(start):
    assert part2(start, 2020) == part1(start)


def test_turn_within_starting_numbers_returns_last_start():
    assert part2("0,3,6", 3) == 6


def test_new_number_is_followed_by_zero():
    assert part2("1,2", 3) == 0


def test_surrounding_whitespace_ignored():
    assert part2(" 0,3,6\n", 50) == part2("0,3,6", 50)


def test_empty_input():
    with pytest.raises(ValueError):
        part1("")