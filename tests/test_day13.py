import pytest

from aoc2020.day13 import part1, part2

EXAMPLE = "939\n7,13,x,x,59,x,31,19\n"


def test_part1_example():
    assert part1(EXAMPLE) == 295


def test_part2_example():
    assert part2(EXAMPLE) == 1068781


def test_part2_satisfies_every_offset():
    ids = "17,x,13,19"
    time = part2("0\n" + ids)
    for offset, bus in enumerate(ids.split(",")):
        if bus != "x":
            assert (time + offset) % int(bus) == 0


def test_part2_ignores_timestamp():
    assert part2("1\n7,13") == part2("999\n7,13")


def test_part1_without_buses():
    assert part1("100\nx,x") == 0


def test_part1_bus_leaving_now_means_no_wait():
    assert part1("14\n7,5") == part1("14\n5,7") == 0


def test_missing_bus_line():
    with pytest.raises(ValueError):
        part1("939")
    with pytest.raises(ValueError):
        part2("939")