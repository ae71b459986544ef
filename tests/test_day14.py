import pytest

from aoc2020.day14 import part1, part2

EXAMPLE1 = """\
mask = XXXXXXXXXXXXXXXXXXXXXXXXXXXXX1XXXX0X
mem[8] = 11
mem[7] = 101
mem[8] = 0
"""

EXAMPLE2 = """\
mask = 000000000000000000000000000000X1001X
mem[42] = 100
mask = 00000000000000000000000000000000X0XX
mem[26] = 1
"""

ALL_X = "mask = " + "X" * 36
ALL_ZERO = "mask = " + "0" * 36


def test_part1_example():
    assert part1(EXAMPLE1) == 165


def test_part2_example():
    assert part2(EXAMPLE2) == 208


def test_part1_transparent_mask_keeps_value():
    assert part1(f"{ALL_X}\nmem[3] = 12345") == 12345


def test_part1_last_write_wins():
    assert part1(f"{ALL_X}\nmem[1] = 5\nmem[1] = 9") == 9


def test_part2_zero_mask_writes_once():
    assert part2(f"{ALL_ZERO}\nmem[17] = 4321") == 4321


def test_part2_floating_bits_multiply_writes():
    mask = "mask = " + "0" * 33 + "XXX"
    assert part2(f"{mask}\nmem[0] = 7") == 2**3 * 7


def test_unrecognised_line():
    with pytest.raises(ValueError):
        part1("nonsense")
    with pytest.raises(ValueError):
        part2("nonsense")