import pytest

from aoc2020.infi import octagon_size, part1, part2


def test_smallest_octagons():
    assert octagon_size(1) == 1
    assert octagon_size(5) == 1
    assert octagon_size(6) == 2


def test_size_never_decreases():
    sizes = [octagon_size(n) for n in range(0, 20000, 137)]
    assert sizes == sorted(sizes)
    assert sizes[-1] > sizes[0]


def test_part1_ignores_thousand_separators():
    assert part1(" 1.000 \n") == octagon_size(1000)
    assert part1("17.491.000\n") == octagon_size(17491000)


def test_part2_sums_perimeters():
    assert part2("1.000\n25\n") == 8 * (octagon_size(1000) + octagon_size(25))


def test_part2_single_line_matches_part1():
    assert part2("4.321\n") == 8 * part1("4.321\n")


def test_part1_rejects_text():
    with pytest.raises(ValueError):
        part1("many\n")