import pytest

from aoc2020.day17 import part1, part2, simulate

EXAMPLE = ".#.\n..#\n###\n"


def test_part1_example():
    assert part1(EXAMPLE) == 112


def test_part2_example():
    assert part2(EXAMPLE) == 848


def test_part1_is_six_cycles_in_three_dimensions():
    assert part1(EXAMPLE) == simulate(EXAMPLE, 3, 6)


def test_zero_cycles_counts_initial_cubes():
    assert simulate(EXAMPLE, 3, 0) == EXAMPLE.count("#")
    assert simulate(EXAMPLE, 4, 0) == EXAMPLE.count("#")


def test_block_is_stable_in_two_dimensions():
    block = "##\n##"
    assert simulate(block, 2, 5) == block.count("#")


@pytest.mark.parametrize("cycles", [1, 2, 3])
def test_blinker_keeps_its_population(cycles):
    blinker = "###"
    assert simulate(blinker, 2, cycles) == blinker.count("#")


def test_lone_cube_dies():
    assert simulate("...\n.#.\n...", 3, 1) == 0


def test_translation_does_not_change_result():
    shifted = "...\n" + "\n".join("." + line for line in EXAMPLE.splitlines())
    assert simulate(shifted, 3, 3) == simulate(EXAMPLE, 3, 3)


def test_fewer_than_two_dimensions_rejected():
    with pytest.raises(ValueError):
        simulate(EXAMPLE, 1, 1)