import pytest

from aoc2020.day24 import initial_black_tiles, locate, part1, part2

SAMPLE = "\n".join(
    [
        "esenee",
        "nwwswee",
        "esew",
        "nenenw",
        "wwswse",
        "seswne",
        "eeenwsw",
        "nwnwnw",
    ]
)

_MIRROR = str.maketrans("nsew", "snwe")


def test_locate_adjacent_tile():
    assert locate("esew") == (0, 1)


def test_locate_back_to_reference():
    assert locate("nwwswee") == (0, 0)


@pytest.mark.parametrize("line", ["ew", "nesw", "nwse", ""])
def test_opposite_steps_cancel(line):
    assert locate(line) == (0, 0)


def test_flipping_twice_restores_white():
    assert part1("esew\nesew") == 0


def test_initial_black_tiles_distinct_targets():
    assert initial_black_tiles("esew\nnwwswee") == {(0, 1), (0, 0)}


def test_part2_zero_days_equals_part1():
    assert part2(SAMPLE, 0) == part1(SAMPLE)


def test_lonely_tile_turns_white():
    assert part2("e", 1) == 0


def test_part2_is_mirror_symmetric():
    mirrored = SAMPLE.translate(_MIRROR)
    assert part1(mirrored) == part1(SAMPLE)
    assert part2(mirrored, 10) == part2(SAMPLE, 10)


def test_part2_empty_input():
    assert part2("", 5) == 0