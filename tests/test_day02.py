import pytest

from aoc2020.day02 import main, part1, part2

EXAMPLE = "1-3 a: abcde\n1-3 b: cdefg\n2-9 c: ccccccccc\n"


def test_part1_example():
    assert part1(EXAMPLE) == 2


def test_part2_example():
    assert part2(EXAMPLE) == 1


def test_unmatched_lines_are_ignored():
    text = "garbage line\n" + EXAMPLE
    assert part1(text) == part1(EXAMPLE)
    assert part2(text) == part2(EXAMPLE)


def test_part1_is_additive():
    assert part1(EXAMPLE + EXAMPLE) == 2 * part1(EXAMPLE)


def test_part2_position_past_end_is_mismatch():
    lines = ["1-20 a: ab", "1-30 b: bcd", "2-40 x: yx"]
    assert part2("\n".join(lines)) == len(lines)


def test_part2_zero_position_raises():
    with pytest.raises(ValueError):
        part2("0-2 a: ab\n")


def test_main_prints_both_parts(tmp_path, capsys):
    path = tmp_path / "input"
    path.write_text(EXAMPLE)
    main([str(path)])
    assert capsys.readouterr().out.splitlines() == [str(part1(EXAMPLE)), str(part2(EXAMPLE))]