import pytest

from aoc2020.day08 import main, parse_program, part1, part2

EXAMPLE = """\
nop +0
acc +1
jmp +4
acc +3
jmp -3
acc -99
acc +1
jmp -4
acc +6
"""


def test_parse_program():
    program = parse_program(EXAMPLE)
    assert program[0] == ("nop", 0)
    assert program[5] == ("acc", -99)
    assert len(program) == len(EXAMPLE.splitlines())


def test_part1_example():
    assert part1(EXAMPLE) == 5


def test_part2_example():
    assert part2(EXAMPLE) == 8


def test_part1_terminating_program_raises():
    with pytest.raises(ValueError):
        part1("acc +3\n")


def test_part1_jump_outside_raises():
    with pytest.raises(ValueError):
        part1("jmp +5\nnop +0\n")


def test_part2_without_fix_raises():
    with pytest.raises(ValueError):
        part2("jmp +0\njmp -1\n")


def test_malformed_instruction_raises():
    with pytest.raises(ValueError):
        parse_program("nop\n")


def test_main_prints_both_parts(tmp_path, capsys):
    path = tmp_path / "input"
    path.write_text(EXAMPLE)
    main([str(path)])
    assert capsys.readouterr().out.splitlines() == [str(part1(EXAMPLE)), str(part2(EXAMPLE))]