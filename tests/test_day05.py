import pytest

from aoc2020.day05 import main, part1, part2, seat_id


def _encode(number):
    bits = format(number, "010b")
    row = bits[:7].replace("0", "F").replace("1", "B")
    column = bits[7:].replace("0", "L").replace("1", "R")
    return row + column


def test_seat_id_example():
    assert seat_id("FBFBBFFRLR") == 357


def test_part1_takes_highest():
    text = "BFFFBBFRRR\nFFFBBBFRRR\nBBFFBBFRLL\n"
    assert part1(text) == 820


@pytest.mark.parametrize("number", [0, 1, 8, 127, 500, 1023])
def test_seat_id_round_trip(number):
    assert seat_id(_encode(number)) == number


def test_part1_matches_highest_code():
    codes = ["BFFFBBFRRR", "FFFBBBFRRR", "BBFFBBFRLL"]
    assert part1("\n".join(codes)) == seat_id("BBFFBBFRLL")


def test_part2_finds_gap():
    missing = 20
    codes = [_encode(n) for n in range(8, 41) if n != missing]
    assert part2("\n".join(codes)) == missing


def test_part2_without_gap():
    codes = [_encode(n) for n in range(8, 41)]
    assert part2("\n".join(codes)) == 0


def test_invalid_code_raises():
    with pytest.raises(ValueError):
        seat_id("FBXBBFFRLR")


def test_main_prints_both_parts(tmp_path, capsys):
    text = "\n".join(_encode(n) for n in range(8, 41) if n != 30)
    path = tmp_path / "input"
    path.write_text(text)
    main([str(path)])
    assert capsys.readouterr().out.splitlines() == [str(part1(text)), str(part2(text))]