import re

import pytest

from aoc2020.day19 import build_pattern, parse_input, part1, part2

EXAMPLE = """0: 4 1 5
1: 2 3 | 3 2
2: 4 4 | 5 5
3: 4 5 | 5 4
4: "a"
5: "b"

ababbb
bababa
abbbab
aaabbb
aaaabbb
"""

VALID = {"aab", "aaab", "aaabb"}
INVALID = {"aabb", "ab"}
LOOPING = "0: 8 11\n8: 42\n11: 42 31\n42: \"a\"\n31: \"b\"\n\n" + "\n".join(
    sorted(VALID | INVALID)
)


def test_parse_rules_and_messages():
    rules, messages = parse_input(EXAMPLE)
    assert rules[4] == [("a",)]
    assert rules[1] == [(2, 3), (3, 2)]
    assert messages == {"ababbb", "bababa", "abbbab", "aaabbb", "aaaabbb"}


def test_part1_example():
    assert part1(EXAMPLE) == 2


def test_pattern_matches_valid_messages():
    rules, messages = parse_input(EXAMPLE)
    pattern = build_pattern(rules, 0)
    matched = {message for message in messages if re.fullmatch(pattern, message)}
    assert matched == {"ababbb", "abbbab"}


def test_sequence_pattern():
    rules = {0: [(1, 2)], 1: [("a",)], 2: [("b",)]}
    assert build_pattern(rules, 0) == "ab"


def test_depth_beyond_limit_gives_empty_pattern():
    rules, _ = parse_input(EXAMPLE)
    assert build_pattern(rules, 0, 1, 0) == ""


def test_duplicate_messages_count_once():
    assert part1(EXAMPLE + "ababbb\n") == part1(EXAMPLE)


def test_undefined_rule_rejected():
    with pytest.raises(ValueError):
        build_pattern({0: [(1,)]}, 0)


def test_part1_without_loops():
    assert part1(LOOPING) == 1


def test_part2_with_loops():
    assert part2(LOOPING) == len(VALID)
    assert part2(LOOPING) >= part1(LOOPING)