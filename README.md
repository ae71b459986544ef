# aoc2020

Solutions to the twenty-five Advent of Code 2020 puzzles, plus the two-part
Infi 2020 puzzle about packing gifts into octagons. No third-party libraries
are needed.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Solving a puzzle from the command line

Every day has its own command, from `aoc2020-day01` through `aoc2020-day25`,
and the Infi puzzle has `aoc2020-infi`. Each command reads the puzzle input
from the file named as its argument, or from a file named `input` in the
current directory when no argument is given, and prints the answer to part 1
followed by the answer to part 2:

```
aoc2020-day01
aoc2020-day13 my-input.txt
aoc2020-infi
```

`aoc2020-day25` prints a single answer, as day 25 has only one part.

A few commands take an extra option:

- `aoc2020-day09 --preamble N` sets the preamble length (default 25).
- `aoc2020-day15 --turns N` sets the number of turns for part 2
  (default 30,000,000).
- `aoc2020-day24 --days N` sets the number of days for part 2 (default 100).

Part 2 of day 15 and of day 23 run millions of steps and take a while in
plain Python.

## Using the solutions from Python

Each day lives in its own module, `aoc2020.day01` to `aoc2020.day25`, and the
Infi puzzle in `aoc2020.infi`. Every module has `part1(text)` and, except
day 25, `part2(text)`; they take the puzzle input as a string and return the
answer:

```python
from pathlib import Path

from aoc2020 import day01, day05

text = Path("input").read_text()
print(day01.part1(text))
print(day01.part2(text))

print(day05.seat_id("FBFBBFFRLR"))  # 357
```

Most answers are integers; `day21.part2` and `day23.part1` return strings.
Inputs that cannot be parsed or solved raise `ValueError`.

Some parts take extra parameters, handy for the small examples in the puzzle
descriptions:

- `day09.part1(text, preamble)` and `day09.part2(text, preamble)` take the
  preamble length (25 by default).
- `day15.part2(text, turns)` takes the number of turns to play.
- `day23.part2(text, moves, size)` takes the number of moves and of cups.
- `day24.part2(text, days)` takes the number of days to simulate.

Several modules also expose their building blocks:

- `day03.count_trees(text, dx, dy)` counts trees on any slope.
- `day07.parse_rules(text)` and `day08.parse_program(text)` parse the input.
- `day16.parse_notes(text)` returns a `Notes` object, and
  `day16.resolve_fields(notes)` maps field names to ticket columns.
- `day17.simulate(text, dimensions, cycles)` runs the Conway cubes in any
  number of dimensions.
- `day18.evaluate_flat`, `day18.evaluate_left_to_right` and
  `day18.evaluate_addition_first` evaluate single expressions.
- `day19.parse_input(text)` and `day19.build_pattern(rules, rule, depth, limit)`
  turn the rules into a regular expression.
- `day20.parse_tiles(text)`, `day21.parse_foods(text)` and
  `day22.parse_hands(text)` parse their inputs; `day22.combat(hands)` plays
  recursive combat and returns the winner and score.
- `day23.play(text, moves, size)` returns the successor of every cup.
- `day24.locate(line)` and `day24.initial_black_tiles(text)` work with the
  hexagonal floor.
- `infi.octagon_size(inhabitants)` sizes a single octagon.

## What it does not do

The package does not fetch puzzle inputs or submit answers; save your input
to a file yourself before running a command.