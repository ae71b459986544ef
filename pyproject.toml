[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "aoc2020"
version = "0.1.0"
description = "Solutions to the Advent of Code 2020 puzzles and the Infi 2020 puzzle"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "aoc", "puzzles", "2020"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aoc2020-day01 = "aoc2020.day01:main"
aoc2020-day02 = "aoc2020.day02:main"
aoc2020-day03 = "aoc2020.day03:main"
aoc2020-day04 = "aoc2020.day04:main"
aoc2020-day05 = "aoc2020.day05:main"
aoc2020-day06 = "aoc2020.day06:main"
aoc2020-day07 = "aoc2020.day07:main"
aoc2020-day08 = "aoc2020.day08:main"
aoc2020-day09 = "aoc2020.day09:main"
aoc2020-day10 = "aoc2020.day10:main"
aoc2020-day11 = "aoc2020.day11:main"
aoc2020-day12 = "aoc2020.day12:main"
aoc2020-day13 = "aoc2020.day13:main"
aoc2020-day14 = "aoc2020.day14:main"
aoc2020-day15 = "aoc2020.day15:main"
aoc2020-day16 = "aoc2020.day16:main"
aoc2020-day17 = "aoc2020.day17:main"
aoc2020-day18 = "aoc2020.day18:main"
aoc2020-day19 = "aoc2020.day19:main"
aoc2020-day20 = "aoc2020.day20:main"
aoc2020-day21 = "aoc2020.day21:main"
aoc2020-day22 = "aoc2020.day22:main"
aoc2020-day23 = "aoc2020.day23:main"
aoc2020-day24 = "aoc2020.day24:main"
aoc2020-day25 = "aoc2020.day25:main"
aoc2020-infi = "aoc2020.infi:main"

[tool.setuptools.packages.find]
include = ["aoc2020*"]

[tool.pytest.ini_options]
addopts = "-ra"
