"""Solutions to the Advent of Code 2020 and Infi 2020 puzzles, one module per day."""

__version__ = "0.1.0"