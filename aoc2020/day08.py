"""Handheld halting: run a tiny boot program and repair its loop."""

from __future__ import annotations

import argparse
from pathlib import Path

_SWAP = {"jmp": "nop", "nop": "jmp"}


def parse_program(text: str) -> list[tuple[str, int]]:
    """Parse lines such as 'acc +3' into (opcode, argument) pairs."""
    program = []
    for line in text.splitlines():
        parts = line.split(" ")
        if len(parts) < 2:
            raise ValueError(f"malformed instruction: {line!r}")
        program.append((parts[0], int(parts[1])))
    return program


def _run(program: list[tuple[str, int]]) -> tuple[bool, int]:
    """Run until an instruction repeats or the program ends; report which and acc."""
    visited: set[int] = set()
    pc = 0
    acc = 0
    while pc not in visited:
        if not 0 <= pc < len(program):
            raise ValueError(f"jump to {pc} outside the program")
        visited.add(pc)
        opcode, argument = program[pc]
        if opcode == "jmp":
            pc += argument
        else:
            if opcode == "acc":
                acc += argument
            pc += 1
        if pc == len(program):
            return True, acc
    return False, acc


def part1(text: str) -> int:
    """Accumulator value just before any instruction runs a second time."""
    terminated, acc = _run(parse_program(text))
    if terminated:
        raise ValueError("program runs past its last instruction")
    return acc


def part2(text: str) -> int:
    """Accumulator after the run that terminates once one jmp/nop is swapped."""
    program = parse_program(text)
    for index, (opcode, argument) in enumerate(program):
        patched = list(program)
        if opcode in _SWAP:
            patched[index] = (_SWAP[opcode], argument)
        terminated, acc = _run(patched)
        if terminated:
            return acc
    raise ValueError("no single swap makes the program terminate")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Run and repair a boot program.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    args = parser.parse_args(argv)
    text = Path(args.input).read_text()
    print(part1(text))
    print(part2(text))


if __name__ == "__main__":
    main()