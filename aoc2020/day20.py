"""Jurassic jigsaw: assemble image tiles and look for sea monsters."""

from __future__ import annotations

import argparse
from math import isqrt, prod
from pathlib import Path

Image = list[int]
Tiles = dict[int, list[Image]]
Placement = tuple[int, int]

MONSTER = (
    0b00000000000000000010,
    0b10000110000110000111,
    0b01001001001001001000,
)
MONSTER_WIDTH = 20
MONSTER_CELLS = 15


def _encode(cells: str) -> tuple[int, int]:
    """Read '#' as set bits, leftmost cell first and last, in that order."""
    size = len(cells)
    forward = sum(1 << (size - 1 - i) for i, cell in enumerate(cells) if cell == "#")
    backward = sum(1 << i for i, cell in enumerate(cells) if cell == "#")
    return forward, backward


def _four(lines: list[str]) -> list[Image]:
    pairs = [_encode(line) for line in lines]
    forward = [f for f, _ in pairs]
    backward = [b for _, b in pairs]
    return [forward, backward, forward[::-1], backward[::-1]]


def parse_tiles(text: str) -> Tiles:
    """Map each tile id to its eight orientations, each a list of row bitmasks."""
    tiles: Tiles = {}
    for block in text.strip().split("\n\n"):
        header, sep, body = block.strip().partition(":")
        if not sep:
            raise ValueError(f"tile without header: {block!r}")
        number = int(header[5:])
        rows = body.strip().split("\n")
        size = len(rows)
        if any(len(row) != size for row in rows):
            raise ValueError(f"tile {number} is not square")
        columns = ["".join(column) for column in zip(*rows)]
        tiles[number] = _four(rows) + _four(columns)
    return tiles


def part1(text: str) -> int:
    """Product of the ids of the tiles sharing the fewest edges."""
    tiles = parse_tiles(text)
    if not tiles:
        raise ValueError("no tiles")
    scores = {
        number: sum(
            1
            for image in images
            for other, others in tiles.items()
            if other != number
            for candidate in others
            if candidate[0] == image[0]
        )
        for number, images in tiles.items()
    }
    lowest = min(scores.values())
    return prod(number for number, score in scores.items() if score == lowest)


def _connections(tiles: Tiles) -> dict[Placement, Placement]:
    """Map (tile, orientation) to the one whose top row equals its bottom row."""
    connects: dict[Placement, Placement] = {}
    for number, images in tiles.items():
        for orientation, image in enumerate(images):
            for other, others in tiles.items():
                if other == number:
                    continue
                for other_orientation, candidate in enumerate(others):
                    if image[-1] == candidate[0]:
                        connects[(number, orientation)] = (other, other_orientation)
    return connects


def _arrange(tiles: Tiles, grid: int) -> list[Placement]:
    """Place tiles row by row so that every neighbouring edge matches."""
    connects = _connections(tiles)
    placed: list[Placement] = []
    used: set[int] = set()

    def fits(tile_id: int, orientation: int) -> bool:
        row, col = divmod(len(placed), grid)
        if row > 0 and connects.get(placed[-grid]) != (tile_id, orientation):
            return False
        if col > 0:
            left_id, left_orientation = placed[-1]
            left = tiles[left_id][left_orientation]
            current = tiles[tile_id][orientation]
            top_bit = len(left) - 1
            if [r & 1 for r in left] != [(r >> top_bit) & 1 for r in current[: len(left)]]:
                return False
        return True

    def search() -> bool:
        if len(placed) == grid * grid:
            return True
        for tile_id in tiles:
            if tile_id in used:
                continue
            for orientation in range(8):
                if not fits(tile_id, orientation):
                    continue
                placed.append((tile_id, orientation))
                used.add(tile_id)
                if search():
                    return True
                placed.pop()
                used.discard(tile_id)
        return False

    if not search():
        raise ValueError("tiles cannot be assembled into a square")
    return placed


def _rotate(bitmap: list[int], size: int) -> list[int]:
    rotated = [0] * size
    for i, row in enumerate(bitmap):
        for j in range(size):
            if (row >> j) & 1:
                rotated[j] |= 1 << (size - 1 - i)
    return rotated


def _turns(bitmap: list[int], size: int) -> list[list[int]]:
    turns = []
    for _ in range(4):
        turns.append(bitmap)
        bitmap = _rotate(bitmap, size)
    return turns


def _count_monsters(bitmap: list[int], size: int) -> int:
    found = 0
    for y in range(size - len(MONSTER) + 1):
        for x in range(size - MONSTER_WIDTH):
            if all(
                bitmap[y + dy] & (pattern << x) == pattern << x
                for dy, pattern in enumerate(MONSTER)
            ):
                found += 1
    return found


def part2(text: str) -> int:
    """Rough water: '#' cells of the assembled image not part of a sea monster."""
    tiles = parse_tiles(text)
    if not tiles:
        raise ValueError("no tiles")
    grid = isqrt(len(tiles))
    placed = _arrange(tiles, grid)
    tile_size = len(next(iter(tiles.values()))[0])
    inner = tile_size - 2
    mask = (1 << inner) - 1
    size = grid * inner
    bitmap = [0] * size
    for position, (tile_id, orientation) in enumerate(placed):
        y, x = divmod(position, grid)
        image = tiles[tile_id][orientation]
        for row in range(1, tile_size - 1):
            bits = (image[row] >> 1) & mask
            bitmap[y * inner + row - 1] |= bits << ((grid - 1 - x) * inner)
    orientations = _turns(bitmap, size) + _turns(bitmap[::-1], size)
    monsters = max(_count_monsters(candidate, size) for candidate in orientations)
    total = sum(row.bit_count() for row in orientations[0])
    return total - monsters * MONSTER_CELLS


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Assemble the satellite image.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    args = parser.parse_args(argv)
    text = Path(args.input).read_text()
    print(part1(text))
    print(part2(text))


if __name__ == "__main__":
    main()