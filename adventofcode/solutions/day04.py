"""Day 4: find paper rolls that a forklift can reach."""

from __future__ import annotations

import enum
from collections.abc import Iterator, Sequence

from adventofcode.day import Day
from adventofcode.runner import solution_main

DAY = Day(4)
MAX_NEIGHBOURS = 4

_DIRECTIONS = (
    (0, -1),
    (0, 1),
    (-1, 0),
    (1, 0),
    (-1, -1),
    (1, -1),
    (-1, 1),
    (1, 1),
)


class Tile(enum.Enum):
    """One cell of the floor plan."""

    EMPTY = "."
    FULL = "@"

    @classmethod
    def from_char(cls, char: str) -> Tile | None:
        """The tile for ``char``, or None if it is not a tile."""
        try:
            return cls(char)
        except ValueError:
            return None


Grid = list[list[Tile]]


def _parse(input_text: str) -> Grid:
    grid = [
        [tile for char in line if (tile := Tile.from_char(char)) is not None]
        for line in input_text.splitlines()
    ]
    if not grid:
        raise ValueError("empty grid")
    return grid


def _positions(grid: Grid) -> Iterator[tuple[int, int]]:
    for x in range(len(grid[0])):
        for y in range(len(grid)):
            yield x, y


def _full_neighbours(grid: Grid, x: int, y: int) -> int:
    width = len(grid[0])
    height = len(grid)
    return sum(
        1
        for dx, dy in _DIRECTIONS
        if 0 <= x + dx < width
        and 0 <= y + dy < height
        and grid[y + dy][x + dx] is not Tile.EMPTY
    )


def _accessible(grid: Grid, x: int, y: int) -> bool:
    return grid[y][x] is Tile.FULL and _full_neighbours(grid, x, y) < MAX_NEIGHBOURS


def part_one(input_text: str) -> int | None:
    """Number of rolls with fewer than four neighbouring rolls."""
    grid = _parse(input_text)
    return sum(1 for x, y in _positions(grid) if _accessible(grid, x, y))


def part_two(input_text: str) -> int | None:
    """Number of rolls removed by repeatedly taking every accessible roll."""
    grid = _parse(input_text)
    total = 0
    while True:
        removed = 0
        for x, y in _positions(grid):
            if _accessible(grid, x, y):
                grid[y][x] = Tile.EMPTY
                removed += 1
        if removed == 0:
            return total
        total += removed


def main(argv: Sequence[str] | None = None) -> None:
    """Solve both parts against the stored puzzle input."""
    solution_main(DAY, part_one, part_two, argv)


if __name__ == "__main__":
    main()