import pytest

from adventofcode.solutions.day04 import Tile, part_one, part_two

EXAMPLE = (
    "..@@.@@@@.\n"
    "@@@.@.@.@@\n"
    "@@@@@.@.@@\n"
    "@.@@@@..@.\n"
    "@@.@@@@.@@\n"
    ".@@@@@@@.@\n"
    ".@.@.@.@@@\n"
    "@.@@@.@@@@\n"
    ".@@@@@@@@.\n"
    "@.@.@@@.@.\n"
)


def test_part_one():
    assert part_one(EXAMPLE) == 13


def test_part_two():
    assert part_two(EXAMPLE) == 43


def test_tile_from_char():
    assert Tile.from_char(".") is Tile.EMPTY
    assert Tile.from_char("@") is Tile.FULL
    assert Tile.from_char("#") is None


def test_fully_packed_block():
    block = "@@@\n@@@\n@@@\n"
    assert part_one(block) == 4
    assert part_two(block) == 9


def test_empty_input_raises():
    with pytest.raises(ValueError):
        part_one("")