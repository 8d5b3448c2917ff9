"""Day 6: solve a worksheet of column-wise arithmetic problems."""

from __future__ import annotations

import enum
import functools
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field

from adventofcode.day import Day
from adventofcode.runner import solution_main

DAY = Day(6)


class Op(enum.Enum):
    """The operation applied to a problem's numbers."""

    ADD = enum.auto()
    MULTIPLY = enum.auto()
    UNDEFINED = enum.auto()

    @classmethod
    def from_char(cls, char: str) -> Op:
        """The operation written as ``char``."""
        if char == "+":
            return cls.ADD
        if char == "*":
            return cls.MULTIPLY
        raise ValueError("Unknown operation")

    def apply(self, a: int, b: int) -> int:
        """Combine two numbers with this operation."""
        if self is Op.ADD:
            return a + b
        if self is Op.MULTIPLY:
            return a * b
        raise ValueError("Cannot apply undefined operator")


@dataclass
class Column:
    """One problem: its numbers and the operation joining them."""

    numbers: list[int] = field(default_factory=list)
    op: Op = Op.UNDEFINED

    def solve(self) -> int:
        """Fold the numbers with the operation; 0 if there are none."""
        if not self.numbers:
            return 0
        return functools.reduce(self.op.apply, self.numbers)


def parse(input_text: str) -> list[Column]:
    """Read problems as whitespace-separated columns of numbers."""
    lines = input_text.splitlines()
    if not lines:
        raise ValueError("empty worksheet")
    *number_lines, op_line = lines
    rows = [line.split() for line in number_lines]
    ops = op_line.split()
    width = max([len(row) for row in rows] + [len(ops)])
    columns = [Column() for _ in range(width)]

    for row in rows:
        for column, token in zip(columns, row):
            column.numbers.append(int(token))
    for column, token in zip(columns, ops):
        column.op = Op.from_char(token[0])
    return columns


def part_one(input_text: str) -> int | None:
    """Grand total of the problems read row by row."""
    return sum(column.solve() for column in parse(input_text))


def part_two(input_text: str) -> int | None:
    """Grand total of the problems read right to left, one number per column."""
    lines = input_text.splitlines()
    if len(lines) < 2:
        return None

    *data_lines, last_line = lines
    width = max(len(line) for line in data_lines)
    rows = [line.ljust(width) for line in data_lines]
    ops = [char for char in last_line if not char.isspace()]

    total = 0
    current = 0
    op_index = max(len(ops) - 1, 0)

    for x in reversed(range(width)):
        digits = [row[x] for row in rows if row[x] != " "]
        if not all(char.isascii() and char.isdigit() for char in digits):
            return None
        number = int("".join(digits)) if digits else 0

        if number != 0:
            op = ops[op_index] if op_index < len(ops) else None
            if op == "+":
                current += number
            elif op == "*":
                current = max(current, 1) * number
            elif op is not None:
                print(f"Unknown operation: '{op}'", file=sys.stderr)
                return None

        if number == 0 or x == 0:
            total += current
            current = 0
            op_index = max(op_index - 1, 0)

    return total


def main(argv: Sequence[str] | None = None) -> None:
    """Solve both parts against the stored puzzle input."""
    solution_main(DAY, part_one, part_two, argv)


if __name__ == "__main__":
    main()