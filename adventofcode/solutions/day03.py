"""Day 3: pick the largest joltage from each bank of batteries."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from adventofcode.day import Day
from adventofcode.runner import solution_main

DAY = Day(3)


def _total(input_text: str, best: Callable[[str], int]) -> int:
    return sum(best(line.strip()) for line in input_text.splitlines())


def max_joltage_n(number: str, n: int) -> int:
    """Largest number formed by ``n`` digits of ``number`` kept in order."""
    if not all(char.isascii() and char.isdigit() for char in number):
        raise ValueError(f"not a digit string: {number!r}")
    digits = [int(char) for char in number]
    if len(digits) < n:
        raise ValueError(f"need at least {n} digits, got {len(digits)}")

    answer = 0
    start = 0
    for remaining in range(n - 1, -1, -1):
        window = digits[start : len(digits) - remaining]
        best = max(window, default=0)
        answer = answer * 10 + best
        if best > 0:
            start += window.index(best) + 1
    return answer


def part_one(input_text: str) -> int | None:
    """Sum of the best two-battery joltages."""
    return _total(input_text, lambda number: max_joltage_n(number, 2))


def part_two(input_text: str) -> int | None:
    """Sum of the best twelve-battery joltages."""
    return _total(input_text, lambda number: max_joltage_n(number, 12))


def main(argv: Sequence[str] | None = None) -> None:
    """Solve both parts against the stored puzzle input."""
    solution_main(DAY, part_one, part_two, argv)


if __name__ == "__main__":
    main()