"""Day 2: sum product IDs made of a repeated digit sequence."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from adventofcode.day import Day
from adventofcode.runner import solution_main

DAY = Day(2)


def _parse_u64(text: str) -> int | None:
    digits = text[1:] if text.startswith("+") else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        return None
    value = int(digits)
    return value if value < 2**64 else None


def _parse_ranges(input_text: str) -> list[tuple[int, int]] | None:
    ranges = []
    for interval in input_text.strip().split(","):
        start_text, sep, end_text = interval.partition("-")
        if not sep:
            return None
        start = _parse_u64(start_text)
        end = _parse_u64(end_text)
        if start is None or end is None:
            return None
        ranges.append((start, end))
    return ranges


def part_one(input_text: str) -> int | None:
    """Sum of IDs in the ranges that are a digit sequence repeated twice."""
    ranges = _parse_ranges(input_text)
    if ranges is None:
        return None
    total = 0
    for start, end in ranges:
        for value in range(start, end + 1):
            if value == 0:
                raise ValueError("logarithm of zero is undefined")
            mask = 10 ** (len(str(value)) // 2)
            if value % mask == value // mask:
                total += value
    return total


def _repeated_values(
    prefix: int, length: int, max_val: int, max_digits: int
) -> Iterator[int]:
    """Yield numbers made of a motif repeated at least twice, up to ``max_val``."""
    if length > max_digits // 2:
        return

    if length > 0:
        scale = 10**length
        value = prefix * scale + prefix
        digits = length * 2
        if digits > max_digits or value > max_val:
            return
        while digits <= max_digits and value <= max_val:
            yield value
            if digits + length > max_digits:
                break
            value = value * scale + prefix
            digits += length

    if length == max_digits // 2:
        return

    for digit in range(10):
        if length == 0 and digit == 0:
            continue
        yield from _repeated_values(prefix * 10 + digit, length + 1, max_val, max_digits)


def part_two(input_text: str) -> int | None:
    """Sum of IDs in the ranges made of a digit sequence repeated at least twice."""
    ranges = _parse_ranges(input_text)
    if ranges is None:
        return None
    if not ranges:
        return 0

    min_val = min(start for start, _ in ranges)
    max_val = max(end for _, end in ranges)
    max_digits = len(str(max_val))

    found = {
        value
        for value in _repeated_values(0, 0, max_val, max_digits)
        if value >= min_val and any(start <= value <= end for start, end in ranges)
    }
    return sum(found)


def main(argv: Sequence[str] | None = None) -> None:
    """Solve both parts against the stored puzzle input."""
    solution_main(DAY, part_one, part_two, argv)


if __name__ == "__main__":
    main()