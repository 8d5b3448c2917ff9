"""Day 5: check ingredient IDs against ranges of fresh IDs."""

from __future__ import annotations

from collections.abc import Sequence

from adventofcode.day import Day
from adventofcode.runner import solution_main

DAY = Day(5)


def _parse_u64(text: str) -> int:
    digits = text[1:] if text.startswith("+") else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise ValueError(f"invalid number: {text!r}")
    value = int(digits)
    if value >= 2**64:
        raise ValueError(f"number too large: {text!r}")
    return value


def _parse_range(line: str) -> range:
    start_text, sep, end_text = line.partition("-")
    if not sep:
        raise ValueError(f"invalid range: {line!r}")
    return range(_parse_u64(start_text), _parse_u64(end_text) + 1)


def parse(input_text: str) -> tuple[list[range], list[int]]:
    """Split the input into fresh ID ranges and available IDs."""
    ranges_text, sep, ids_text = input_text.partition("\n\n")
    if not sep:
        raise ValueError("expected a blank line between ranges and IDs")
    ranges = [_parse_range(line) for line in ranges_text.splitlines()]
    ids = [_parse_u64(line) for line in ids_text.splitlines()]
    return ranges, ids


def part_one(input_text: str) -> int | None:
    """Number of available IDs that fall in some fresh range."""
    ranges, ids = parse(input_text)
    return sum(1 for item in ids if any(item in fresh for fresh in ranges))


def part_two(input_text: str) -> int | None:
    """Number of distinct IDs covered by the fresh ranges."""
    ranges, _ = parse(input_text)
    total = 0
    covered_until = 0
    for fresh in sorted(ranges, key=lambda r: r.start):
        total += max(fresh.stop - max(fresh.start, covered_until), 0)
        covered_until = max(fresh.stop, covered_until)
    return total


def main(argv: Sequence[str] | None = None) -> None:
    """Solve both parts against the stored puzzle input."""
    solution_main(DAY, part_one, part_two, argv)


if __name__ == "__main__":
    main()