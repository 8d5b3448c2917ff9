"""Day 1: count how often a 100-position dial lands on or passes zero."""

from __future__ import annotations

from collections.abc import Sequence

from adventofcode.day import Day
from adventofcode.runner import solution_main

DAY = Day(1)
DIAL_NUMBER = 100
START_POSITION = 50


def _parse_u64(text: str) -> int | None:
    digits = text[1:] if text.startswith("+") else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        return None
    value = int(digits)
    return value if value < 2**64 else None


def _parse_line(line: str) -> tuple[int, int] | None:
    """Return (signed delta, distance) for a rotation such as ``L68``."""
    line = line.strip()
    if not line:
        raise ValueError("empty rotation line")
    direction, distance_text = line[0], line[1:]
    distance = _parse_u64(distance_text)
    if distance is None:
        return None
    if direction == "L":
        return -distance, distance
    if direction == "R":
        return distance, distance
    return None


def part_one(input_text: str) -> int | None:
    """Number of rotations that leave the dial pointing at zero."""
    position = START_POSITION
    count = 0
    for line in input_text.splitlines():
        parsed = _parse_line(line)
        if parsed is None:
            return None
        delta, _ = parsed
        position = (position + delta) % DIAL_NUMBER
        if position == 0:
            count += 1
    return count


def count_zero_crossings(position: int, delta: int, distance: int) -> int:
    """How many times a rotation from ``position`` points the dial at zero."""
    if distance == 0:
        return 0
    if position == 0:
        first_hit = DIAL_NUMBER
    elif delta > 0:
        first_hit = DIAL_NUMBER - position
    else:
        first_hit = position
    if first_hit > distance:
        return 0
    return 1 + (distance - first_hit) // DIAL_NUMBER


def part_two(input_text: str) -> int | None:
    """Number of clicks, during or at the end of rotations, that hit zero."""
    position = START_POSITION
    count = 0
    for line in input_text.splitlines():
        parsed = _parse_line(line)
        if parsed is None:
            return None
        delta, distance = parsed
        count += count_zero_crossings(position, delta, distance)
        position = (position + delta) % DIAL_NUMBER
    return count


def main(argv: Sequence[str] | None = None) -> None:
    """Solve both parts against the stored puzzle input."""
    solution_main(DAY, part_one, part_two, argv)


if __name__ == "__main__":
    main()