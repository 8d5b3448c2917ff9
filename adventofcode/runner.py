"""Run solution parts, time them and optionally submit their answers."""

from __future__ import annotations

import sys
import time
import tracemalloc
from collections.abc import Callable, Sequence
from typing import Any

from adventofcode import aoc_cli
from adventofcode.day import Day
from adventofcode.files import ANSI_BOLD, ANSI_ITALIC, ANSI_RESET, read_file

BENCH_TARGET_NS = 1_000_000_000
MIN_SAMPLES = 10
MAX_SAMPLES = 10_000
USAGE_HINT = "Unexpected command-line input. Format: adventofcode solve 1 --submit 1"
AOC_MISSING_HINT = (
    'command "aoc" not found or not callable. '
    'Try running "cargo install aoc-cli" to install it.'
)

_UNITS = (
    (1_000_000_000, "s"),
    (1_000_000, "ms"),
    (1_000, "µs"),
    (1, "ns"),
)


def _parse_u8(text: str) -> int | None:
    digits = text[1:] if text.startswith("+") else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        return None
    value = int(digits)
    return value if value <= 255 else None


def _format_ns(duration_ns: int) -> str:
    divisor, unit = next(
        (divisor, unit) for divisor, unit in _UNITS if duration_ns >= divisor or divisor == 1
    )
    integer, remainder = divmod(duration_ns, divisor)
    tenths, leftover = divmod(remainder * 10, divisor)
    if leftover * 2 >= divisor and leftover > 0:
        tenths += 1
        if tenths == 10:
            integer += 1
            tenths = 0
    return f"{integer}.{tenths}{unit}"


def format_duration(duration_ns: int, samples: int) -> str:
    """Format a duration with one decimal, adding the sample count if benched."""
    text = _format_ns(int(duration_ns))
    if samples == 1:
        return f" ({text})"
    return f" ({text} @ {samples} samples)"


def format_result_line(result: Any, part: str, duration_str: str) -> str:
    """Text printed for a result; an empty ``duration_str`` marks an interim line."""
    is_intermediate = not duration_str

    if result is None:
        if is_intermediate:
            return f"{part}: ✖"
        return f"\r{part}: ✖             \n"

    text = str(result)
    if "\n" in text:
        line = f"{part}: ▼ {duration_str}"
        return line if is_intermediate else f"\r{line}\n{text}\n"

    line = f"{part}: {ANSI_BOLD}{text}{ANSI_RESET}{duration_str}"
    return line if is_intermediate else f"\r{line}\n"


def _print_result(result: Any, part: str, duration_str: str) -> None:
    sys.stdout.write(format_result_line(result, part, duration_str))
    sys.stdout.flush()


def average_duration(durations_ns: Sequence[int]) -> int:
    """Mean of the given durations in whole nanoseconds."""
    if not durations_ns:
        raise ValueError("cannot average an empty list of durations")
    return sum(durations_ns) // len(durations_ns)


def bench(func: Callable[[Any], Any], input_text: Any, base_time_ns: int) -> tuple[int, int]:
    """Run ``func`` repeatedly for about a second; return (mean ns, samples)."""
    sys.stdout.write(f" > {ANSI_ITALIC}benching{ANSI_RESET}")
    sys.stdout.flush()

    iterations = BENCH_TARGET_NS // max(int(base_time_ns), 10)
    iterations = min(max(iterations, MIN_SAMPLES), MAX_SAMPLES)

    timers = []
    for _ in range(iterations):
        start = time.perf_counter_ns()
        func(input_text)
        timers.append(time.perf_counter_ns() - start)

    return average_duration(timers), iterations


def run_timed(
    func: Callable[[Any], Any],
    input_text: Any,
    hook: Callable[[Any], None],
    timed: bool = False,
) -> tuple[Any, int, int]:
    """Run ``func`` once, call ``hook`` on the result, and bench if ``timed``."""
    tracing = tracemalloc.is_tracing()
    if tracing:
        tracemalloc.reset_peak()

    start = time.perf_counter_ns()
    result = func(input_text)
    base_time = time.perf_counter_ns() - start

    if tracing:
        _, peak = tracemalloc.get_traced_memory()
        print(f"heap peak: {peak} bytes", file=sys.stderr)

    hook(result)

    if timed:
        duration, samples = bench(func, input_text, base_time)
    else:
        duration, samples = base_time, 1
    return result, duration, samples


def submit_result(
    result: Any, day: Day, part: int, argv: Sequence[str] | None = None
):
    """Submit ``result`` if ``--submit <part>`` asks for this part."""
    args = list(sys.argv[1:] if argv is None else argv)
    if "--submit" not in args:
        return None

    index = args.index("--submit") + 1
    part_submit = _parse_u8(args[index]) if index < len(args) else None
    if part_submit is None:
        print(USAGE_HINT, file=sys.stderr)
        raise SystemExit(1)

    if part_submit != part:
        return None

    try:
        aoc_cli.check()
    except aoc_cli.AocCommandError:
        print(AOC_MISSING_HINT, file=sys.stderr)
        raise SystemExit(1) from None

    print("Submitting result via aoc-cli...")
    return aoc_cli.submit(day, part, str(result))


def run_part(
    func: Callable[[Any], Any],
    input_text: Any,
    day: Day,
    part: int,
    argv: Sequence[str] | None = None,
) -> None:
    """Run, print and possibly submit one part of a solution."""
    args = list(sys.argv[1:] if argv is None else argv)
    part_str = f"Part {part}"

    result, duration, samples = run_timed(
        func,
        input_text,
        lambda interim: _print_result(interim, part_str, ""),
        "--time" in args,
    )
    _print_result(result, part_str, format_duration(duration, samples))

    if result is not None:
        try:
            submit_result(result, day, part, args)
        except aoc_cli.AocCommandError as err:
            print(f"failed to submit: {err}", file=sys.stderr)


def solution_main(
    day: Day | int,
    part_one: Callable[[str], Any] | None = None,
    part_two: Callable[[str], Any] | None = None,
    argv: Sequence[str] | None = None,
) -> None:
    """Read the day's input and run the given parts against it."""
    day = day if isinstance(day, Day) else Day(day)
    input_text = read_file("inputs", day)
    for part, func in ((1, part_one), (2, part_two)):
        if func is not None:
            run_part(func, input_text, day, part, argv)