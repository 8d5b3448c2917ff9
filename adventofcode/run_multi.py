"""Run several solutions and collect their timings."""

from __future__ import annotations

import subprocess
import sys
import threading
from collections.abc import Container, Sequence
from pathlib import Path

from adventofcode.day import Day, all_days
from adventofcode.files import ANSI_BOLD, ANSI_ITALIC, ANSI_RESET
from adventofcode.readme_benchmarks import get_path_for_bin as _bin_path
from adventofcode.timings import Timing, Timings

__all__ = [
    "get_path_for_bin",
    "parse_exec_time",
    "parse_time",
    "run_multi",
    "run_solution",
]

SAMPLES_SUFFIX = " samples)"


def get_path_for_bin(day: Day) -> str:
    """Return the path of the solution module for a day."""
    return _bin_path(day)


def run_multi(
    days_to_run: Container[Day], is_release: bool, is_timed: bool
) -> Timings | None:
    """Run the solution of each selected day in order; return timings if timed."""
    timings: list[Timing] = []
    need_space = False

    for day in all_days():
        if day not in days_to_run:
            continue
        if need_space:
            print()
        need_space = True

        print(f"{ANSI_BOLD}Day {day}{ANSI_RESET}")
        print("------")

        output = run_solution(day, is_timed, is_release)
        if not output:
            print("Not solved.")
        else:
            timings.append(parse_exec_time(output, day))

    if not is_timed:
        return None

    result = Timings(data=timings)
    total_millis = result.total_millis()
    print(
        f"\n{ANSI_BOLD}Total (Run):{ANSI_RESET} "
        f"{ANSI_ITALIC}{total_millis:.2f}ms{ANSI_RESET}"
    )
    return result


def _forward(stream, target) -> None:
    for line in stream:
        target.write(line if line.endswith("\n") else line + "\n")
    target.flush()


def run_solution(day: Day, is_timed: bool, is_release: bool) -> list[str]:
    """Run one day's solution, echoing its output; return its stdout lines."""
    if not Path(get_path_for_bin(day)).exists():
        return []

    command = [sys.executable]
    if is_release:
        command.append("-O")
    command += ["-m", f"adventofcode.solutions.day{day}"]
    if is_timed:
        command.append("--time")

    process = subprocess.Popen(
        command,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        encoding="utf-8",
        errors="replace",
    )

    forwarder = threading.Thread(
        target=_forward, args=(process.stderr, sys.stderr), daemon=True
    )
    forwarder.start()

    output = []
    for raw_line in process.stdout:
        line = raw_line.rstrip("\r\n")
        print(line)
        output.append(line)

    forwarder.join()
    process.wait()
    return output


def parse_exec_time(output: Sequence[str], day: Day) -> Timing:
    """Collect the timings printed by a solution run."""
    timing = Timing(day=day, part_1=None, part_2=None, total_nanos=0.0)

    for line in output:
        if SAMPLES_SUFFIX not in line:
            continue
        parsed = parse_time(line)
        if parsed is None:
            print(f"Could not parse timings from line: {line}", file=sys.stderr)
            continue
        timing_str, nanos = parsed
        part = line.split(":", 1)[0]
        if "Part 1" in part:
            timing.part_1 = timing_str
        elif "Part 2" in part:
            timing.part_2 = timing_str
        timing.total_nanos += nanos

    return timing


def _parse_float(text: str) -> float | None:
    if not text or text != text.strip() or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def _scaled(text: str, unit: str, factor: float) -> float | None:
    value = _parse_float(text.split(unit, 1)[0])
    return None if value is None else value * factor


def parse_time(line: str) -> tuple[str, float] | None:
    """Extract the duration text and its value in nanoseconds from a line."""
    str_timing = (
        line.split(SAMPLES_SUFFIX, 1)[0].split("(")[-1].split("@", 1)[0].strip()
    )

    if "ns" in str_timing:
        nanos = _scaled(str_timing, "ns", 1.0)
    elif "µs" in str_timing:
        nanos = _scaled(str_timing, "µs", 1_000.0)
    elif "ms" in str_timing:
        nanos = _scaled(str_timing, "ms", 1_000_000.0)
    else:
        nanos = _scaled(str_timing, "s", 1_000_000_000.0)

    if nanos is None:
        return None
    return str_timing, nanos