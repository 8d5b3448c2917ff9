"""Handlers for the command-line subcommands."""

from __future__ import annotations

import subprocess
import sys
from typing import NoReturn

from adventofcode import aoc_cli
from adventofcode.day import Day, all_days
from adventofcode.readme_benchmarks import ReadmeError, get_path_for_bin
from adventofcode.readme_benchmarks import update as update_readme
from adventofcode.run_multi import run_multi
from adventofcode.timings import Timings

AOC_MISSING_HINT = (
    'command "aoc" not found or not callable. '
    'Try running "cargo install aoc-cli" to install it.'
)

MODULE_TEMPLATE = '''"""Solution for day %DAY_NUMBER%."""

from __future__ import annotations

from adventofcode.day import Day
from adventofcode.runner import solution_main

DAY = Day(%DAY_NUMBER%)


def part_one(input_text: str) -> int | None:
    return None


def part_two(input_text: str) -> int | None:
    return None


def main(argv=None):
    solution_main(DAY, part_one, part_two, argv)


if __name__ == "__main__":
    main()
'''


def _fail(message: str) -> NoReturn:
    print(message, file=sys.stderr)
    raise SystemExit(1)


def _require_aoc() -> None:
    try:
        aoc_cli.check()
    except aoc_cli.AocCommandError:
        _fail(AOC_MISSING_HINT)


def handle_all(is_release: bool) -> None:
    """Run every day's solution."""
    run_multi(set(all_days()), is_release, False)


def handle_download(day: Day) -> None:
    """Download input and puzzle description for ``day``."""
    _require_aoc()
    try:
        aoc_cli.download(day)
    except aoc_cli.AocCommandError as err:
        _fail(f"failed to call aoc-cli: {err}")


def handle_read(day: Day) -> None:
    """Show the puzzle description for ``day``."""
    _require_aoc()
    try:
        aoc_cli.read(day)
    except aoc_cli.AocCommandError as err:
        _fail(f"failed to call aoc-cli: {err}")


def handle_scaffold(day: Day, overwrite: bool) -> None:
    """Create the solution module and empty data files for ``day``."""
    input_path = f"data/inputs/{day}.txt"
    example_path = f"data/examples/{day}.txt"
    module_path = get_path_for_bin(day)

    try:
        handle = open(module_path, "w" if overwrite else "x", encoding="utf-8")
    except OSError as err:
        _fail(f"Failed to create module file: {err}")

    with handle:
        try:
            handle.write(MODULE_TEMPLATE.replace("%DAY_NUMBER%", str(int(day))))
        except OSError as err:
            _fail(f"Failed to write module contents: {err}")
    print(f'Created module file "{module_path}"')

    for path, label in ((input_path, "input"), (example_path, "example")):
        try:
            open(path, "w", encoding="utf-8").close()
        except OSError as err:
            _fail(f"Failed to create {label} file: {err}")
        print(f'Created empty {label} file "{path}"')

    print("---")
    print(f"🎄 Type `adventofcode solve {day}` to run your solution.")


def build_solve_args(
    day: Day, release: bool, dhat: bool, submit_part: int | None
) -> list[str]:
    """Command line that runs the solution module of ``day``."""
    args = [sys.executable]
    if dhat:
        args += ["-X", "tracemalloc"]
    elif release:
        args.append("-O")
    args += ["-m", f"adventofcode.solutions.day{day}"]
    if submit_part is not None:
        args += ["--submit", str(submit_part)]
    return args


def handle_solve(
    day: Day, release: bool, dhat: bool, submit_part: int | None
) -> None:
    """Run the solution of ``day`` in a child process."""
    subprocess.run(build_solve_args(day, release, dhat, submit_part), check=False)


def select_days(day: Day | None, run_all: bool, stored_timings: Timings) -> set[Day]:
    """Days to time: the given one, all, or those not yet fully benched."""
    if day is not None:
        return {day}
    if run_all:
        return set(all_days())
    return {d for d in all_days() if not stored_timings.is_day_complete(d)}


def handle_time(day: Day | None, run_all: bool, store: bool) -> None:
    """Benchmark solutions and optionally store the results."""
    stored_timings = Timings.read_from_file()
    days_to_run = select_days(day, run_all, stored_timings)
    timings = run_multi(days_to_run, True, True)

    if store:
        merged = stored_timings.merge(timings)
        merged.store_file()

        print()
        try:
            update_readme(merged)
        except (ReadmeError, OSError):
            print("Failed to store updated benchmarks.", file=sys.stderr)
        else:
            print("Stored updated benchmarks.")