"""Thin wrapper around the ``aoc`` command-line tool."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Sequence

from adventofcode.day import Day

AOC_COMMAND = "aoc"


class AocCommandError(Exception):
    """Base error for failed calls to the ``aoc`` tool."""


class CommandNotFound(AocCommandError):
    """The ``aoc`` tool is not installed."""

    def __init__(self) -> None:
        super().__init__("aoc-cli is not present in environment.")


class CommandNotCallable(AocCommandError):
    """The ``aoc`` tool could not be started."""

    def __init__(self) -> None:
        super().__init__("aoc-cli could not be called.")


class BadExitStatus(AocCommandError):
    """The ``aoc`` tool exited with a non-zero status."""

    def __init__(self, output: subprocess.CompletedProcess) -> None:
        super().__init__("aoc-cli exited with a non-zero status.")
        self.output = output


def check() -> None:
    """Raise CommandNotFound if the ``aoc`` tool cannot be run."""
    try:
        subprocess.run([AOC_COMMAND, "-V"], capture_output=True, check=False)
    except OSError as err:
        raise CommandNotFound() from err


def read(day: Day) -> subprocess.CompletedProcess:
    """Show the puzzle description for ``day``."""
    args = build_args(
        "read",
        ["--description-only", "--puzzle-file", get_puzzle_path(day)],
        day,
    )
    return _call_aoc_cli(args)


def download(day: Day) -> subprocess.CompletedProcess:
    """Download the input and puzzle description for ``day``."""
    input_path = get_input_path(day)
    puzzle_path = get_puzzle_path(day)
    args = build_args(
        "download",
        ["--overwrite", "--input-file", input_path, "--puzzle-file", puzzle_path],
        day,
    )
    output = _call_aoc_cli(args)
    print("---")
    print(f'🎄 Successfully wrote input to "{input_path}".')
    print(f'🎄 Successfully wrote puzzle to "{puzzle_path}".')
    return output


def submit(day: Day, part: int, result: str) -> subprocess.CompletedProcess:
    """Submit ``result`` as the answer to ``part`` of ``day``."""
    # The part and answer come after the subcommand for submit.
    args = build_args("submit", [], day)
    args += [str(part), str(result)]
    return _call_aoc_cli(args)


def get_input_path(day: Day) -> str:
    """Where the puzzle input for ``day`` is stored."""
    return f"data/inputs/{day}.txt"


def get_puzzle_path(day: Day) -> str:
    """Where the puzzle description for ``day`` is stored."""
    return f"data/puzzles/{day}.md"


def _get_year() -> int | None:
    text = os.environ.get("AOC_YEAR")
    if text is None:
        return None
    digits = text[1:] if text.startswith("+") else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        return None
    year = int(digits)
    return year if year <= 0xFFFF else None


def build_args(command: str, args: Sequence[str], day: Day) -> list[str]:
    """Arguments for an ``aoc`` call, honouring the AOC_YEAR variable."""
    cmd_args = list(args)
    year = _get_year()
    if year is not None:
        cmd_args += ["--year", str(year)]
    cmd_args += ["--day", str(day), command]
    return cmd_args


def _call_aoc_cli(args: Sequence[str]) -> subprocess.CompletedProcess:
    try:
        output = subprocess.run([AOC_COMMAND, *args], check=False)
    except OSError as err:
        raise CommandNotCallable() from err
    if output.returncode != 0:
        raise BadExitStatus(output)
    return output