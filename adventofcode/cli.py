"""Command-line entry point for managing and running solutions."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass

from adventofcode.commands import (
    handle_all,
    handle_download,
    handle_read,
    handle_scaffold,
    handle_solve,
    handle_time,
)
from adventofcode.day import Day, DayFromStrError


class CliError(ValueError):
    """Raised when the command line cannot be parsed."""


@dataclass(frozen=True)
class AppArguments:
    """A parsed command with its options."""

    command: str
    day: Day | None = None
    download: bool = False
    overwrite: bool = False
    release: bool = False
    dhat: bool = False
    submit: int | None = None
    run_all: bool = False
    store: bool = False


def _parse_u8(text: str) -> int | None:
    digits = text[1:] if text.startswith("+") else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        return None
    value = int(digits)
    return value if value <= 255 else None


class _ArgumentQueue:
    """Consumes arguments one kind at a time; whatever is left is unknown."""

    def __init__(self, argv: Sequence[str]) -> None:
        self._items = list(argv)

    def subcommand(self) -> str | None:
        if not self._items or self._items[0].startswith("-"):
            return None
        return self._items.pop(0)

    def contains(self, flag: str) -> bool:
        if flag in self._items:
            self._items.remove(flag)
            return True
        return False

    @staticmethod
    def _day(text: str) -> Day:
        try:
            return Day.parse(text)
        except DayFromStrError as err:
            raise CliError(f"failed to parse '{text}': {err}") from err

    def free_day(self) -> Day:
        if not self._items:
            raise CliError("the free-standing argument is missing")
        return self._day(self._items.pop(0))

    def opt_free_day(self) -> Day | None:
        if not self._items:
            return None
        return self._day(self._items.pop(0))

    def opt_u8(self, key: str) -> int | None:
        value = None
        for position, item in enumerate(self._items):
            if item == key:
                if position + 1 >= len(self._items):
                    raise CliError(f"the '{key}' option doesn't have an associated value")
                value = self._items[position + 1]
                del self._items[position : position + 2]
                break
            if item.startswith(key + "="):
                value = item[len(key) + 1 :]
                del self._items[position]
                break
        if value is None:
            return None
        number = _parse_u8(value)
        if number is None:
            raise CliError(f"failed to parse '{key}' value '{value}'")
        return number

    def finish(self) -> list[str]:
        remaining, self._items = self._items, []
        return remaining


def parse_args(argv: Sequence[str]) -> AppArguments:
    """Parse the command line (without the program name)."""
    args = _ArgumentQueue(argv)

    match args.subcommand():
        case "all":
            parsed = AppArguments("all", release=args.contains("--release"))
        case "time":
            run_all = args.contains("--all")
            store = args.contains("--store")
            parsed = AppArguments(
                "time", day=args.opt_free_day(), run_all=run_all, store=store
            )
        case "download":
            parsed = AppArguments("download", day=args.free_day())
        case "read":
            parsed = AppArguments("read", day=args.free_day())
        case "scaffold":
            day = args.free_day()
            parsed = AppArguments(
                "scaffold",
                day=day,
                download=args.contains("--download"),
                overwrite=args.contains("--overwrite"),
            )
        case "solve":
            day = args.free_day()
            release = args.contains("--release")
            submit = args.opt_u8("--submit")
            parsed = AppArguments(
                "solve",
                day=day,
                release=release,
                submit=submit,
                dhat=args.contains("--dhat"),
            )
        case "today":
            parsed = AppArguments("today")
        case None:
            raise CliError("No command specified.")
        case other:
            raise CliError(f"Unknown command: {other}")

    remaining = args.finish()
    if remaining:
        listed = ", ".join(f'"{item}"' for item in remaining)
        print(f"Warning: unknown argument(s): [{listed}].", file=sys.stderr)

    return parsed


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command given on the command line."""
    try:
        args = parse_args(sys.argv[1:] if argv is None else argv)
    except CliError as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1

    match args.command:
        case "all":
            handle_all(args.release)
        case "time":
            handle_time(args.day, args.run_all, args.store)
        case "download":
            handle_download(args.day)
        case "read":
            handle_read(args.day)
        case "scaffold":
            handle_scaffold(args.day, args.overwrite)
            if args.download:
                handle_download(args.day)
        case "solve":
            handle_solve(args.day, args.release, args.dhat, args.submit)
        case "today":
            day = Day.today()
            if day is None:
                print(
                    "`today` command can only be run between the 1st and the 25th "
                    "of december. Please use `scaffold` with a specific day.",
                    file=sys.stderr,
                )
                return 1
            handle_scaffold(day, False)
            handle_download(day)
            handle_read(day)
    return 0


if __name__ == "__main__":
    sys.exit(main())