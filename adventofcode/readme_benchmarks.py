"""Keep the benchmark table in the README up to date."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from adventofcode.day import Day
from adventofcode.timings import Timings

MARKER = "<!--- benchmarking table --->"
README_PATH = "README.md"


class ReadmeError(ValueError):
    """Raised when the benchmark table cannot be located in the README."""


@dataclass(frozen=True)
class TablePosition:
    """Span of the benchmark table, markers included."""

    pos_start: int
    pos_end: int


def get_path_for_bin(day: Day) -> str:
    """Path of the solution module for ``day``."""
    return f"./adventofcode/solutions/day{day}.py"


def _marker_positions(readme: str) -> list[int]:
    positions = []
    start = readme.find(MARKER)
    while start != -1:
        positions.append(start)
        start = readme.find(MARKER, start + len(MARKER))
    return positions


def locate_table(readme: str) -> TablePosition:
    """Find the span between the first and last benchmark marker."""
    positions = _marker_positions(readme)
    if len(positions) > 2:
        raise ReadmeError("too many occurences of marker in README.")
    if not positions:
        raise ReadmeError("Could not find table start position.")
    return TablePosition(positions[0], positions[-1] + len(MARKER))


def construct_table(prefix: str, timings: Timings, total_millis: float) -> str:
    """Render the markdown benchmark table, wrapped in markers."""
    lines = [
        MARKER,
        f"{prefix} Benchmarks",
        "",
        "| Day | Part 1 | Part 2 |",
        "| :---: | :---: | :---:  |",
    ]
    for timing in timings.data:
        part_1 = timing.part_1 if timing.part_1 is not None else "-"
        part_2 = timing.part_2 if timing.part_2 is not None else "-"
        lines.append(
            f"| [Day {int(timing.day)}]({get_path_for_bin(timing.day)})"
            f" | `{part_1}` | `{part_2}` |"
        )
    lines.append("")
    lines.append(f"**Total: {total_millis:.2f}ms**")
    lines.append(MARKER)
    return "\n".join(lines)


def update_content(text: str, timings: Timings, total_millis: float) -> str:
    """Return ``text`` with its benchmark table replaced."""
    position = locate_table(text)
    table = construct_table("##", timings, total_millis)
    return text[: position.pos_start] + table + text[position.pos_end :]


def update(timings: Timings, path: str | Path = README_PATH) -> None:
    """Rewrite the benchmark table of the README at ``path``."""
    readme_path = Path(path)
    readme = readme_path.read_bytes().decode("utf-8", errors="replace")
    updated = update_content(readme, timings, timings.total_millis())
    with open(readme_path, "w", encoding="utf-8", newline="") as handle:
        handle.write(updated)