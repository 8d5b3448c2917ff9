"""Reading puzzle data files and shared terminal styling."""

from __future__ import annotations

from pathlib import Path

from adventofcode.day import Day

ANSI_ITALIC = "\x1b[3m"
ANSI_BOLD = "\x1b[1m"
ANSI_RESET = "\x1b[0m"


def _data_path(folder: str, filename: str, base_dir: str | Path | None) -> Path:
    base = Path.cwd() if base_dir is None else Path(base_dir)
    return base / "data" / folder / filename


def read_file(folder: str, day: Day, base_dir: str | Path | None = None) -> str:
    """Read ``data/<folder>/<day>.txt`` below ``base_dir`` (default: cwd)."""
    return _data_path(folder, f"{day}.txt", base_dir).read_text(encoding="utf-8")


def read_file_part(
    folder: str, day: Day, part: int, base_dir: str | Path | None = None
) -> str:
    """Read ``data/<folder>/<day>-<part>.txt``, e.g. ``01-2.txt``."""
    return _data_path(folder, f"{day}-{part}.txt", base_dir).read_text(
        encoding="utf-8"
    )