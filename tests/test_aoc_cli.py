import subprocess
from unittest import mock

import pytest

from adventofcode import aoc_cli
from adventofcode.aoc_cli import (
    AocCommandError,
    BadExitStatus,
    CommandNotCallable,
    CommandNotFound,
    build_args,
    check,
    download,
    get_input_path,
    get_puzzle_path,
    read,
    submit,
)
from adventofcode.day import Day


@pytest.fixture(autouse=True)
def no_year(monkeypatch):
    monkeypatch.delenv("AOC_YEAR", raising=False)


def test_paths_use_padded_day():
    assert get_input_path(Day(5)) == "data/inputs/05.txt"
    assert get_puzzle_path(Day(5)) == "data/puzzles/05.md"


def test_build_args_without_year():
    args = build_args("read", ["--x"], Day(3))
    assert args == ["--x", "--day", str(Day(3)), "read"]


def test_build_args_with_year(monkeypatch):
    monkeypatch.setenv("AOC_YEAR", "2025")
    args = build_args("download", [], Day(12))
    assert args[:2] == ["--year", "2025"]
    assert args[-1] == "download"


def test_build_args_ignores_invalid_year(monkeypatch):
    monkeypatch.setenv("AOC_YEAR", "not-a-year")
    assert "--year" not in build_args("read", [], Day(1))


def test_check_missing_command(monkeypatch, tmp_path):
    monkeypatch.setenv("PATH", str(tmp_path))
    with pytest.raises(CommandNotFound) as info:
        check()
    assert str(info.value) == "aoc-cli is not present in environment."


def test_read_not_callable(monkeypatch, tmp_path):
    monkeypatch.setenv("PATH", str(tmp_path))
    with pytest.raises(CommandNotCallable):
        read(Day(1))


def test_bad_exit_status_keeps_output():
    completed = subprocess.CompletedProcess(["aoc"], 2)
    with mock.patch.object(aoc_cli.subprocess, "run", return_value=completed):
        with pytest.raises(BadExitStatus) as info:
            read(Day(1))
    assert info.value.output is completed
    assert isinstance(info.value, AocCommandError)


def test_submit_puts_part_and_result_last():
    completed = subprocess.CompletedProcess(["aoc"], 0)
    with mock.patch.object(
        aoc_cli.subprocess, "run", return_value=completed
    ) as run:
        result = submit(Day(2), 1, "42")
    command = run.call_args[0][0]
    assert result is completed
    assert command[0] == "aoc"
    assert command[-3:] == ["submit", "1", "42"]


def test_download_reports_written_files(capsys):
    completed = subprocess.CompletedProcess(["aoc"], 0)
    with mock.patch.object(
        aoc_cli.subprocess, "run", return_value=completed
    ) as run:
        download(Day(4))
    command = run.call_args[0][0]
    assert get_input_path(Day(4)) in command
    assert get_puzzle_path(Day(4)) in command
    assert "--overwrite" in command
    out = capsys.readouterr().out
    assert f'Successfully wrote input to "{get_input_path(Day(4))}".' in out