import subprocess
import sys
from unittest import mock

import pytest

from adventofcode import aoc_cli, commands
from adventofcode.day import Day, all_days
from adventofcode.readme_benchmarks import MARKER
from adventofcode.timings import Timing, Timings


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    for folder in ("adventofcode/solutions", "data/inputs", "data/examples"):
        (tmp_path / folder).mkdir(parents=True)
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_build_solve_args_plain():
    args = commands.build_solve_args(Day(1), False, False, None)
    assert args == [sys.executable, "-m", "adventofcode.solutions.day01"]


def test_build_solve_args_release_and_submit():
    args = commands.build_solve_args(Day(7), True, False, 2)
    assert args[1] == "-O"
    assert args[-2:] == ["--submit", "2"]
    assert "adventofcode.solutions.day07" in args


def test_build_solve_args_dhat_takes_precedence():
    args = commands.build_solve_args(Day(7), True, True, None)
    assert "-O" not in args
    assert "tracemalloc" in args


def test_select_days_single_day():
    assert commands.select_days(Day(4), False, Timings()) == {Day(4)}


def test_select_days_all():
    assert commands.select_days(None, True, Timings()) == set(all_days())


def test_select_days_skips_complete_days():
    stored = Timings(
        data=[
            Timing(day=Day(1), part_1="1ms", part_2="2ms", total_nanos=3.0),
            Timing(day=Day(2), part_1="1ms", part_2=None, total_nanos=1.0),
        ]
    )
    selected = commands.select_days(None, False, stored)
    assert Day(1) not in selected
    assert Day(2) in selected
    assert len(selected) == len(list(all_days())) - 1


def test_handle_scaffold_creates_files(workspace, capsys):
    commands.handle_scaffold(Day(3), False)
    module = workspace / "adventofcode" / "solutions" / "day03.py"
    content = module.read_text(encoding="utf-8")
    assert "%DAY_NUMBER%" not in content
    assert "Day(3)" in content
    assert (workspace / "data" / "inputs" / "03.txt").read_text() == ""
    assert (workspace / "data" / "examples" / "03.txt").read_text() == ""
    assert "Created module file" in capsys.readouterr().out


def test_handle_scaffold_refuses_to_overwrite(workspace, capsys):
    commands.handle_scaffold(Day(3), False)
    with pytest.raises(SystemExit) as info:
        commands.handle_scaffold(Day(3), False)
    assert info.value.code == 1
    assert "Failed to create module file" in capsys.readouterr().err


def test_handle_scaffold_overwrite(workspace, capsys):
    module = workspace / "adventofcode" / "solutions" / "day03.py"
    module.write_text("old", encoding="utf-8")
    commands.handle_scaffold(Day(3), True)
    content = module.read_text(encoding="utf-8")
    assert "old" != content
    assert "solution_main" in content
    assert "Day(3)" in content
    out = capsys.readouterr().out
    assert "Created module file" in out
    assert "Created empty input file" in out


def test_handle_download_without_aoc_exits(capsys):
    with mock.patch("adventofcode.aoc_cli.subprocess.run", side_effect=FileNotFoundError):
        with pytest.raises(SystemExit) as info:
            commands.handle_download(Day(1))
    assert info.value.code == 1
    assert 'command "aoc" not found' in capsys.readouterr().err


def test_handle_read_calls_aoc(monkeypatch):
    monkeypatch.delenv("AOC_YEAR", raising=False)
    day = Day(4)
    completed = subprocess.CompletedProcess(args=[], returncode=0)
    with mock.patch("adventofcode.aoc_cli.subprocess.run", return_value=completed) as run:
        commands.handle_read(day)
    expected = aoc_cli.build_args(
        "read", ["--description-only", "--puzzle-file", aoc_cli.get_puzzle_path(day)], day
    )
    assert run.call_args.args[0] == ["aoc", *expected]


def test_handle_read_failure_exits(capsys):
    completed = subprocess.CompletedProcess(args=[], returncode=1)
    with mock.patch("adventofcode.aoc_cli.subprocess.run", return_value=completed):
        with pytest.raises(SystemExit) as info:
            commands.handle_read(Day(4))
    assert info.value.code == 1
    assert "failed to call aoc-cli" in capsys.readouterr().err


def test_handle_solve_runs_child(monkeypatch):
    completed = subprocess.CompletedProcess(args=[], returncode=0)
    with mock.patch("adventofcode.commands.subprocess.run", return_value=completed) as run:
        commands.handle_solve(Day(2), True, False, 1)
    assert run.call_args.args[0] == commands.build_solve_args(Day(2), True, False, 1)


def test_handle_all_reports_unsolved_days(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    commands.handle_all(False)
    out = capsys.readouterr().out
    assert out.count("Not solved.") == len(list(all_days()))
    assert "Day 01" in out


def test_handle_time_stores_results(tmp_path, monkeypatch, capsys):
    (tmp_path / "data").mkdir()
    readme = tmp_path / "README.md"
    readme.write_text(f"intro\n{MARKER}{MARKER}\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    commands.handle_time(Day(1), False, True)

    assert Timings.read_from_file(tmp_path / "data" / "timings.json").data == []
    assert (tmp_path / "data" / "timings.json").exists()
    content = readme.read_text(encoding="utf-8")
    assert content.count(MARKER) == 2
    assert "## Benchmarks" in content
    assert "Stored updated benchmarks." in capsys.readouterr().out


def test_handle_time_without_store_writes_nothing(tmp_path, monkeypatch, capsys):
    (tmp_path / "data").mkdir()
    monkeypatch.chdir(tmp_path)
    commands.handle_time(Day(1), False, False)
    out = capsys.readouterr().out
    assert out.count("Not solved.") == 1
    assert "Total (Run):" in out
    assert "Stored updated benchmarks." not in out
    assert (tmp_path / "data" / "timings.json").exists() is False