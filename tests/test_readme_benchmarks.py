import pytest

from adventofcode.day import Day
from adventofcode.readme_benchmarks import (
    MARKER,
    ReadmeError,
    construct_table,
    get_path_for_bin,
    locate_table,
    update,
    update_content,
)
from adventofcode.timings import Timing, Timings


def mock_timings() -> Timings:
    return Timings(
        data=[
            Timing(Day(1), "10ms", "20ms", 3e10),
            Timing(Day(2), "30ms", "40ms", 7e10),
            Timing(Day(4), "40ms", "50ms", 9e10),
        ]
    )


def test_errors_if_marker_not_present():
    with pytest.raises(ReadmeError):
        update_content("# readme", mock_timings(), 190.0)


def test_errors_if_too_many_markers_present():
    with pytest.raises(ReadmeError):
        update_content(f"{MARKER} {MARKER} {MARKER}", mock_timings(), 190.0)


def test_updates_empty_benchmarks():
    s = update_content(f"foo\nbar\n{MARKER}{MARKER}\nbaz", mock_timings(), 190.0)
    assert "## Benchmarks" in s


def test_updates_existing_benchmarks():
    s = f"foo\nbar\n{MARKER}{MARKER}\nbaz"
    s = update_content(s, mock_timings(), 190.0)
    s = update_content(s, mock_timings(), 190.0)
    assert s.count(MARKER) == 2
    assert s.count("## Benchmarks") == 1


def test_format_benchmarks():
    s = update_content(f"foo\nbar\n{MARKER}\n{MARKER}\nbaz", mock_timings(), 190.0)
    expected = "\n".join(
        [
            "foo",
            "bar",
            "<!--- benchmarking table --->",
            "## Benchmarks",
            "",
            "| Day | Part 1 | Part 2 |",
            "| :---: | :---: | :---:  |",
            f"| [Day 1]({get_path_for_bin(Day(1))}) | `10ms` | `20ms` |",
            f"| [Day 2]({get_path_for_bin(Day(2))}) | `30ms` | `40ms` |",
            f"| [Day 4]({get_path_for_bin(Day(4))}) | `40ms` | `50ms` |",
            "",
            "**Total: 190.00ms**",
            "<!--- benchmarking table --->",
            "baz",
        ]
    )
    assert s == expected


def test_locate_table_spans_both_markers():
    text = f"ab{MARKER}xyz{MARKER}cd"
    position = locate_table(text)
    assert position.pos_start == 2
    assert text[position.pos_end :] == "cd"


def test_missing_parts_render_as_dash():
    table = construct_table("##", Timings([Timing(Day(3), None, "1ms", 0.0)]), 0.0)
    assert f"| [Day 3]({get_path_for_bin(Day(3))}) | `-` | `1ms` |" in table.splitlines()


def test_update_rewrites_file(tmp_path):
    readme = tmp_path / "README.md"
    readme.write_text(f"intro\n{MARKER}{MARKER}\nend", encoding="utf-8")
    update(mock_timings(), readme)
    content = readme.read_text(encoding="utf-8")
    assert "**Total: 190000.00ms**" in content
    assert content.startswith("intro\n")
    assert content.endswith("\nend")


def test_update_without_markers_raises(tmp_path):
    readme = tmp_path / "README.md"
    readme.write_text("nothing here", encoding="utf-8")
    with pytest.raises(ReadmeError):
        update(mock_timings(), readme)
    assert readme.read_text(encoding="utf-8") == "nothing here"