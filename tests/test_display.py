"""Tests for rendering and console output."""

from rich.console import Console

from disk_stats.models import DirectoryRecord, TraversalContext
from disk_stats.utils.display import (
    display_csv_help,
    display_preview,
    display_settings,
    display_tree,
    render_records,
)

MB = 1024 * 1024


def records(*items):
    return [DirectoryRecord(depth, path, size) for depth, path, size in items]


class TestRenderRecords:
    """Test render_records function."""

    def test_indentation_follows_depth(self):
        report = render_records(records(
            (1, "/a", 10 * MB),
            (2, "/a/b", 6 * MB),
            (3, "/a/b/c", 4 * MB),
            (3, "/a/b/d", 2 * MB),
            (2, "/a/e", 3 * MB),
        ))

        assert report.lines == [
            "Depth 1: a - 10 MB",
            "Depth 2:   b - 6 MB",
            "Depth 3:     c - 4 MB",
            "Depth 3:     d - 2 MB",
            "Depth 2:   e - 3 MB",
        ]

    def test_multi_level_decrease(self):
        report = render_records(records(
            (1, "/a", 3 * MB),
            (2, "/a/b", 2 * MB),
            (3, "/a/b/c", 2 * MB),
            (4, "/a/b/c/d", MB),
            (2, "/a/e", MB),
        ))

        assert report.lines[-1] == "Depth 2:   e - 1 MB"

    def test_indent_never_negative(self):
        report = render_records(records((2, "/x/y", 2048), (1, "/x", 4096)))
        assert report.lines == ["Depth 2:   y - 2 KB", "Depth 1: x - 4 KB"]

    def test_root_display_name(self):
        report = render_records(records((1, "/", 500)))
        assert report.lines == ["Depth 1: / - 500 bytes"]

    def test_rows(self):
        report = render_records(records((1, "/a", 5 * MB + 1), (2, "/a/b", 1500)))
        assert report.rows == [
            [1, "/a", 5 * MB + 1, 5120, "5 MB"],
            [2, "/a/b", 1500, 1, "1 KB"],
        ]

    def test_empty(self):
        report = render_records([])
        assert report.lines == []
        assert report.rows == []


def recording_console():
    return Console(record=True, width=120, force_terminal=False)


class TestConsoleViews:
    """Console output helpers."""

    def test_preview_limited_to_ten(self):
        console = recording_console()
        items = [DirectoryRecord(2, f"/r/d{i}", i) for i in range(15)]

        display_preview(console, items)

        text = console.export_text()
        assert "2|/r/d9|9" in text
        assert "/r/d10" not in text

    def test_tree_keeps_brackets(self):
        console = recording_console()
        display_tree(console, render_records(records((1, "/srv/[data]", 10))))
        assert "Depth 1: [data] - 10 bytes" in console.export_text()

    def test_settings(self):
        console = recording_console()
        display_settings(console, "/bmhmi", TraversalContext.from_megabytes(7, 1), 1, "disk_usage_bmhmi.csv")
        text = console.export_text()
        assert "Starting statistics for: /bmhmi" in text
        assert "Maximum display depth: 7" in text
        assert "Minimum display size: 1 MB" in text
        assert "Output file: disk_usage_bmhmi.csv" in text

    def test_csv_help(self):
        console = recording_console()
        display_csv_help(console, "out.csv")
        text = console.export_text()
        assert "Results saved to: out.csv" in text
        assert "Size_Human" in text
        assert "Data -> Group" in text
