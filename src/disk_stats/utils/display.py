"""Display utilities for disk-stats using Rich."""

from dataclasses import dataclass

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from disk_stats.models import DirectoryRecord, TraversalContext

INDENT_UNIT = "  "
PREVIEW_LIMIT = 10

CSV_HEADER = ["Level", "Path", "Size_Bytes", "Size_KB", "Size_Human"]

CSV_COLUMN_HELP = [
    ("Level", "Directory depth (1=root, 2=first-level subdirectory, etc.)"),
    ("Path", "Absolute path"),
    ("Size_Bytes", "Size in bytes (for precise calculations)"),
    ("Size_KB", "Size in KB"),
    ("Size_Human", "Human-readable size"),
]

SPREADSHEET_TIPS = [
    "After importing the CSV, use Data -> Group to build collapsible hierarchies.",
    "Sort by the Level column to inspect the structure more easily.",
    "Use filters to quickly locate large directories.",
]


@dataclass
class RenderedReport:
    """Human-readable tree lines and CSV rows for one set of records."""

    lines: list[str]
    rows: list[list]


def render_records(records: list[DirectoryRecord]) -> RenderedReport:
    """Render records as an indented listing and as table rows.

    Indentation follows the depth of the previous record: it grows by one
    unit per level of increase and shrinks by one unit per level of
    decrease, never below zero.

    Args:
        records: Records in collection order

    Returns:
        RenderedReport with one line and one row per record
    """
    lines = []
    rows = []
    indent = ""
    prev_depth = 1

    for record in records:
        if record.depth > prev_depth:
            indent += INDENT_UNIT * (record.depth - prev_depth)
        elif record.depth < prev_depth:
            remove = len(INDENT_UNIT) * (prev_depth - record.depth)
            indent = indent[: max(len(indent) - remove, 0)]
        prev_depth = record.depth

        lines.append(f"Depth {record.depth}: {indent}{record.name} - {record.size_human}")
        rows.append(
            [
                record.depth,
                record.path,
                record.size_bytes,
                record.size_kb,
                record.size_human,
            ]
        )

    return RenderedReport(lines=lines, rows=rows)


def display_banner(console: Console) -> None:
    """Print the startup banner."""
    console.print(
        Panel.fit(
            "[bold cyan]Disk Usage Statistics[/]\n\n"
            "Per-directory usage, pruned by size and depth",
            border_style="cyan",
        )
    )


def display_settings(
    console: Console, root: str, context: TraversalContext, min_size_mb: int, csv_file: str
) -> None:
    """Print the settings of the run about to start."""
    console.print(f"Starting statistics for: [bold]{escape(root)}[/]")
    console.print(f"Maximum display depth: {context.max_depth}")
    console.print(f"Minimum display size: {min_size_mb} MB")
    if context.follow_symlinks:
        console.print("Following symlinked directories")
    console.print(f"Output file: {escape(csv_file)}\n")


def display_preview(console: Console, records: list[DirectoryRecord]) -> None:
    """Print the first raw records as collected."""
    console.print("Collected directory information:")
    for record in records[:PREVIEW_LIMIT]:
        console.print(
            f"{record.depth}|{record.path}|{record.size_bytes}",
            markup=False,
            highlight=False,
            soft_wrap=True,
        )


def display_tree(console: Console, report: RenderedReport) -> None:
    """Print the indented directory tree."""
    for line in report.lines:
        console.print(line, markup=False, highlight=False, soft_wrap=True)


def display_csv_help(console: Console, csv_file: str) -> None:
    """Explain the CSV columns and how to use the file in a spreadsheet."""
    console.print(f"\n[bold green]Statistics complete![/] Results saved to: {escape(csv_file)}\n")

    table = Table(title="CSV file details")
    table.add_column("Column", style="cyan")
    table.add_column("Meaning")
    for column, meaning in CSV_COLUMN_HELP:
        table.add_row(column, meaning)
    console.print(table)

    console.print("\n[bold]Tips for use in Excel:[/]")
    for idx, tip in enumerate(SPREADSHEET_TIPS, 1):
        console.print(f"{idx}. {tip}")
