"""Main CLI for disk-stats."""

import logging
import os

import typer
from InquirerPy import inquirer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from typer.core import TyperCommand

from disk_stats.config import DEFAULT_CONFIG, load_config, save_config
from disk_stats.models import TraversalContext
from disk_stats.scanner import collect_directory_tree
from disk_stats.utils.display import (
    display_banner,
    display_csv_help,
    display_preview,
    display_settings,
    display_tree,
    render_records,
)
from disk_stats.utils.export import write_csv
from disk_stats.utils.filesystem import csv_filename, normalize_path

app = typer.Typer(
    name="disk-stats",
    help="Report per-directory disk usage as an indented tree and a CSV table",
    add_completion=False,
)
console = Console()
error_console = Console(stderr=True)

USAGE_ERROR_EXIT = 2


class ReportCommand(TyperCommand):
    """Command whose usage errors exit with status 1."""

    def main(self, *args, **kwargs):
        try:
            return super().main(*args, **kwargs)
        except SystemExit as exc:
            # Usage errors exit with 2 in standalone mode
            if exc.code == USAGE_ERROR_EXIT:
                raise SystemExit(1) from exc
            raise


def configure_logging(verbose: bool) -> None:
    """Send package log records to stderr through Rich."""
    handler = RichHandler(console=error_console, show_path=False)
    package_logger = logging.getLogger("disk_stats")
    package_logger.handlers[:] = [handler]
    package_logger.propagate = False
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def run_setup_wizard(config: dict) -> None:
    """Prompt for new defaults and save them."""
    console.print(Panel.fit(
        "[bold cyan]Configuration Wizard[/]\n\n"
        "Set your default preferences",
        border_style="cyan",
    ))

    console.print("\n[bold cyan]Traversal[/]")
    new_max_depth = int(inquirer.number(
        message="Default maximum depth (root = 1):",
        default=int(config.get("max_depth") or DEFAULT_CONFIG["max_depth"]),
        min_allowed=1,
    ).execute())
    new_min_size = int(inquirer.number(
        message="Default minimum size (MB):",
        default=int(config.get("min_size_mb", DEFAULT_CONFIG["min_size_mb"])),
        min_allowed=0,
    ).execute())
    new_follow = inquirer.confirm(
        message="Follow symlinked directories?",
        default=bool(config.get("follow_symlinks", False)),
    ).execute()

    console.print("\n[bold cyan]Output[/]")
    new_prefix = inquirer.text(
        message="CSV filename prefix:",
        default=config.get("output_prefix") or DEFAULT_CONFIG["output_prefix"],
    ).execute().strip()

    save_config({
        "max_depth": new_max_depth,
        "min_size_mb": new_min_size,
        "output_prefix": new_prefix or DEFAULT_CONFIG["output_prefix"],
        "follow_symlinks": bool(new_follow),
    })
    console.print("\n[green]Configuration saved successfully![/]")


def fail(message: str, ctx: typer.Context | None = None) -> None:
    """Print an error (and usage, when given a context) and exit with status 1."""
    console.print(f"[red]Error: {escape(message)}[/]", soft_wrap=True)
    if ctx is not None:
        console.print(ctx.get_usage(), markup=False, highlight=False)
    raise typer.Exit(1)


@app.command(cls=ReportCommand, context_settings={"help_option_names": ["-h", "--help"]})
def main(
    ctx: typer.Context,
    directory: str | None = typer.Option(
        None,
        "--dir",
        "-d",
        help="Directory to analyze (required)",
    ),
    max_depth: int | None = typer.Option(
        None,
        "--max-depth",
        "-m",
        min=1,
        help="Maximum display depth, root = 1 (default: 3)",
    ),
    min_size: int | None = typer.Option(
        None,
        "--min-size",
        "-s",
        min=0,
        help="Minimum size to display in whole MB (default: 1)",
    ),
    output: str | None = typer.Option(
        None,
        "--output",
        "-o",
        help="CSV output filename prefix (default: disk_usage)",
    ),
    follow_symlinks: bool | None = typer.Option(
        None,
        "--follow-symlinks/--no-follow-symlinks",
        help="Descend into symlinked directories (default: from config, off)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging",
    ),
    setup: bool = typer.Option(
        False,
        "--setup",
        help="Run configuration wizard to set defaults",
    ),
) -> None:
    """Collect per-directory disk usage down to a depth and size threshold.

    Writes <prefix>_<sanitized-path>.csv and prints the tree.

    Examples:

        disk-stats -d /var/log                   # Defaults: depth 3, >= 1 MB

        disk-stats -d /opt -m 7 -s 1             # Deeper tree

        disk-stats -d / -m 2 -s 0 -o reports/fs  # Every top-level directory
    """
    configure_logging(verbose)

    # Load config and apply CLI overrides
    config = load_config()

    if setup:
        run_setup_wizard(config)
        raise typer.Exit(0)

    if not directory:
        fail("Target directory is required", ctx)
    if not os.path.isdir(directory):
        fail(f"Directory '{directory}' does not exist")

    try:
        depth_limit = max_depth if max_depth is not None else int(config["max_depth"])
        min_size_mb = min_size if min_size is not None else int(config["min_size_mb"])
        context = TraversalContext.from_megabytes(
            depth_limit,
            min_size_mb,
            follow_symlinks=(
                follow_symlinks
                if follow_symlinks is not None
                else bool(config.get("follow_symlinks"))
            ),
        )
    except (TypeError, ValueError) as exc:
        fail(f"Invalid settings: {exc}")

    root = normalize_path(directory)
    prefix = output or config.get("output_prefix") or DEFAULT_CONFIG["output_prefix"]
    csv_file = csv_filename(prefix, root)

    display_banner(console)
    display_settings(console, root, context, min_size_mb, csv_file)

    with console.status("[bold green]Collecting directory size information..."):
        result = collect_directory_tree(root, context, console=console)

    if not result.records:
        fail("No directory information collected")

    display_preview(console, result.records)

    report = render_records(result.records)

    console.print("\n[bold]Generating CSV file...[/]")
    try:
        write_csv(report, csv_file)
    except OSError as exc:
        fail(f"Could not write {csv_file}: {exc}")

    display_tree(console, report)
    console.print(
        f"\n[dim]Measured {result.directories_probed} directories, "
        f"pruned {result.pruned_small} below threshold, "
        f"skipped {result.skipped_visited} already visited[/]"
    )
    display_csv_help(console, csv_file)


if __name__ == "__main__":
    app()
