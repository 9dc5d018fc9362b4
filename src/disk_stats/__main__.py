"""Entry point for disk-stats CLI."""

from disk_stats.cli import app


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
