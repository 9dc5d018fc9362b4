"""CSV export for disk-stats."""

import csv
import logging
import os
import tempfile

from disk_stats.utils.display import CSV_HEADER, RenderedReport

logger = logging.getLogger(__name__)


def write_csv(report: RenderedReport, csv_file: str) -> None:
    """Write report rows to a CSV file, replacing it atomically.

    Text columns are quoted and numeric columns left bare. Rows go to a
    temporary file in the destination directory which is renamed into place,
    so a failed write never leaves a partial CSV behind.

    Args:
        report: Rendered report whose rows to write
        csv_file: Destination path

    Raises:
        OSError: If the file can't be written
    """
    directory = os.path.dirname(os.path.abspath(csv_file))
    fd, temp_path = tempfile.mkstemp(prefix=".disk_stats_", suffix=".tmp", dir=directory)
    try:
        with os.fdopen(fd, "w", newline="") as f:
            writer = csv.writer(f, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")
            # Header stays unquoted
            f.write(",".join(CSV_HEADER) + "\n")
            writer.writerows(report.rows)
        os.chmod(temp_path, 0o644)
        os.replace(temp_path, csv_file)
    except BaseException:
        logger.debug("Removing temporary file %s", temp_path)
        try:
            os.unlink(temp_path)
        except FileNotFoundError:
            pass
        raise

    logger.debug("Wrote %d rows to %s", len(report.rows), csv_file)
