"""Filesystem utilities for disk-stats."""

import logging
import os
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)

DU_TIMEOUT = 300


def normalize_path(path: str) -> str:
    """Canonicalize a directory path to an absolute, trailing-slash-free form.

    Existing, enterable directories resolve to their physical path (symlinks
    resolved), like ``cd DIR && pwd -P``. Anything else falls back to
    stripping trailing slashes, keeping "/" for the root.

    Args:
        path: Directory path

    Returns:
        Normalized path, or "" for an empty input
    """
    if not path:
        return ""

    candidate = Path(path)
    if candidate.is_dir() and os.access(candidate, os.X_OK):
        try:
            return str(candidate.resolve(strict=True))
        except OSError:
            logger.debug("Could not resolve %s, using lexical form", path)

    return path.rstrip("/") or "/"


def _run_du(flag: str, path: Path) -> int | None:
    """Run ``du -s<flag>`` and return the first column, or None."""
    try:
        result = subprocess.run(
            ["du", f"-s{flag}", str(path)],
            capture_output=True,
            text=True,
            timeout=DU_TIMEOUT,
        )
    except (subprocess.TimeoutExpired, OSError) as exc:
        logger.debug("du -s%s failed for %s: %s", flag, path, exc)
        return None

    # du exits non-zero on partially unreadable trees but still prints a total
    fields = result.stdout.split()
    if not fields:
        logger.debug("du -s%s produced no total for %s (exit %d)", flag, path, result.returncode)
        return None
    try:
        return int(fields[0])
    except ValueError:
        return None


def get_directory_size(path: Path | str) -> int:
    """Get total size of directory in bytes using the du command.

    Tries byte-exact accounting (GNU ``du -sb``) first, then falls back to
    ``du -sk`` multiplied up to bytes for du implementations without ``-b``.

    Args:
        path: Directory path

    Returns:
        Size in bytes, or 0 if error
    """
    path = Path(path)
    size = _run_du("b", path)
    if size is not None:
        return size

    kb = _run_du("k", path)
    if kb is not None:
        logger.debug("Using KB-granular size for %s", path)
        return kb * 1024

    logger.debug("Could not measure %s, reporting 0 bytes", path)
    return 0


def list_child_directories(path: Path | str, follow_symlinks: bool = False) -> list[str]:
    """List the immediate subdirectories of a directory, in listing order.

    Symlinks to directories are only included when follow_symlinks is set.

    Args:
        path: Directory to list
        follow_symlinks: Whether symlinked directories count as children

    Returns:
        List of child directory paths, empty if the directory can't be read
    """
    children = []
    try:
        for item in Path(path).iterdir():
            if item.is_symlink() and not follow_symlinks:
                continue
            if item.is_dir():
                children.append(str(item))
    except OSError as exc:
        # Skip directories we can't read
        logger.debug("Cannot list %s: %s", path, exc)
        return []

    return children


def sanitize_path(path: str) -> str:
    """Turn a normalized path into a filename fragment.

    Every "/" becomes "_" and one leading "_" is dropped; the root is "root".
    """
    if path == "/":
        return "root"
    sanitized = path.replace("/", "_")
    if sanitized.startswith("_"):
        sanitized = sanitized[1:]
    return sanitized or "root"


def csv_filename(prefix: str, path: str) -> str:
    """Build the CSV output filename for an analyzed path."""
    return f"{prefix}_{sanitize_path(path)}.csv"
