"""Data models for disk-stats."""

import os
from dataclasses import dataclass, field

BYTES_PER_KB = 1024
BYTES_PER_MB = 1024 * 1024


@dataclass(frozen=True)
class DirectoryRecord:
    """A directory that survived filtering, in tree pre-order."""

    depth: int  # 1 = traversal root
    path: str
    size_bytes: int

    @property
    def size_kb(self) -> int:
        """Size in whole KB (truncated)."""
        return self.size_bytes // BYTES_PER_KB

    @property
    def size_human(self) -> str:
        """Return human-readable size."""
        return format_size(self.size_bytes)

    @property
    def name(self) -> str:
        """Display name: the basename, or '/' for the filesystem root."""
        if self.path == "/":
            return "/"
        return os.path.basename(self.path)


@dataclass(frozen=True)
class TraversalContext:
    """Settings threaded through one recursive walk."""

    max_depth: int
    min_size_bytes: int
    follow_symlinks: bool = False

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {self.max_depth}")
        if self.min_size_bytes < 0:
            raise ValueError(
                f"min_size_bytes must not be negative, got {self.min_size_bytes}"
            )

    @classmethod
    def from_megabytes(
        cls, max_depth: int, min_size_mb: int, follow_symlinks: bool = False
    ) -> "TraversalContext":
        """Build a context from a threshold given in whole megabytes."""
        return cls(
            max_depth=max_depth,
            min_size_bytes=min_size_mb * BYTES_PER_MB,
            follow_symlinks=follow_symlinks,
        )


@dataclass
class CollectionResult:
    """Result of collecting one directory tree."""

    root: str
    context: TraversalContext
    records: list[DirectoryRecord] = field(default_factory=list)
    # Walk statistics
    directories_probed: int = 0
    pruned_small: int = 0
    skipped_visited: int = 0

    @property
    def total_size_bytes(self) -> int:
        """Size of the root record, 0 when nothing was collected."""
        return self.records[0].size_bytes if self.records else 0


def format_size(bytes_size) -> str:
    """Format bytes as a coarse bytes/KB/MB string using integer division.

    Anything that is not a non-negative integer (or a string of digits)
    is rendered as "0 bytes".
    """
    if isinstance(bytes_size, str) and bytes_size.isascii() and bytes_size.isdigit():
        bytes_size = int(bytes_size)
    if isinstance(bytes_size, bool) or not isinstance(bytes_size, int) or bytes_size < 0:
        return "0 bytes"

    if bytes_size >= BYTES_PER_MB:
        return f"{bytes_size // BYTES_PER_MB} MB"
    if bytes_size >= BYTES_PER_KB:
        return f"{bytes_size // BYTES_PER_KB} KB"
    return f"{bytes_size} bytes"
