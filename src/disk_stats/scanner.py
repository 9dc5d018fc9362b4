"""Scanner that collects a pruned, size-sorted directory tree."""

import logging
from pathlib import Path
from typing import Callable

from rich.console import Console
from rich.markup import escape

from disk_stats.models import CollectionResult, DirectoryRecord, TraversalContext
from disk_stats.utils import filesystem
from disk_stats.utils.filesystem import list_child_directories, normalize_path

logger = logging.getLogger(__name__)

SizeProbe = Callable[[str], int]


class VisitedSet:
    """Normalized paths already processed during one collection run."""

    def __init__(self) -> None:
        self._paths: set[str] = set()

    def has_visited(self, path: str) -> bool:
        """Empty paths are never considered visited."""
        if not path:
            return False
        return path in self._paths

    def mark_visited(self, path: str) -> None:
        if path:
            self._paths.add(path)

    def __contains__(self, path: str) -> bool:
        return self.has_visited(path)

    def __len__(self) -> int:
        return len(self._paths)


def collect_directory_tree(
    root: str,
    context: TraversalContext,
    size_of: SizeProbe | None = None,
    visited: VisitedSet | None = None,
    console: Console | None = None,
) -> CollectionResult:
    """Walk a directory tree and collect records for large enough directories.

    Records come out in pre-order with siblings sorted by descending size.
    The root is always emitted. Deeper directories smaller than
    ``context.min_size_bytes`` are dropped together with their subtrees, and
    nothing deeper than ``context.max_depth`` is visited.

    Args:
        root: Directory to start from
        context: Depth limit, size threshold and symlink policy
        size_of: Size probe, defaults to du-based measurement
        visited: Visited set to share, a fresh one per call by default
        console: Optional Rich console for progress updates

    Returns:
        CollectionResult with the ordered records and walk statistics
    """
    if size_of is None:
        size_of = filesystem.get_directory_size
    if visited is None:
        visited = VisitedSet()

    result = CollectionResult(root=normalize_path(root), context=context)

    if not Path(result.root).is_dir():
        if console:
            console.print(f"[yellow]Warning: Root {escape(result.root)} is not a directory[/]")
        logger.warning("Root %r is not a directory", root)

    def probe(path: str) -> int:
        result.directories_probed += 1
        return max(int(size_of(path)), 0)

    def visit(directory: str, depth: int, known_size: int | None = None) -> None:
        current = normalize_path(directory)
        if not current or visited.has_visited(current):
            result.skipped_visited += 1
            logger.debug("Skipping %r, already visited or unnormalizable", directory)
            return

        visited.mark_visited(current)

        size = known_size if known_size is not None else probe(current)

        if size < context.min_size_bytes and depth > 1:
            result.pruned_small += 1
            logger.debug("Pruned %s (%d bytes) at depth %d", current, size, depth)
            return

        result.records.append(DirectoryRecord(depth=depth, path=current, size_bytes=size))

        if depth >= context.max_depth or size < context.min_size_bytes:
            return

        candidates: list[tuple[int, str]] = []
        for child in list_child_directories(current, context.follow_symlinks):
            child_normalized = normalize_path(child)
            if not child_normalized or child_normalized == current:
                continue
            if visited.has_visited(child_normalized):
                result.skipped_visited += 1
                logger.debug("Skipping %s, already visited", child_normalized)
                continue

            child_size = probe(child_normalized)
            # Direct children of the root are always walked, even when small
            if child_size >= context.min_size_bytes or depth == 1:
                candidates.append((child_size, child_normalized))

        # Stable sort keeps listing order for equal sizes
        candidates.sort(key=lambda item: item[0], reverse=True)

        for child_size, child in candidates:
            if Path(child).is_dir():
                visit(child, depth + 1, known_size=child_size)

    visit(root, 1)
    return result
