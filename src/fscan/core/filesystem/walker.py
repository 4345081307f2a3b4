"""Tree walker producing a lazy stream of filesystem entries."""

from __future__ import annotations

import logging
import os
from collections import deque
from collections.abc import Iterator
from enum import Enum
from pathlib import Path

from fscan.types.models import EntryKind, WalkEntry

logger = logging.getLogger(__name__)


class ScanStrategy(str, Enum):
    """Enumeration for directory traversal strategies."""

    DEPTH_FIRST = "depth_first"
    BREADTH_FIRST = "breadth_first"


class TreeWalker:
    """Walker for traversing directory trees on a best-effort basis.

    Provides stack- and queue-based traversal with:
    - Lazy, single-pass generators (call ``walk`` again to restart)
    - Depth-first or breadth-first ordering
    - Entry types read from ``os.scandir`` handles without following symlinks
    - Silent skipping of unreadable directories and entries

    Symbolic links are neither followed nor reported. Only regular files and
    the directories descended into are yielded.
    """

    def __init__(self, strategy: ScanStrategy = ScanStrategy.DEPTH_FIRST) -> None:
        """Initialize the tree walker.

        Args:
            strategy: Traversal strategy to use
        """
        self.strategy: ScanStrategy = strategy

    def walk(self, root: Path) -> Iterator[WalkEntry]:
        """Yield every regular file and directory under root.

        The root itself is yielded first as a directory entry.

        Args:
            root: Directory to walk

        Yields:
            WalkEntry objects in no guaranteed order
        """
        yield WalkEntry(root, EntryKind.DIRECTORY)

        if self.strategy == ScanStrategy.BREADTH_FIRST:
            yield from self._walk_breadth_first(root)
        else:
            yield from self._walk_depth_first(root)

    def _walk_depth_first(self, path: Path) -> Iterator[WalkEntry]:
        """Perform depth-first traversal below path.

        Args:
            path: Directory path to walk

        Yields:
            WalkEntry objects for the contents of path
        """
        stack: list[Path] = [path]

        while stack:
            current = stack.pop()
            subdirectories: list[Path] = []
            for entry in self._read_directory(current):
                yield entry
                if entry.kind is EntryKind.DIRECTORY:
                    subdirectories.append(entry.path)
            # Reversed so the first listed subdirectory is descended into first
            stack.extend(reversed(subdirectories))

    def _walk_breadth_first(self, path: Path) -> Iterator[WalkEntry]:
        """Perform breadth-first traversal below path.

        Args:
            path: Root directory to walk

        Yields:
            WalkEntry objects for the contents of path
        """
        queue: deque[Path] = deque([path])

        while queue:
            current = queue.popleft()
            for entry in self._read_directory(current):
                yield entry
                if entry.kind is EntryKind.DIRECTORY:
                    queue.append(entry.path)

    def _read_directory(self, path: Path) -> list[WalkEntry]:
        """List the regular files and subdirectories directly inside path.

        The listing is materialised so the directory handle is closed before
        the caller descends.

        Args:
            path: Directory to list

        Returns:
            Entries found, empty if the directory cannot be read
        """
        entries: list[WalkEntry] = []
        try:
            with os.scandir(path) as it:
                for item in it:
                    kind = self._classify(item)
                    if kind is not None:
                        entries.append(WalkEntry(Path(item.path), kind))
        except OSError as e:
            # Permission denied, directory removed mid-walk, etc.
            logger.debug("Skipping unreadable directory %s: %s", path, e)
        return entries

    @staticmethod
    def _classify(item: os.DirEntry[str]) -> EntryKind | None:
        """Classify a directory entry, ignoring symlinks and special files.

        Args:
            item: Entry returned by os.scandir

        Returns:
            EntryKind for regular files and directories, None otherwise
        """
        try:
            if item.is_dir(follow_symlinks=False):
                return EntryKind.DIRECTORY
            if item.is_file(follow_symlinks=False):
                return EntryKind.FILE
        except OSError as e:
            logger.debug("Skipping entry %s: %s", item.path, e)
        return None
