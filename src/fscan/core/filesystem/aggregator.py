"""Concurrent size aggregation over a walked directory tree."""

from __future__ import annotations

import contextvars
import logging
import os
from collections.abc import Callable, Iterable
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from pathlib import Path

from fscan.types.models import AggregationResult, EntryKind, WalkEntry
from fscan.types.outcome import Err, Ok, Outcome

from .accumulator import SizeAccumulator
from .walker import TreeWalker

logger = logging.getLogger(__name__)

type SizeReader = Callable[[Path], Outcome[int]]

# Submitted-but-unfinished files per worker before the walker is paused
_IN_FLIGHT_PER_WORKER = 64


def read_file_size(path: Path) -> Outcome[int]:
    """Read the apparent size of a file.

    Args:
        path: File to stat

    Returns:
        Ok with the size in bytes, or Err if the metadata cannot be read
    """
    try:
        return Ok(path.stat().st_size)
    except OSError as e:
        return Err.from_exception(e, f"Cannot read size of {path}")


class Aggregator:
    """Aggregator building file and directory size maps in parallel.

    Each regular file is processed by a worker thread:
    1. its size is read (an unreadable file counts as 0)
    2. files at or below the threshold are discarded entirely
    3. the file size is recorded
    4. the size is added to every ancestor, from the immediate parent up to
       and including the traversal root

    Totals are exact regardless of worker count or interleaving. Without a
    threshold every walked directory is registered, so empty directories are
    reported with a total of 0; with a threshold, directories only exist
    through files that passed the filter.
    """

    def __init__(
        self,
        threshold: int | None = None,
        workers: int | None = None,
        size_reader: SizeReader = read_file_size,
    ) -> None:
        """Initialize the aggregator.

        Args:
            threshold: Files with a size at or below this byte count are ignored
            workers: Number of worker threads (None for the CPU count)
            size_reader: Function resolving a file's size
        """
        self.threshold: int | None = threshold
        self.workers: int = workers if workers is not None else (os.cpu_count() or 1)
        self.size_reader: SizeReader = size_reader

    def scan(self, root: Path, walker: TreeWalker | None = None) -> AggregationResult:
        """Walk root and aggregate the sizes found under it.

        Args:
            root: Directory to scan; made absolute before walking
            walker: Walker producing the entries (default depth-first walker)

        Returns:
            Completed AggregationResult
        """
        root = root.absolute()
        walker = walker or TreeWalker()
        return self.aggregate(walker.walk(root), root)

    def aggregate(self, entries: Iterable[WalkEntry], root: Path) -> AggregationResult:
        """Aggregate a stream of walk entries.

        The stream is consumed sequentially on the calling thread and files are
        fanned out to the worker pool. Nothing is returned until every file has
        been processed.

        Args:
            entries: Entries under root, in any order
            root: Traversal root where the ancestor walk stops

        Returns:
            Completed AggregationResult
        """
        file_sizes: SizeAccumulator[Path] = SizeAccumulator()
        dir_sizes: SizeAccumulator[Path] = SizeAccumulator()
        register_directories = self.threshold is None
        max_in_flight = self.workers * _IN_FLIGHT_PER_WORKER

        logger.debug(
            "Aggregating %s with %d worker(s), threshold=%s",
            root,
            self.workers,
            self.threshold,
        )

        with ThreadPoolExecutor(max_workers=self.workers, thread_name_prefix="fscan-aggregate") as executor:
            pending: set[Future[None]] = set()

            for entry in entries:
                if entry.kind is EntryKind.DIRECTORY:
                    if register_directories:
                        dir_sizes.ensure(entry.path)
                    continue

                # Fresh context copy per task so workers log with the scan id
                context = contextvars.copy_context()
                pending.add(
                    executor.submit(context.run, self._process_file, entry.path, root, file_sizes, dir_sizes)
                )

                if len(pending) >= max_in_flight:
                    done, pending = wait(pending, return_when=FIRST_COMPLETED)
                    for future in done:
                        future.result()

            done, _ = wait(pending)
            for future in done:
                future.result()

        return AggregationResult(
            root=root,
            file_sizes=file_sizes.snapshot(),
            dir_sizes=dir_sizes.snapshot(),
        )

    def _process_file(
        self,
        path: Path,
        root: Path,
        file_sizes: SizeAccumulator[Path],
        dir_sizes: SizeAccumulator[Path],
    ) -> None:
        """Record one file and attribute its size to its ancestors.

        Args:
            path: Regular file to process
            root: Traversal root
            file_sizes: Shared file size map
            dir_sizes: Shared directory total map
        """
        match self.size_reader(path):
            case Ok(value=size):
                pass
            case Err(message=message):
                logger.debug("%s; counting as 0 bytes", message)
                size = 0

        if self.threshold is not None and size <= self.threshold:
            return

        file_sizes.record(path, size)

        for ancestor in path.parents:
            _ = dir_sizes.add(ancestor, size)
            if ancestor == root:
                break
