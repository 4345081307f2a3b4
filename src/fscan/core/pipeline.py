"""Merge, filter and sort stages turning size maps into report entries."""

from __future__ import annotations

from collections.abc import Iterable

from fscan.types.models import AggregationResult, EntryKind, FileEntry


def merge_entries(result: AggregationResult) -> list[FileEntry]:
    """Build one FileEntry per map key, files first, then directories.

    Args:
        result: Completed aggregation maps

    Returns:
        Unsorted list of entries tagged with their kind
    """
    entries: list[FileEntry] = [
        FileEntry.from_size(path, size, EntryKind.FILE) for path, size in result.file_sizes.items()
    ]
    entries.extend(
        FileEntry.from_size(path, size, EntryKind.DIRECTORY) for path, size in result.dir_sizes.items()
    )
    return entries


def exclude_empty_directories(entries: Iterable[FileEntry]) -> list[FileEntry]:
    """Drop directories whose total is exactly zero.

    Zero-byte files are kept; only directory entries are affected.
    """
    return [entry for entry in entries if not (entry.is_directory and entry.size_bytes == 0)]


def sort_by_size(entries: Iterable[FileEntry]) -> list[FileEntry]:
    """Sort entries by size, largest first; ties keep their relative order."""
    return sorted(entries, key=lambda entry: entry.size_bytes, reverse=True)


def filter_and_sort(entries: Iterable[FileEntry], *, exclude_empty: bool = False) -> list[FileEntry]:
    """Apply the optional empty-directory filter, then sort descending by size.

    Args:
        entries: Merged file and directory entries
        exclude_empty: Drop directories with a total of zero

    Returns:
        Final ordered entry list
    """
    if exclude_empty:
        entries = exclude_empty_directories(entries)
    return sort_by_size(entries)
