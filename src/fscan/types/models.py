"""Data models for fscan.

This module defines immutable dataclasses used throughout the application
for type-safe data transfer between the walker, aggregator, pipeline and
exporter.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import override

from fscan.utils.formatting import format_size


def display_path(path: Path | str) -> str:
    """Render a filesystem path as printable text.

    Bytes that are not valid UTF-8 (carried as lone surrogates by os.scandir)
    are replaced with U+FFFD instead of failing on output.
    """
    return os.fsencode(path).decode("utf-8", "replace")


class EntryKind(str, Enum):
    """Kind of a report entry."""

    FILE = "File"
    DIRECTORY = "Directory"

    @override
    def __str__(self) -> str:
        """Return string representation."""
        return self.value


@dataclass(slots=True, frozen=True)
class WalkEntry:
    """Filesystem entry produced by the tree walker."""

    path: Path
    kind: EntryKind


@dataclass(slots=True, frozen=True)
class FileEntry:
    """One row of the final report: a single file or a directory total.

    Immutable once constructed. ``size_human`` always mirrors ``size_bytes``
    when built through ``from_size``.
    """

    path: str
    size_bytes: int
    size_human: str
    kind: EntryKind

    @classmethod
    def from_size(cls, path: Path | str, size: int, kind: EntryKind) -> FileEntry:
        """Create an entry, deriving the human-readable size.

        Args:
            path: Path of the file or directory
            size: Size in bytes
            kind: Whether the entry is a file or a directory

        Returns:
            New FileEntry
        """
        return cls(path=display_path(path), size_bytes=size, size_human=format_size(size), kind=kind)

    @property
    def is_directory(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


@dataclass(slots=True, frozen=True)
class AggregationResult:
    """Completed size maps of one scan.

    ``file_sizes`` maps each surviving file to its size. ``dir_sizes`` maps
    each directory to the sum of all surviving files beneath it.
    """

    root: Path
    file_sizes: Mapping[Path, int] = field(default_factory=dict)
    dir_sizes: Mapping[Path, int] = field(default_factory=dict)

    @property
    def total_files(self) -> int:
        return len(self.file_sizes)

    @property
    def total_dirs(self) -> int:
        return len(self.dir_sizes)

    @property
    def total_size(self) -> int:
        """Sum of all file sizes plus the sum of all directory totals.

        Nested content is counted once per level: a file's bytes appear in its
        own size and again in every ancestor's total.
        """
        return sum(self.file_sizes.values()) + sum(self.dir_sizes.values())

    @property
    def is_empty(self) -> bool:
        return not self.file_sizes and not self.dir_sizes
