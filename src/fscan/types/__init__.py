"""Shared data types for fscan."""

from __future__ import annotations

from fscan.types.models import AggregationResult, EntryKind, FileEntry, WalkEntry
from fscan.types.outcome import Err, Ok, Outcome

__all__ = [
    "AggregationResult",
    "EntryKind",
    "Err",
    "FileEntry",
    "Ok",
    "Outcome",
    "WalkEntry",
]
