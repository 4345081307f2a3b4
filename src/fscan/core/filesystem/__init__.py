"""Filesystem operations module for tree walking and size aggregation."""

from __future__ import annotations

from .accumulator import SizeAccumulator
from .aggregator import Aggregator, read_file_size
from .walker import ScanStrategy, TreeWalker

__all__ = [
    "Aggregator",
    "ScanStrategy",
    "SizeAccumulator",
    "TreeWalker",
    "read_file_size",
]
