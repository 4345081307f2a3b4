"""Application module for fscan."""

from __future__ import annotations

from fscan.app.cli import cli
from fscan.app.runner import ScanReport, ScanRunner

__all__ = [
    "cli",
    "ScanReport",
    "ScanRunner",
]
