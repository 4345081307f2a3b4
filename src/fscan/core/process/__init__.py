"""Process listing module: running processes ordered by memory usage."""

from __future__ import annotations

from .lister import ProcessLister, PsutilProcessLister
from .models import ProcessInfo
from .report import render_process_table

__all__ = [
    "ProcessInfo",
    "ProcessLister",
    "PsutilProcessLister",
    "render_process_table",
]
