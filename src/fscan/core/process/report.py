"""Table rendering for the process memory listing."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from .models import ProcessInfo

_NAME_WIDTH = 40


def _truncate(name: str, width: int = _NAME_WIDTH) -> str:
    return name if len(name) <= width else name[: width - 1] + "…"


def render_process_table(processes: Sequence[ProcessInfo], stream: TextIO | None = None) -> None:
    """Print processes as a box-drawn table followed by a totals line.

    Args:
        processes: Processes in display order
        stream: Output stream (default: sys.stdout)
    """
    out = stream if stream is not None else sys.stdout
    total_memory_mb = sum(p.memory_mb for p in processes)

    print("\nRunning Processes by Memory Usage", file=out)
    print(f"┌───────┬{'─' * (_NAME_WIDTH + 2)}┬─────────────┐", file=out)
    print(f"│ {'PID':<5} │ {'Process Name':<{_NAME_WIDTH}} │ {'Memory MB':>11} │", file=out)
    print(f"├───────┼{'─' * (_NAME_WIDTH + 2)}┼─────────────┤", file=out)

    for process in processes:
        print(
            f"│ {process.pid:<5} │ {_truncate(process.name):<{_NAME_WIDTH}} │ {process.memory_mb:>11.2f} │",
            file=out,
        )

    print(f"└───────┴{'─' * (_NAME_WIDTH + 2)}┴─────────────┘", file=out)
    print(
        f"\nSummary -> Total Processes: {len(processes)}, Total Memory Used: {total_memory_mb:.2f} MB",
        file=out,
    )
