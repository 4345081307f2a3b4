"""Shared utility modules for common operations.

This package provides pure, stateless helpers for:
- Data size formatting (bytes to human-readable)
- Time duration formatting (seconds to human-readable)
- Logging setup with scan id tracking
"""

from fscan.utils.formatting import (
    SIZE_UNITS,
    format_duration,
    format_size,
)

__all__ = [
    "SIZE_UNITS",
    "format_duration",
    "format_size",
]
