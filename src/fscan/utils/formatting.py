"""Pure formatting utilities for human-readable output.

This module provides stateless formatting functions for converting raw byte
counts and durations into human-readable strings. All functions are pure with
no side effects.
"""

from typing import Final

# Binary unit ladder (1024-based); stops at TB, there is no PB unit
SIZE_UNITS: Final[tuple[str, ...]] = ("B", "KB", "MB", "GB", "TB")

_KB_FLOAT = 1024.0

# Time unit constants
_MINUTE = 60
_HOUR = _MINUTE * 60  # 3,600
_DAY = _HOUR * 24  # 86,400


def format_size(size: int) -> str:
    """Convert bytes to a human-readable size string.

    Repeatedly divides by 1024 while the value is at least 1024 and a larger
    unit remains, then renders exactly two decimals, a space and the unit.

    Args:
        size: Number of bytes to format (must be non-negative)

    Returns:
        Human-readable string such as ``"1.50 KB"``.

    Examples:
        >>> format_size(0)
        '0.00 B'
        >>> format_size(1536)
        '1.50 KB'
        >>> format_size(1099511627776)
        '1.00 TB'
        >>> format_size(1024**5)
        '1024.00 TB'
    """
    if size < 0:
        msg = "size must be non-negative"
        raise ValueError(msg)

    value = float(size)
    unit = 0
    while value >= _KB_FLOAT and unit < len(SIZE_UNITS) - 1:
        value /= _KB_FLOAT
        unit += 1

    return f"{value:.2f} {SIZE_UNITS[unit]}"


def format_duration(seconds: float) -> str:
    """Convert seconds to human-readable duration format.

    Shows the two most significant units. Durations under a minute keep
    millisecond resolution, since most scans finish in well under a minute.

    Args:
        seconds: Duration in seconds (must be non-negative)

    Returns:
        Human-readable duration string with adaptive granularity.

    Examples:
        >>> format_duration(0.25)
        '0.25s'
        >>> format_duration(90)
        '1m 30s'
        >>> format_duration(3665)
        '1h 1m'
        >>> format_duration(90000)
        '1d 1h'
    """
    if seconds < 0:
        msg = "seconds must be non-negative"
        raise ValueError(msg)

    if seconds < _MINUTE:
        return f"{seconds:.2f}s"

    total_seconds = int(seconds)

    if total_seconds >= _DAY:
        days = total_seconds // _DAY
        hours = (total_seconds % _DAY) // _HOUR
        return f"{days}d {hours}h" if hours > 0 else f"{days}d"

    if total_seconds >= _HOUR:
        hours = total_seconds // _HOUR
        minutes = (total_seconds % _HOUR) // _MINUTE
        return f"{hours}h {minutes}m" if minutes > 0 else f"{hours}h"

    minutes = total_seconds // _MINUTE
    remaining = total_seconds % _MINUTE
    return f"{minutes}m {remaining}s" if remaining > 0 else f"{minutes}m"
