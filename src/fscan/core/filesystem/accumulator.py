"""Thread-safe size accumulator shared by aggregation workers."""

from __future__ import annotations

import threading
from collections.abc import Hashable


class SizeAccumulator[K: Hashable]:
    """Associative accumulator with atomic read-modify-write operations.

    Every mutating call holds the lock for exactly one lookup-or-insert-then-add
    sequence, so concurrent additions under the same key are never lost. The
    lock is never held across I/O.
    """

    def __init__(self) -> None:
        self._lock: threading.Lock = threading.Lock()
        self._sizes: dict[K, int] = {}

    def record(self, key: K, size: int) -> None:
        """Store size under key, replacing any previous value."""
        with self._lock:
            self._sizes[key] = size

    def add(self, key: K, size: int) -> int:
        """Add size to the running total of key, creating it at 0 if unseen.

        Args:
            key: Entry to accumulate into
            size: Amount to add

        Returns:
            The new running total for key
        """
        with self._lock:
            total = self._sizes.get(key, 0) + size
            self._sizes[key] = total
            return total

    def ensure(self, key: K) -> None:
        """Register key with a total of 0 unless it already exists."""
        with self._lock:
            _ = self._sizes.setdefault(key, 0)

    def snapshot(self) -> dict[K, int]:
        """Return a copy of the accumulated totals."""
        with self._lock:
            return dict(self._sizes)

