"""Result types for operations that may fail per item.

A scan is best-effort: an unreadable file or a failed export must never stop
the run. Instead of swallowing exceptions in place, such operations return an
``Outcome`` and the caller decides, with an explicit ``match``, to discard
the failure.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Ok[T]:
    """Successful outcome carrying a value."""

    value: T


@dataclass(slots=True, frozen=True)
class Err:
    """Failed outcome carrying the original exception."""

    error: Exception
    message: str

    @classmethod
    def from_exception(cls, exc: Exception, context: str) -> Err:
        """Build an Err with a message prefixed by what was being attempted.

        Args:
            exc: Exception that caused the failure
            context: Short description of the failed operation

        Returns:
            Err wrapping the exception
        """
        return cls(error=exc, message=f"{context}: {exc}")


type Outcome[T] = Ok[T] | Err
