"""Logging infrastructure with scan id tracking.

Every scan gets a short identifier stored in a ContextVar. A logging filter
stamps it on each record so that log lines from worker threads can be tied
back to the scan that produced them. Log output goes to stderr; stdout is
reserved for the report itself.
"""

import contextvars
import logging
import sys
import uuid
from collections.abc import Mapping
from typing import Final, override

# Scan id context variable; copied into executor workers by the aggregator
scan_id_var: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "scan_id",
    default=None,
)

DEFAULT_LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - [%(scan_id)s] - %(message)s"

DEFAULT_LOG_LEVEL: Final[str] = "WARNING"

VALID_LOG_LEVELS: Final[frozenset[str]] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR"})


class ScanIdFilter(logging.Filter):
    """Logging filter that adds the current scan id to log records."""

    @override
    def filter(self, record: logging.LogRecord) -> bool:
        """Add scan id to log record from ContextVar.

        Args:
            record: Log record to enhance with the scan id

        Returns:
            True to allow the record to be logged
        """
        scan_id = get_scan_id()
        record.scan_id = scan_id if scan_id is not None else "N/A"
        return True


def configure_logging(
    *,
    log_level: str = DEFAULT_LOG_LEVEL,
    enable_console: bool = True,
) -> None:
    """Configure application logging.

    Replaces any handlers on the root logger with a single stderr handler
    carrying the scan id filter.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        enable_console: Enable the stderr handler

    Example:
        >>> configure_logging(log_level="DEBUG")
        >>> logger = logging.getLogger(__name__)
        >>> logger.debug("Walker started")
    """
    root_logger = logging.getLogger()

    level = getattr(logging, log_level.upper(), logging.WARNING)
    root_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    if enable_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(logging.Formatter(DEFAULT_LOG_FORMAT))
        console_handler.addFilter(ScanIdFilter())
        root_logger.addHandler(console_handler)


def generate_scan_id() -> str:
    """Generate a new short scan id."""
    return uuid.uuid4().hex[:12]


def set_scan_id(scan_id: str) -> contextvars.Token[str | None]:
    """Set the scan id for the current context.

    Args:
        scan_id: Identifier for the running scan

    Returns:
        Token that can be passed to ``reset_scan_id`` to restore the previous value
    """
    return scan_id_var.set(scan_id)


def reset_scan_id(token: contextvars.Token[str | None]) -> None:
    """Restore the scan id that was active before ``set_scan_id``."""
    scan_id_var.reset(token)


def get_scan_id() -> str | None:
    """Get the current scan id from context."""
    return scan_id_var.get()


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    *,
    extra: Mapping[str, object] | None = None,
) -> None:
    """Log a message with additional context fields.

    Args:
        logger: Logger instance to use
        level: Logging level (e.g., logging.INFO)
        message: Log message
        extra: Additional context fields to include in log

    Example:
        >>> log_with_context(
        ...     logger,
        ...     logging.INFO,
        ...     "Scan finished",
        ...     extra={"files": 120, "directories": 14},
        ... )
    """
    context = dict(extra) if extra else {}
    logger.log(level, message, extra=context)
