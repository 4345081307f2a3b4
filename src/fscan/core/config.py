"""Configuration system for fscan scans.

fscan reads no configuration files and no environment variables; the
configuration of a scan is the command-line input. This module validates it
with Pydantic and reports problems as ``ConfigurationError`` with actionable,
field-level messages before any traversal starts.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Annotated, Final, override

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

_MIB: Final[int] = 1024 * 1024


class OutputFormat(str, Enum):
    """Export mode of a scan."""

    CSV = "csv"
    JSON = "json"
    SUMMARY = "summary"

    @classmethod
    def from_string(cls, value: str) -> OutputFormat:
        """Create OutputFormat from string value.

        Args:
            value: String value to convert (case-insensitive)

        Returns:
            OutputFormat enum value

        Raises:
            ValueError: If value is not a valid output format
        """
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(f"Invalid output format: '{value}'") from None

    @override
    def __str__(self) -> str:
        return self.value


class SkipLimit(str, Enum):
    """Minimum size filter; only files strictly larger than the limit survive."""

    SKIP_64 = "skip-64"
    SKIP_128 = "skip-128"
    SKIP_256 = "skip-256"
    SKIP_512 = "skip-512"
    SKIP_1024 = "skip-1024"
    SKIP_2048 = "skip-2048"

    @classmethod
    def from_string(cls, value: str) -> SkipLimit:
        """Create SkipLimit from string value.

        Args:
            value: String value such as ``"skip-256"`` (case-insensitive)

        Returns:
            SkipLimit enum value

        Raises:
            ValueError: If value is not a valid skip limit
        """
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(f"Invalid skip limit: '{value}'") from None

    @property
    def megabytes(self) -> int:
        return int(self.value.removeprefix("skip-"))

    @property
    def threshold_bytes(self) -> int:
        """Byte cutoff for this limit (N * 1024 * 1024)."""
        return self.megabytes * _MIB

    @override
    def __str__(self) -> str:
        return self.value


class ScanConfig(BaseModel):
    """Validated configuration of a single scan invocation."""

    root: Annotated[Path, Field(description="Directory to scan")]
    output_format: Annotated[
        OutputFormat,
        Field(description="Export mode: csv, json or summary"),
    ]
    skip: Annotated[
        SkipLimit | None,
        Field(description="Optional minimum size filter"),
    ] = None
    exclude_empty: Annotated[
        bool,
        Field(description="Drop directories whose total is exactly zero"),
    ] = False
    workers: Annotated[
        int | None,
        Field(ge=1, description="Worker threads for aggregation (default: CPU count)"),
    ] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("root", mode="after")
    @classmethod
    def validate_root_is_directory(cls, v: Path) -> Path:
        """Validate that the scan root exists and is a directory.

        Args:
            v: Root path

        Returns:
            Validated path

        Raises:
            ValueError: If the path does not exist or is not a directory
        """
        if not v.exists():
            msg = f"Scan path does not exist: {v}"
            raise ValueError(msg)
        if not v.is_dir():
            msg = f"Scan path is not a directory: {v}"
            raise ValueError(msg)
        return v

    @property
    def threshold(self) -> int | None:
        """Byte threshold derived from ``skip``, or None when unfiltered."""
        return self.skip.threshold_bytes if self.skip is not None else None


class ConfigurationError(Exception):
    """Exception raised when scan configuration validation fails.

    Carries a multi-line, actionable message listing every invalid field.
    """


def build_scan_config(
    *,
    root: Path | str,
    output_format: OutputFormat | str,
    skip: SkipLimit | str | None = None,
    exclude_empty: bool = False,
    workers: int | None = None,
) -> ScanConfig:
    """Validate raw scan input and build a ScanConfig.

    Args:
        root: Directory to scan
        output_format: Export mode (enum or its string value)
        skip: Optional skip limit (enum or its string value)
        exclude_empty: Drop zero-size directories from the report
        workers: Worker thread count, None for the CPU count

    Returns:
        Validated ScanConfig instance

    Raises:
        ConfigurationError: If any field is invalid

    Examples:
        >>> config = build_scan_config(root=".", output_format="summary", skip="skip-64")
        >>> config.threshold
        67108864
    """
    try:
        return ScanConfig.model_validate(
            {
                "root": root,
                "output_format": output_format,
                "skip": skip,
                "exclude_empty": exclude_empty,
                "workers": workers,
            }
        )
    except ValidationError as e:
        error_lines = ["Scan configuration is invalid:", ""]
        for error in e.errors():
            field_path = " → ".join(str(loc) for loc in error["loc"])
            error_lines.append(f"  Field: {field_path}")
            error_lines.append(f"  Error: {error['msg']}")
            error_lines.append(f"  Type: {error['type']}")
            error_lines.append("")

        error_lines.append("Please fix the above errors and try again.")
        raise ConfigurationError("\n".join(error_lines)) from e
