"""Command-line interface for fscan."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

import click

from fscan.core.config import ConfigurationError, OutputFormat, SkipLimit, build_scan_config
from fscan.utils.logging import DEFAULT_LOG_LEVEL, VALID_LOG_LEVELS, configure_logging

try:
    __version__ = version("fscan")
except PackageNotFoundError:
    __version__ = "unknown"

ABOUT_LINES: tuple[str, ...] = (
    "fscan",
    f"Version: {__version__}",
    "A fast, parallel directory scanner that reports only large files/folders.",
    "Also scans running processes by memory usage.",
    "License: MIT",
)


def validate_log_level(
    ctx: click.Context,  # pyright: ignore[reportUnusedParameter] # required by Click callback signature
    param: click.Parameter,  # pyright: ignore[reportUnusedParameter] # required by Click callback signature
    value: str | None,
) -> str | None:
    """Validate and normalize log level.

    Args:
        ctx: Click context (required by Click callback signature)
        param: Click parameter (required by Click callback signature)
        value: Log level value to validate

    Returns:
        Normalized log level (uppercase)

    Raises:
        click.BadParameter: If validation fails
    """
    if value is None:
        return value

    normalized_value = value.upper().strip()
    if normalized_value not in VALID_LOG_LEVELS:
        raise click.BadParameter(
            f'Invalid log level "{value}". Valid options: {", ".join(sorted(VALID_LOG_LEVELS))}'
        )

    return normalized_value


@click.group()
@click.option(
    '--log-level', '-l',
    type=str,
    default=DEFAULT_LOG_LEVEL,
    callback=validate_log_level,
    help='Logging verbosity level on stderr (DEBUG, INFO, WARNING, ERROR)'
)
@click.version_option(version=__version__, prog_name='fscan')
def cli(log_level: str) -> None:
    """fscan - Fast directory & process scanner.

    Report large files/folders or top memory processes.

    Examples:

        # Scan a directory and print a summary
        fscan scan /data summary

        # Export files and folders larger than 256 MB to output.csv
        fscan scan /data csv skip-256

        # Export to output.json without empty directories
        fscan scan /data json --exclude-empty

        # List processes by memory usage
        fscan p
    """
    configure_logging(log_level=log_level)


@cli.command()
def about() -> None:
    """About and credits."""
    for line in ABOUT_LINES:
        click.echo(line)


@cli.command()
@click.argument('path', type=click.Path(path_type=Path))
@click.argument(
    'output',
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
)
@click.argument(
    'skip',
    required=False,
    type=click.Choice([s.value for s in SkipLimit], case_sensitive=False),
)
@click.option(
    '--exclude-empty',
    is_flag=True,
    help='Exclude empty folders from final output'
)
@click.option(
    '--workers', '-w',
    type=click.IntRange(min=1),
    default=None,
    help='Worker threads used for aggregation (default: number of CPUs)'
)
def scan(path: Path, output: str, skip: str | None, exclude_empty: bool, workers: int | None) -> None:
    """Scan a directory.

    OUTPUT is one of csv, json or summary. SKIP optionally keeps only files
    larger than N megabytes: skip-64, skip-128, skip-256, skip-512, skip-1024
    or skip-2048.
    """
    from fscan.app.runner import ScanRunner

    try:
        config = build_scan_config(
            root=path,
            output_format=OutputFormat.from_string(output),
            skip=SkipLimit.from_string(skip) if skip is not None else None,
            exclude_empty=exclude_empty,
            workers=workers,
        )
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e

    _ = ScanRunner(config).run()


@cli.command(name='p')
def processes() -> None:
    """Scan running processes sorted by memory usage."""
    from fscan.core.process import PsutilProcessLister, render_process_table

    render_process_table(PsutilProcessLister().list_processes())


if __name__ == '__main__':
    cli()
