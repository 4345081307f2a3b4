"""Report rendering: console listing, CSV, JSON and summary output.

Console output always happens first. File exports are best-effort: a failed
write is reported as an ``Err`` outcome and logged, and never fails the run.
Files are written through a temporary sibling and moved into place, so an
export either fully lands or leaves the previous file untouched.
"""

from __future__ import annotations

import logging
import os
import sys
import tempfile
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Final, TextIO

from pydantic import TypeAdapter
from pydantic_core import PydanticSerializationError

from fscan.core.config import OutputFormat
from fscan.types.models import AggregationResult, FileEntry, display_path
from fscan.types.outcome import Err, Ok, Outcome
from fscan.utils.formatting import format_size

logger = logging.getLogger(__name__)

CSV_FILENAME: Final[str] = "output.csv"
JSON_FILENAME: Final[str] = "output.json"
CSV_HEADER: Final[str] = "path,size_bytes,size_human,kind"

# Number of entries listed per section of the summary
SUMMARY_TOP_N: Final[int] = 5

_ENTRY_LIST_ADAPTER: Final[TypeAdapter[list[FileEntry]]] = TypeAdapter(list[FileEntry])


def format_console_line(entry: FileEntry) -> str:
    """Render one entry as ``<size right-aligned to 10> [<kind>] - <path>``."""
    return f"{entry.size_human:>10} [{entry.kind}] - {entry.path}"


def quote_csv_field(value: str) -> str:
    '''Wrap value in double quotes, doubling any embedded quote (RFC 4180).

    Examples:
        >>> quote_csv_field('a,b')
        '"a,b"'
        >>> quote_csv_field('say "hi"')
        '"say ""hi"""'
    '''
    return '"' + value.replace('"', '""') + '"'


def render_csv(entries: Sequence[FileEntry]) -> str:
    """Render entries as CSV text with a header row."""
    lines = [CSV_HEADER]
    lines.extend(
        f"{quote_csv_field(e.path)},{e.size_bytes},{e.size_human},{e.kind}" for e in entries
    )
    return "\n".join(lines) + "\n"


def render_json(entries: Sequence[FileEntry]) -> bytes:
    """Render entries as a pretty-printed JSON array.

    Raises:
        PydanticSerializationError: If an entry cannot be serialised
    """
    return _ENTRY_LIST_ADAPTER.dump_json(list(entries), indent=2)


def write_atomic(path: Path, content: str | bytes) -> Outcome[Path]:
    """Write content to path through a temporary file in the same directory.

    Args:
        path: Destination file
        content: Text or bytes to write

    Returns:
        Ok with the destination path, or Err if any step failed
    """
    tmp_name: str | None = None
    try:
        data = content.encode("utf-8") if isinstance(content, str) else content
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
        with os.fdopen(fd, "wb") as f:
            _ = f.write(data)
        os.replace(tmp_name, path)
        return Ok(path)
    except (OSError, UnicodeError) as e:
        if tmp_name is not None:
            try:
                os.unlink(tmp_name)
            except FileNotFoundError:
                pass
        return Err.from_exception(e, f"Cannot write {path}")


def top_entries(sizes: Mapping[Path, int], limit: int = SUMMARY_TOP_N) -> list[tuple[Path, int]]:
    """Return the largest ``limit`` items of a size map, largest first."""
    return sorted(sizes.items(), key=lambda item: (-item[1], str(item[0])))[:limit]


class ReportExporter:
    """Exporter rendering the final entry list in one of the output modes."""

    def __init__(self, output_dir: Path | None = None, stream: TextIO | None = None) -> None:
        """Initialize the exporter.

        Args:
            output_dir: Directory receiving output.csv / output.json (default: cwd)
            stream: Console stream (default: sys.stdout at call time)
        """
        self.output_dir: Path = output_dir if output_dir is not None else Path.cwd()
        self._stream: TextIO | None = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def echo(self, message: str = "") -> None:
        print(message, file=self.stream)

    def print_entries(self, entries: Sequence[FileEntry]) -> None:
        """Print every entry to the console, one per line."""
        for entry in entries:
            self.echo(format_console_line(entry))

    def export_csv(self, entries: Sequence[FileEntry]) -> Outcome[Path]:
        """Write entries to output.csv.

        Returns:
            Ok with the written path, or Err if the file could not be written
        """
        outcome = write_atomic(self.output_dir / CSV_FILENAME, render_csv(entries))
        if isinstance(outcome, Ok):
            self.echo(f"Exported to {CSV_FILENAME}")
        return outcome

    def export_json(self, entries: Sequence[FileEntry]) -> Outcome[Path]:
        """Write entries to output.json.

        Returns:
            Ok with the written path, or Err if serialisation or writing failed
        """
        try:
            payload = render_json(entries)
        except PydanticSerializationError as e:
            return Err.from_exception(e, "Cannot serialise entries to JSON")

        outcome = write_atomic(self.output_dir / JSON_FILENAME, payload)
        if isinstance(outcome, Ok):
            self.echo(f"Exported to {JSON_FILENAME}")
        return outcome

    def print_summary(self, result: AggregationResult) -> None:
        """Print totals and the largest folders and files.

        Counts come from the aggregation maps, not the filtered entry list.
        """
        self.echo()
        self.echo("Scan Summary:")
        self.echo("-------------")
        self.echo(f"Total files: {result.total_files}")
        self.echo(f"Total folders: {result.total_dirs}")
        self.echo(f"Total size: {format_size(result.total_size)}")
        self.echo()

        self.echo(f"Top {SUMMARY_TOP_N} folders:")
        for rank, (path, size) in enumerate(top_entries(result.dir_sizes), start=1):
            self.echo(f"{rank}. {display_path(path)} ({format_size(size)})")

        self.echo()

        self.echo(f"Top {SUMMARY_TOP_N} files:")
        for rank, (path, size) in enumerate(top_entries(result.file_sizes), start=1):
            self.echo(f"{rank}. {display_path(path)} ({format_size(size)})")

    def export(
        self,
        output_format: OutputFormat,
        entries: Sequence[FileEntry],
        result: AggregationResult,
    ) -> Outcome[Path | None]:
        """Print entries to the console, then run the selected export mode.

        Args:
            output_format: Export mode
            entries: Final filtered and sorted entries
            result: Aggregation maps, used by the summary

        Returns:
            Ok with the written file (None for the summary), or Err if the
            export step was skipped
        """
        self.print_entries(entries)

        outcome: Outcome[Path | None]
        match output_format:
            case OutputFormat.CSV:
                outcome = self.export_csv(entries)
            case OutputFormat.JSON:
                outcome = self.export_json(entries)
            case OutputFormat.SUMMARY:
                self.print_summary(result)
                outcome = Ok(None)

        match outcome:
            case Ok(value=Path() as written):
                logger.info("Export written to %s", written)
            case Ok():
                pass
            case Err(message=message):
                logger.warning("Export skipped: %s", message)

        return outcome
