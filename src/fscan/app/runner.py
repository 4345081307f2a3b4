"""Application runner wiring the scan pipeline together."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path

from fscan.core.config import ScanConfig
from fscan.core.export import ReportExporter
from fscan.core.filesystem import Aggregator, TreeWalker
from fscan.core.pipeline import filter_and_sort, merge_entries
from fscan.types.models import AggregationResult, FileEntry
from fscan.types.outcome import Outcome
from fscan.utils.formatting import format_duration, format_size
from fscan.utils.logging import generate_scan_id, log_with_context, reset_scan_id, set_scan_id

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class ScanReport:
    """Everything a finished scan produced."""

    result: AggregationResult
    entries: list[FileEntry]
    export_outcome: Outcome[Path | None]


class ScanRunner:
    """Runner that executes one scan: walk, aggregate, filter, sort, export."""

    def __init__(
        self,
        config: ScanConfig,
        exporter: ReportExporter | None = None,
        walker: TreeWalker | None = None,
    ) -> None:
        """Initialize the scan runner.

        Args:
            config: Validated scan configuration
            exporter: Exporter for console and file output (default: cwd, stdout)
            walker: Tree walker (default: depth-first)
        """
        self.config: ScanConfig = config
        self.exporter: ReportExporter = exporter or ReportExporter()
        self.walker: TreeWalker = walker or TreeWalker()

    def run(self) -> ScanReport:
        """Run the scan to completion.

        Returns:
            ScanReport with the aggregation maps, final entries and export outcome
        """
        token = set_scan_id(generate_scan_id())
        try:
            return self._run()
        finally:
            reset_scan_id(token)

    def _run(self) -> ScanReport:
        config = self.config
        threshold = config.threshold

        if threshold is not None:
            self.exporter.echo(f"Including only files/folders larger than: {format_size(threshold)}")

        aggregator = Aggregator(threshold=threshold, workers=config.workers)
        logger.info(
            "Scan started",
            extra={"root": str(config.root), "workers": aggregator.workers, "threshold": threshold},
        )

        started = time.perf_counter()
        result = aggregator.scan(config.root, self.walker)
        elapsed = time.perf_counter() - started

        log_with_context(
            logger,
            logging.INFO,
            f"Scan finished in {format_duration(elapsed)}",
            extra={"files": result.total_files, "directories": result.total_dirs},
        )

        entries = merge_entries(result)
        if config.exclude_empty:
            self.exporter.echo("Excluding empty directories from output.")
        entries = filter_and_sort(entries, exclude_empty=config.exclude_empty)

        outcome = self.exporter.export(config.output_format, entries, result)
        return ScanReport(result=result, entries=entries, export_outcome=outcome)
