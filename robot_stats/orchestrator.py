# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Orchestrator for collecting statistics from many Robot Framework reports.

Each report file is processed by its own task: read, parse and fold into an
isolated StatsResult. Only after all tasks have joined are the per-file
results merged and checked against the thresholds, so no partial aggregate
is ever observed.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from pathlib import Path

from robot_stats.core.aggregator import merge_stats
from robot_stats.core.config import RunConfig
from robot_stats.core.errors import UnstableWarning
from robot_stats.core.stats import compute_stats
from robot_stats.core.thresholds import validate_thresholds
from robot_stats.core.types import FileResult, StatsResult, ThresholdResult
from robot_stats.discovery import locate_files
from robot_stats.reporting.drone_output import write_test_stats
from robot_stats.reporting.summary import log_aggregated_results
from robot_stats.robot.output_parser import parse_output_file

logger = logging.getLogger(__name__)


@dataclass
class RunSummary:
    """Everything a statistics run produced."""

    files: list[Path] = field(default_factory=list)
    file_results: list[FileResult] = field(default_factory=list)
    stats: StatsResult = field(default_factory=StatsResult.empty)
    threshold: ThresholdResult | None = None

    @property
    def failed_files(self) -> list[FileResult]:
        return [r for r in self.file_results if r.has_error]


def process_file(path: Path, only_critical: bool, count_skipped: bool) -> FileResult:
    """Parse one report file and compute its statistics.

    Raises:
        OSError: If the file cannot be read.
        ReportParseError: If the file is not well-formed XML.
    """
    output = parse_output_file(path)
    if output is None:
        logger.warning(f"Skipping empty file: {path}")
        return FileResult.empty(path, reason="empty file")

    if output.errors:
        logger.debug(f"{path} reports {len(output.errors)} execution errors")

    if output.is_empty:
        logger.warning(f"Skipping suite with no tests: {path}")
        return FileResult.empty(path, reason="no tests or sub-suites")

    stats = compute_stats(output, only_critical=only_critical, count_skipped=count_skipped)
    return FileResult(path=path, stats=stats)


class ReportOrchestrator:
    """Locates report files, processes them concurrently and evaluates the run.

    Example:
        >>> config = RunConfig(report_directory=Path("results"), pass_threshold=5)
        >>> summary = ReportOrchestrator(config).run()
        >>> summary.stats.failed_tests
        2
    """

    def __init__(self, config: RunConfig):
        """Initialize the orchestrator.

        Args:
            config: Validated run configuration
        """
        self.config = config

    def run(self) -> RunSummary:
        """Execute a full statistics run.

        Returns:
            RunSummary with per-file results, merged stats and threshold decision

        Raises:
            InputError: If the configuration is invalid.
            NoReportsFoundError: If no readable report file was found.
            ThresholdExceeded: If the merged failure count exceeds the pass threshold.
        """
        self.config.validate()

        files = locate_files(self.config.report_directory, self.config.report_file_pattern)
        file_results = asyncio.run(self.process_files(files))

        stats = merge_stats(result.stats for result in file_results)
        summary = RunSummary(files=files, file_results=file_results, stats=stats)

        log_aggregated_results(stats, file_results)
        try:
            write_test_stats(stats, self.config.output_file)
        except OSError as e:
            logger.error(f"Failed to write test statistics to {self.config.output_file}: {e}")

        summary.threshold = validate_thresholds(
            stats, self.config.pass_threshold, self.config.unstable_threshold
        )
        condition = summary.threshold.condition
        if isinstance(condition, UnstableWarning):
            logger.warning(f"Warning: {condition}")
        summary.threshold.raise_for_outcome()

        return summary

    async def process_files(self, files: list[Path]) -> list[FileResult]:
        """Process all files concurrently, one task per file.

        A failing file never aborts the batch: its exception is logged and
        replaced by a zero-valued FileResult.

        Args:
            files: Report files to process

        Returns:
            One FileResult per input file, in input order
        """
        semaphore = asyncio.Semaphore(min(self.config.max_workers, max(len(files), 1)))
        tasks = [self._process_file_with_semaphore(path, semaphore) for path in files]

        results = await asyncio.gather(*tasks, return_exceptions=True)

        file_results: list[FileResult] = []
        for path, result in zip(files, results):
            if isinstance(result, FileResult):
                file_results.append(result)
            elif isinstance(result, Exception):
                logger.warning(f"Failed to process file {path}: {result}")
                file_results.append(FileResult.from_error(path, str(result)))
            else:
                # BaseException such as KeyboardInterrupt must not be swallowed
                raise result

        logger.info(
            f"Processed {len(file_results)} files "
            f"({sum(1 for r in file_results if r.has_error)} failed)"
        )
        return file_results

    async def _process_file_with_semaphore(
        self, path: Path, semaphore: asyncio.Semaphore
    ) -> FileResult:
        async with semaphore:
            return await asyncio.to_thread(
                process_file,
                path,
                self.config.only_critical,
                self.config.count_skipped,
            )
