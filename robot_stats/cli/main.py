# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

import logging
from pathlib import Path
from typing import Optional

import errorhandler
import typer
from typing_extensions import Annotated

import robot_stats
from robot_stats.core.config import RunConfig
from robot_stats.core.constants import (
    DEFAULT_MAX_WORKERS,
    DEFAULT_REPORT_FILE_PATTERN,
    EXIT_FAILURE,
    EXIT_INVALID_ARGS,
    EXIT_NO_REPORTS,
    EXIT_OK,
)
from robot_stats.core.errors import InputError, NoReportsFoundError, ThresholdExceeded
from robot_stats.core.types import ThresholdOutcome
from robot_stats.orchestrator import ReportOrchestrator, RunSummary
from robot_stats.utils.logging import VerbosityLevel, configure_logging
from robot_stats.utils.terminal import terminal

app = typer.Typer(add_completion=False)

logger = logging.getLogger(__name__)

error_handler = errorhandler.ErrorHandler()


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"robot-stats, version {robot_stats.__version__}")
        raise typer.Exit()


Verbosity = Annotated[
    VerbosityLevel,
    typer.Option(
        "-v",
        "--verbosity",
        help="Verbosity level.",
        envvar="PLUGIN_LOG_LEVEL",
        is_eager=True,
        case_sensitive=False,
    ),
]


ReportDirectory = Annotated[
    Path,
    typer.Option(
        "-d",
        "--report-directory",
        exists=False,
        dir_okay=True,
        file_okay=False,
        help="Directory containing Robot Framework output files.",
        envvar="PLUGIN_REPORT_DIRECTORY",
    ),
]


ReportFileNamePattern = Annotated[
    str,
    typer.Option(
        "-p",
        "--report-file-name-pattern",
        help="Glob pattern of report files inside the report directory.",
        envvar="PLUGIN_REPORT_FILE_NAME_PATTERN",
    ),
]


PassThreshold = Annotated[
    int,
    typer.Option(
        "--pass-threshold",
        help="Maximum number of failed tests before the run fails.",
        envvar="PLUGIN_PASS_THRESHOLD",
    ),
]


UnstableThreshold = Annotated[
    int,
    typer.Option(
        "--unstable-threshold",
        help="Maximum number of failed tests before the run is reported unstable.",
        envvar="PLUGIN_UNSTABLE_THRESHOLD",
    ),
]


CountSkippedTests = Annotated[
    bool,
    typer.Option(
        "--count-skipped-tests",
        help="Count skipped tests in the skipped statistics.",
        envvar="PLUGIN_COUNT_SKIPPED_TESTS",
    ),
]


OnlyCritical = Annotated[
    bool,
    typer.Option(
        "--only-critical",
        help="Only take tests marked critical into account.",
        envvar="PLUGIN_ONLY_CRITICAL",
    ),
]


MaxWorkers = Annotated[
    int,
    typer.Option(
        "--max-workers",
        help="Maximum number of report files processed in parallel.",
        envvar="PLUGIN_MAX_WORKERS",
    ),
]


OutputFile = Annotated[
    Optional[Path],
    typer.Option(
        "-o",
        "--output-file",
        dir_okay=False,
        file_okay=True,
        help="File the aggregated statistics are appended to as KEY=VALUE lines.",
        envvar="DRONE_OUTPUT",
    ),
]


Version = Annotated[
    bool,
    typer.Option(
        "--version",
        callback=version_callback,
        help="Display version number.",
        is_eager=True,
    ),
]


@app.command()
def main(
    report_directory: ReportDirectory,
    report_file_name_pattern: ReportFileNamePattern = DEFAULT_REPORT_FILE_PATTERN,
    pass_threshold: PassThreshold = 0,
    unstable_threshold: UnstableThreshold = 0,
    count_skipped_tests: CountSkippedTests = False,
    only_critical: OnlyCritical = False,
    max_workers: MaxWorkers = DEFAULT_MAX_WORKERS,
    output_file: OutputFile = None,
    verbosity: Verbosity = VerbosityLevel.INFO,
    version: Version = False,
) -> None:
    """Aggregate Robot Framework output.xml statistics and enforce failure thresholds."""
    configure_logging(verbosity, error_handler)

    config = RunConfig(
        report_directory=report_directory,
        report_file_pattern=report_file_name_pattern,
        pass_threshold=pass_threshold,
        unstable_threshold=unstable_threshold,
        count_skipped=count_skipped_tests,
        only_critical=only_critical,
        max_workers=max_workers,
        output_file=output_file,
    )

    try:
        config.validate()
    except InputError as e:
        typer.echo(terminal.error(f"Invalid configuration: {e}"), err=True)
        raise typer.Exit(EXIT_INVALID_ARGS)

    orchestrator = ReportOrchestrator(config)
    try:
        summary = orchestrator.run()
    except NoReportsFoundError as e:
        logger.error(f"No Robot Framework output files found: {e}")
        raise typer.Exit(EXIT_NO_REPORTS)
    except ThresholdExceeded as e:
        logger.error(str(e))
        typer.echo(terminal.error(f"FAILED: {e}"), err=True)
        raise typer.Exit(EXIT_FAILURE)

    _echo_verdict(summary)
    exit()


def _echo_verdict(summary: RunSummary) -> None:
    threshold = summary.threshold
    if threshold is None:
        return
    if threshold.outcome == ThresholdOutcome.UNSTABLE:
        typer.echo(terminal.warning(f"UNSTABLE: {threshold.condition}"))
    else:
        typer.echo(
            terminal.success(
                f"PASSED: {threshold.failed_tests} failed tests "
                f"(pass threshold {threshold.pass_threshold})"
            )
        )


def exit() -> None:
    if error_handler.fired:
        raise typer.Exit(EXIT_FAILURE)
    else:
        raise typer.Exit(EXIT_OK)
