"""CLI subcommand handlers and threshold evaluation."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from a11yscore.config import ScoreConfig, load_config, validate_config_file
from a11yscore.constants.scoring import SEVERITY_RANK
from a11yscore.constants.validation import CFG010
from a11yscore.exceptions import ConfigError
from a11yscore.exceptions.validation import ValidationError, format_errors, sort_errors
from a11yscore.model import ScanReport
from a11yscore.reporting.csv_writer import write_csv_issues
from a11yscore.reporting.filters import OutputFilters, filter_issues
from a11yscore.reporting.stdout import StdoutReporter
from a11yscore.reporting.writer import write_records, write_report
from a11yscore.scanner.interpretation import HttpInterpretationOracle
from a11yscore.scanner.orchestrator import ScanOutcome, run_scan
from a11yscore.scanner.sources import JsonFileViolationSource
from a11yscore.types import Severity


def evaluate_fail_thresholds(
    report: ScanReport,
    *,
    fail_on: Severity | None,
    fail_under: int | None,
) -> int:
    """Return 1 if the report breaches CI thresholds, 0 otherwise.

    When both ``--fail-on`` and ``--fail-under`` are provided, either
    condition being met causes failure.
    """
    if fail_on is not None:
        threshold = SEVERITY_RANK[fail_on]
        for issue in report.issues:
            if SEVERITY_RANK[issue.severity] >= threshold:
                return 1

    if fail_under is not None and report.score < fail_under:
        return 1

    return 0


def preflight_validate(root: Path, config_path: Path | None = None) -> list[ValidationError]:
    """Validate the root directory and config file before running."""
    resolved_root = root.resolve()
    if not resolved_root.is_dir():
        return [
            ValidationError(
                code=CFG010,
                path=str(resolved_root),
                field="",
                message=f"root directory does not exist: {resolved_root}",
            )
        ]
    return sort_errors(validate_config_file(root, config_path, config_explicit=config_path is not None))


def handle_validate_config(args: argparse.Namespace) -> int:
    """Run config validation and report results."""
    errors = preflight_validate(args.root, args.config)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0


def resolve_output_formats(raw: str | None, config: ScoreConfig) -> tuple[str, ...]:
    """Parse ``--output-format`` or fall back to the configured formats."""
    if raw is None:
        return config.output_formats
    tokens = raw.split(",")
    formats = tuple(fmt for fmt in (token.strip() for token in tokens) if fmt)
    if not formats or len(formats) != len(tokens):
        raise ConfigError("--output-format contains empty or malformed tokens")
    return tuple(dict.fromkeys(formats))


async def _scan(args: argparse.Namespace, config: ScoreConfig, url: str) -> ScanOutcome:
    source = JsonFileViolationSource(args.input, recommendations_path=args.recommendations)
    settings = config.interpretation
    if not args.interpret:
        return await run_scan(url, source=source)

    if not settings.enabled:
        raise ConfigError("--interpret requires interpretation.endpoint in the config file")
    assert settings.endpoint is not None
    async with HttpInterpretationOracle(settings.endpoint, timeout_seconds=settings.timeout_seconds) as oracle:
        return await run_scan(
            url,
            source=source,
            oracle=oracle,
            max_concurrency=settings.max_concurrency,
            timeout_seconds=settings.timeout_seconds,
        )


def handle_report(args: argparse.Namespace, config: ScoreConfig, output_formats: tuple[str, ...]) -> int:
    """Build the report, write requested outputs, and print the stdout summary."""
    url = args.url or args.input.resolve().as_uri()
    outcome = asyncio.run(_scan(args, config, url))
    report = outcome.report
    min_severity = args.min_severity or config.min_severity
    filters = OutputFilters(min_severity=min_severity)

    if args.output_dir is not None:
        out_root = args.output_dir.resolve()
        if "json" in output_formats:
            write_report(out_root, report, enriched=outcome.enriched, filters=filters, url=url)
        if "csv" in output_formats:
            write_csv_issues(out_root, report, filter_issues(report.issues, filters))
        if "records" in output_formats:
            write_records(out_root, outcome.scan_record, outcome.issue_records)

    if not args.no_stdout:
        use_color = not args.no_color and sys.stdout.isatty()
        reporter = StdoutReporter(
            report,
            enriched=outcome.enriched if args.interpret else None,
            url=url,
            color=use_color,
            verbose=args.verbose,
            min_severity=min_severity,
        )
        print(reporter.render())

    return evaluate_fail_thresholds(report, fail_on=args.fail_on, fail_under=args.fail_under)
