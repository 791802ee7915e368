"""Output writers for report and summary JSON artifacts."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from a11yscore.constants.reporting import (
    RECORDS_FILENAME,
    REPORT_FILENAME,
    REPORT_TEMP_PREFIX,
    REPORT_TEMP_SUFFIX,
    SCHEMA_VERSION,
    SUMMARY_FILENAME,
)
from a11yscore.io import write_json_atomic
from a11yscore.model import EnrichedReport, IssueRecord, ScanRecord, ScanReport
from a11yscore.reporting.filters import OutputFilters, build_filter_metadata, filter_issues
from a11yscore.scanner.normalize import sorted_by_severity
from a11yscore.scanner.score import impact_counts
from a11yscore.types import JsonObject

TOP_ISSUES_LIMIT: int = 5


def build_report_payload(
    report: ScanReport,
    *,
    enriched: EnrichedReport | None = None,
    filters: OutputFilters | None = None,
) -> JsonObject:
    """Serialize a report, restricting listed issues to those passing *filters*."""
    active_filters = filters or OutputFilters()
    payload = enriched.to_dict() if enriched is not None else report.to_dict()
    shown = filter_issues(report.issues, active_filters)
    payload["schema_version"] = SCHEMA_VERSION
    payload["issues"] = [issue.to_dict() for issue in shown]
    payload["output_filter"] = build_filter_metadata(
        total=len(report.issues),
        shown=len(shown),
        filters=active_filters,
    )
    return payload


def build_summary_payload(report: ScanReport, *, url: str | None = None) -> JsonObject:
    """Build a deterministic summary of a report."""
    top_issues: list[JsonObject] = [
        {
            "id": issue.id,
            "title": issue.title,
            "severity": issue.severity,
            "wcag_reference": issue.wcag_reference,
        }
        for issue in sorted_by_severity(report.issues)[:TOP_ISSUES_LIMIT]
    ]
    return {
        "schema_version": SCHEMA_VERSION,
        "url": url,
        "score": report.score,
        "compliance_level": report.compliance_level,
        "issue_count": len(report.issues),
        "counts_by_severity": report.summary.to_dict(),
        "counts_by_impact": impact_counts(report.issues),
        "top_issues": top_issues,
        "warning_count": len(report.warnings),
    }


def write_report(
    out_root: Path,
    report: ScanReport,
    *,
    enriched: EnrichedReport | None = None,
    filters: OutputFilters | None = None,
    url: str | None = None,
) -> tuple[Path, Path]:
    """Write ``report.json`` and ``summary.json`` under *out_root* and return their paths."""
    report_path = out_root / REPORT_FILENAME
    summary_path = out_root / SUMMARY_FILENAME
    write_json_atomic(
        path=report_path,
        payload=build_report_payload(report, enriched=enriched, filters=filters),
        temp_prefix=REPORT_TEMP_PREFIX,
        temp_suffix=REPORT_TEMP_SUFFIX,
    )
    write_json_atomic(
        path=summary_path,
        payload=build_summary_payload(report, url=url),
        temp_prefix=REPORT_TEMP_PREFIX,
        temp_suffix=REPORT_TEMP_SUFFIX,
    )
    return report_path, summary_path


def write_records(out_root: Path, scan_record: ScanRecord, issue_records: Sequence[IssueRecord]) -> Path:
    """Write persistence-shaped scan and issue rows to ``records.json``."""
    path = out_root / RECORDS_FILENAME
    write_json_atomic(
        path=path,
        payload={
            "scan": scan_record.to_dict(),
            "issues": [record.to_dict() for record in issue_records],
        },
        temp_prefix=REPORT_TEMP_PREFIX,
        temp_suffix=REPORT_TEMP_SUFFIX,
    )
    return path
