"""Tests for JSON, CSV, and records output writers."""

from __future__ import annotations

import csv
import io
import json
from pathlib import Path
from typing import Any

import pytest

from a11yscore.constants.reporting import CSV_COLUMNS
from a11yscore.model import EnrichedReport, ScanReport
from a11yscore.reporting.csv_writer import render_csv_string, write_csv_issues
from a11yscore.reporting.filters import OutputFilters, build_filter_metadata, filter_issues
from a11yscore.reporting.writer import (
    build_report_payload,
    build_summary_payload,
    write_records,
    write_report,
)
from a11yscore.scanner.records import build_issue_records, build_scan_record
from a11yscore.scanner.report import assemble


@pytest.fixture()
def mixed_report(make_violation: Any) -> ScanReport:
    return assemble(
        [
            make_violation("minor", description="low one"),
            make_violation("critical", description="high one", tags=["wcag143"]),
            make_violation("moderate", description="medium one", help_url="https://fix/medium"),
        ],
        [{"issue": "high one", "recommendation": "Fix the contrast."}],
    )


def test_csv_has_header_and_rows_most_severe_first(mixed_report: ScanReport) -> None:
    rows = list(csv.reader(io.StringIO(render_csv_string(mixed_report))))

    assert tuple(rows[0]) == CSV_COLUMNS
    assert [row[2] for row in rows[1:]] == ["High", "Medium", "Low"]
    high = dict(zip(CSV_COLUMNS, rows[1], strict=True))
    assert high["id"] == "issue-1"
    assert high["wcag_reference"] == "wcag143"
    assert high["recommendation"] == "Fix the contrast."
    medium = dict(zip(CSV_COLUMNS, rows[2], strict=True))
    assert medium["solution"] == "https://fix/medium"
    assert medium["recommendation"] == ""


def test_csv_quotes_markup_with_commas(make_violation: Any) -> None:
    report = assemble([make_violation("minor", nodes=[{"html": '<a href="/x">a, b</a>'}])])

    rows = list(csv.reader(io.StringIO(render_csv_string(report))))

    assert rows[1][CSV_COLUMNS.index("description")] == 'Found in 1 element. <a href="/x">a, b</a>'


def test_write_csv_issues_honours_filtered_issues(tmp_path: Path, mixed_report: ScanReport) -> None:
    shown = filter_issues(mixed_report.issues, OutputFilters(min_severity="Medium"))

    path = write_csv_issues(tmp_path, mixed_report, shown)

    rows = list(csv.reader(io.StringIO(path.read_text(encoding="utf-8"))))
    assert path.name == "issues.csv"
    assert [row[2] for row in rows[1:]] == ["High", "Medium"]


def test_report_payload_filters_issues_but_not_score(mixed_report: ScanReport) -> None:
    payload = build_report_payload(mixed_report, filters=OutputFilters(min_severity="High"))

    assert payload["score"] == mixed_report.score
    assert [issue["id"] for issue in payload["issues"]] == ["issue-1"]
    assert payload["summary"]["total"] == 3
    assert payload["output_filter"] == {"min_severity": "High", "shown": 1, "total": 3, "filtered": 2}


def test_report_payload_without_filters(mixed_report: ScanReport) -> None:
    payload = build_report_payload(mixed_report)

    assert payload["output_filter"] is None
    assert len(payload["issues"]) == 3
    assert "interpretations" not in payload


def test_report_payload_includes_interpretations(mixed_report: ScanReport) -> None:
    enriched = EnrichedReport(
        report=mixed_report,
        interpretations={"issue-0": None, "issue-1": "Low-vision users struggle.", "issue-2": None},
    )

    payload = build_report_payload(mixed_report, enriched=enriched)

    assert payload["interpretations"]["issue-1"] == "Low-vision users struggle."


def test_build_filter_metadata_inactive_is_none() -> None:
    assert build_filter_metadata(total=4, shown=4, filters=OutputFilters()) is None


def test_summary_payload_counts_and_top_issues(mixed_report: ScanReport) -> None:
    summary = build_summary_payload(mixed_report, url="https://example.com/")

    assert summary["url"] == "https://example.com/"
    assert summary["issue_count"] == 3
    assert summary["counts_by_severity"] == {"high": 1, "medium": 1, "low": 1, "total": 3}
    assert summary["counts_by_impact"] == {"critical": 1, "minor": 1, "moderate": 1}
    assert [issue["severity"] for issue in summary["top_issues"]] == ["High", "Medium", "Low"]


def test_summary_top_issues_are_capped(make_violation: Any) -> None:
    report = assemble([make_violation("minor") for _ in range(9)])

    assert len(build_summary_payload(report)["top_issues"]) == 5


def test_write_report_writes_both_files(tmp_path: Path, mixed_report: ScanReport) -> None:
    report_path, summary_path = write_report(tmp_path / "out", mixed_report, url="https://example.com/")

    assert report_path.name == "report.json"
    assert summary_path.name == "summary.json"
    assert json.loads(report_path.read_text(encoding="utf-8"))["score"] == mixed_report.score
    assert json.loads(summary_path.read_text(encoding="utf-8"))["url"] == "https://example.com/"


def test_write_records_payload(tmp_path: Path, mixed_report: ScanReport) -> None:
    scan_record = build_scan_record("https://example.com/", mixed_report)
    issue_records = build_issue_records("scan-1", mixed_report)

    path = write_records(tmp_path, scan_record, issue_records)

    payload = json.loads(path.read_text(encoding="utf-8"))
    assert path.name == "records.json"
    assert payload["scan"]["score"] == mixed_report.score
    assert [row["message"] for row in payload["issues"]] == ["low one", "high one", "medium one"]
    assert payload["issues"][1]["wcag_criterion"] == "WCAG143"
