"""Tests for persistence-shaped scan and issue rows."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from a11yscore.scanner.records import build_issue_records, build_scan_record
from a11yscore.scanner.report import assemble


def test_scan_record_uses_utc_iso_timestamp() -> None:
    report = assemble([])
    moment = datetime(2024, 5, 1, 10, 0, tzinfo=UTC)

    record = build_scan_record("https://example.com/", report, moment)

    assert record.to_dict() == {
        "url": "https://example.com/",
        "score": 100,
        "completed_at": "2024-05-01T10:00:00+00:00",
    }


def test_scan_record_defaults_to_now() -> None:
    record = build_scan_record("https://example.com/", assemble([]))

    assert record.completed_at.endswith("+00:00")


def test_issue_records_mirror_report_issues(make_violation: Any) -> None:
    report = assemble(
        [
            make_violation("serious", description="a", tags=["best-practice", "wcag143"]),
            make_violation("minor", description="b", tags=[], nodes=[]),
        ],
        [{"issue": "a", "recommendation": "Raise the contrast."}],
    )

    records = build_issue_records("scan-9", report)

    assert [record.to_dict() for record in records] == [
        {
            "scan_id": "scan-9",
            "severity": "High",
            "message": "a",
            "impact": "serious",
            "recommendation": "Raise the contrast.",
            "wcag_criterion": "WCAG143",
            "html_element": "<img src='x.png'>",
        },
        {
            "scan_id": "scan-9",
            "severity": "Low",
            "message": "b",
            "impact": "minor",
            "recommendation": "https://dequeuniversity.com/rules/axe/4.7/image-alt",
            "wcag_criterion": None,
            "html_element": None,
        },
    ]
