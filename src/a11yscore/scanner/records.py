"""Persistence-shaped rows for completed scans."""

from __future__ import annotations

from datetime import UTC, datetime

from a11yscore.model import IssueRecord, ScanRecord, ScanReport


def build_scan_record(url: str, report: ScanReport, completed_at: datetime | None = None) -> ScanRecord:
    """Row for the scans table, timestamped in UTC ISO-8601."""
    moment = completed_at or datetime.now(UTC)
    return ScanRecord(url=url, score=report.score, completed_at=moment.isoformat())


def build_issue_records(scan_id: str, report: ScanReport) -> list[IssueRecord]:
    """One row per issue for the issues table, in report order."""
    return [
        IssueRecord(
            scan_id=scan_id,
            severity=issue.severity,
            message=issue.title,
            impact=issue.impact,
            recommendation=report.recommendation_for(issue),
            wcag_criterion=issue.wcag_reference.upper() if issue.wcag_reference else None,
            html_element=issue.html_element,
        )
        for issue in report.issues
    ]
