"""CSV export writer for report issues."""

from __future__ import annotations

import csv
import io
from pathlib import Path

from a11yscore.constants.reporting import CSV_COLUMNS, CSV_ISSUES_FILENAME
from a11yscore.io import write_text_atomic
from a11yscore.model import Issue, ScanReport
from a11yscore.scanner.normalize import sorted_by_severity


def write_csv_issues(out_root: Path, report: ScanReport, issues: list[Issue] | None = None) -> Path:
    """Write issues.csv under the output root and return the path."""
    csv_path = out_root / CSV_ISSUES_FILENAME
    write_text_atomic(
        path=csv_path,
        content=render_csv_string(report, issues),
        temp_prefix=".csv_tmp_",
        temp_suffix=".csv",
    )
    return csv_path


def render_csv_string(report: ScanReport, issues: list[Issue] | None = None) -> str:
    """Render issues as a CSV string, most severe first."""
    rows = sorted_by_severity(report.issues if issues is None else issues)

    buf = io.StringIO()
    writer = csv.writer(buf)
    writer.writerow(CSV_COLUMNS)
    for issue in rows:
        writer.writerow(
            (
                issue.id,
                issue.rule_id,
                issue.severity,
                issue.impact or "",
                issue.wcag_reference or "",
                issue.title,
                issue.description,
                issue.solution,
                report.recommendations.get(issue.title, ""),
            )
        )
    return buf.getvalue()
