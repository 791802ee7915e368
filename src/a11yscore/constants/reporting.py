"""Constants for report file names, atomic writing, and stdout formatting."""

from __future__ import annotations

REPORT_FILENAME: str = "report.json"
SUMMARY_FILENAME: str = "summary.json"
RECORDS_FILENAME: str = "records.json"
CSV_ISSUES_FILENAME: str = "issues.csv"
REPORT_TEMP_PREFIX: str = ".tmp-"
REPORT_TEMP_SUFFIX: str = ".json"

SCHEMA_VERSION: str = "1.0.0"

VALID_OUTPUT_FORMATS: frozenset[str] = frozenset({"json", "csv", "records"})
DEFAULT_OUTPUT_FORMAT: str = "json"

CSV_COLUMNS: tuple[str, ...] = (
    "id",
    "rule_id",
    "severity",
    "impact",
    "wcag_reference",
    "title",
    "description",
    "solution",
    "recommendation",
)

# ANSI escape codes for terminal colouring.
ANSI_RESET: str = "\033[0m"
ANSI_RED: str = "\033[31;1m"
ANSI_YELLOW: str = "\033[33;1m"
ANSI_GREEN: str = "\033[32;1m"

SEVERITY_COLORS: dict[str, str] = {
    "High": ANSI_RED,
    "Medium": ANSI_YELLOW,
    "Low": ANSI_GREEN,
}

# Score colour bands used by the terminal gauge.
SCORE_GOOD_MIN: int = 90
SCORE_WARN_MIN: int = 70

ACTION_PLAN_LINES: dict[str, str] = {
    "High": "Resolve the {count} high-severity issue(s) that critically affect accessibility.",
    "Medium": "Address the {count} medium-severity issue(s) to improve the user experience.",
    "Low": "Finally, fix the {count} low-severity issue(s) to polish accessibility.",
}
