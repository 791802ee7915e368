"""Constants for impact-to-severity mapping, penalties, and compliance labels."""

from __future__ import annotations

from a11yscore.types import ComplianceLevel, Severity

BASE_SCORE: int = 100
MIN_SCORE: int = 0
MAX_SCORE: int = 100

# Penalty subtracted per violation, keyed by the rule engine's impact label.
IMPACT_PENALTIES: dict[str, int] = {
    "critical": 15,
    "serious": 10,
    "moderate": 5,
    "minor": 2,
}
DEFAULT_IMPACT_PENALTY: int = 2

# critical and serious share the High tier.
IMPACT_SEVERITY: dict[str, Severity] = {
    "critical": "High",
    "serious": "High",
    "moderate": "Medium",
    "minor": "Low",
}
DEFAULT_SEVERITY: Severity = "Low"

SEVERITY_RANK: dict[Severity, int] = {"Low": 0, "Medium": 1, "High": 2}
SEVERITY_ORDER: tuple[Severity, ...] = ("High", "Medium", "Low")

# Inclusive lower bounds, checked in order.
COMPLIANCE_THRESHOLDS: tuple[tuple[int, ComplianceLevel], ...] = (
    (90, "Excellent"),
    (80, "Good"),
    (70, "Acceptable"),
    (60, "Needs improvement"),
)
COMPLIANCE_FLOOR_LABEL: ComplianceLevel = "Critical"
