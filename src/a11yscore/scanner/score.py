"""Scoring, summary, and compliance helpers."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from a11yscore.constants.scoring import (
    BASE_SCORE,
    COMPLIANCE_FLOOR_LABEL,
    COMPLIANCE_THRESHOLDS,
    DEFAULT_IMPACT_PENALTY,
    IMPACT_PENALTIES,
    MAX_SCORE,
    MIN_SCORE,
)
from a11yscore.model import Issue, RawViolation, ScanSummary
from a11yscore.scanner.severity import normalize_impact
from a11yscore.types import ComplianceLevel


def impact_penalty(impact: object) -> int:
    """Points deducted for a single violation with this impact label.

    The label is matched exactly as the rule engine emitted it; any other
    spelling, including a different case, costs the default penalty.
    """
    if not isinstance(impact, str):
        return DEFAULT_IMPACT_PENALTY
    return IMPACT_PENALTIES.get(impact, DEFAULT_IMPACT_PENALTY)


def compute_score(violations: Iterable[RawViolation]) -> int:
    """Aggregate raw violations into a single 0-100 compliance score.

    Each violation subtracts a fixed penalty from 100 according to its
    original impact label.  The running total may go negative and is
    clamped only once at the end, so the result does not depend on the
    order of *violations*.
    """
    total = BASE_SCORE - sum(impact_penalty(violation.impact) for violation in violations)
    return max(MIN_SCORE, min(MAX_SCORE, total))


def summarize(issues: Iterable[Issue]) -> ScanSummary:
    """Count issues by severity with stable keys."""
    counts = Counter(issue.severity for issue in issues)
    return ScanSummary(
        high=int(counts.get("High", 0)),
        medium=int(counts.get("Medium", 0)),
        low=int(counts.get("Low", 0)),
    )


def compliance_level(score: int) -> ComplianceLevel:
    """Human-readable compliance label for a score."""
    for lower_bound, label in COMPLIANCE_THRESHOLDS:
        if score >= lower_bound:
            return label
    return COMPLIANCE_FLOOR_LABEL


def impact_counts(items: Iterable[RawViolation | Issue]) -> dict[str, int]:
    """Count violations or issues by normalized impact label, sorted by label."""
    counts = Counter(normalize_impact(item.impact) or "unknown" for item in items)
    return dict(sorted(counts.items()))
