"""Impact-to-severity classification."""

from __future__ import annotations

from a11yscore.constants.scoring import DEFAULT_SEVERITY, IMPACT_SEVERITY, SEVERITY_RANK
from a11yscore.types import Severity


def normalize_impact(impact: object) -> str:
    """Lowercase and strip an impact label; non-strings become empty."""
    if not isinstance(impact, str):
        return ""
    return impact.strip().lower()


def classify(impact: object) -> Severity:
    """Map a rule-engine impact label to a report severity.

    Case-insensitive and total: anything outside the four known labels,
    including ``None``, falls back to ``"Low"``.
    """
    return IMPACT_SEVERITY.get(normalize_impact(impact), DEFAULT_SEVERITY)


def severity_rank(severity: Severity) -> int:
    """Ordering key for severities, higher is more severe."""
    return SEVERITY_RANK[severity]
