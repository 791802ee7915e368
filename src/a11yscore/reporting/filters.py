"""Shared output-filter helpers for reporters and file writers."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from a11yscore.constants.scoring import SEVERITY_RANK
from a11yscore.model import Issue
from a11yscore.types import Severity


@dataclass(frozen=True)
class OutputFilters:
    """Display/output filters that never affect scoring or summaries."""

    min_severity: Severity | None = None

    def active(self) -> bool:
        """Whether any filter is enabled."""
        return self.min_severity is not None


def issue_passes_filters(issue: Issue, filters: OutputFilters) -> bool:
    """Return whether an issue should be shown under the configured filters."""
    if filters.min_severity is None:
        return True
    return SEVERITY_RANK[issue.severity] >= SEVERITY_RANK[filters.min_severity]


def filter_issues(issues: Sequence[Issue], filters: OutputFilters) -> list[Issue]:
    """Return issues that pass all configured output filters."""
    return [issue for issue in issues if issue_passes_filters(issue, filters)]


def build_filter_metadata(
    *,
    total: int,
    shown: int,
    filters: OutputFilters,
) -> dict[str, object] | None:
    """Build stable filter metadata for JSON payloads."""
    if not filters.active():
        return None
    return {
        "min_severity": filters.min_severity,
        "shown": shown,
        "total": total,
        "filtered": max(0, total - shown),
    }
