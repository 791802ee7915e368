"""Frozen dataclasses for violations, issues, and assembled reports."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from a11yscore.types import ComplianceLevel, JsonObject, Severity


@dataclass(frozen=True)
class AffectedNode:
    """One DOM node the rule engine flagged for a violation."""

    html: str = ""
    target: tuple[str, ...] = ()
    failure_summary: str | None = None

    def to_dict(self) -> JsonObject:
        return {
            "html": self.html,
            "target": list(self.target),
            "failure_summary": self.failure_summary,
        }


@dataclass(frozen=True)
class RawViolation:
    """A single rule failure as reported by the accessibility rule engine.

    ``impact`` is kept exactly as emitted (it may be missing or in an
    unexpected case); scoring and classification both key off it.
    """

    rule_id: str
    description: str
    impact: str | None
    affected_node_count: int = 0
    affected_nodes: tuple[AffectedNode, ...] = ()
    help_url: str = ""
    tags: tuple[str, ...] = ()

    @property
    def first_node_html(self) -> str:
        """Markup of the first affected node, or an empty string."""
        if not self.affected_nodes:
            return ""
        return self.affected_nodes[0].html

    def to_dict(self) -> JsonObject:
        return {
            "rule_id": self.rule_id,
            "description": self.description,
            "impact": self.impact,
            "affected_node_count": self.affected_node_count,
            "affected_nodes": [node.to_dict() for node in self.affected_nodes],
            "help_url": self.help_url,
            "tags": list(self.tags),
        }


@dataclass(frozen=True)
class Issue:
    """Report-facing representation of one violation."""

    id: str
    title: str
    description: str
    severity: Severity
    wcag_reference: str | None
    solution: str
    rule_id: str = ""
    impact: str | None = None
    html_element: str | None = None

    def to_dict(self) -> JsonObject:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "severity": self.severity,
            "wcag_reference": self.wcag_reference,
            "solution": self.solution,
            "rule_id": self.rule_id,
            "impact": self.impact,
            "html_element": self.html_element,
        }


@dataclass(frozen=True)
class ScanSummary:
    """Issue counts per severity tier."""

    high: int = 0
    medium: int = 0
    low: int = 0

    @property
    def total(self) -> int:
        return self.high + self.medium + self.low

    def count_for(self, severity: Severity) -> int:
        """Return the count for a single severity tier."""
        return {"High": self.high, "Medium": self.medium, "Low": self.low}[severity]

    def to_dict(self) -> JsonObject:
        return {
            "high": self.high,
            "medium": self.medium,
            "low": self.low,
            "total": self.total,
        }


@dataclass(frozen=True)
class Recommendation:
    """Free-form remediation advice emitted alongside the violations."""

    issue: str
    recommendation: str
    impact: str | None = None
    priority: int | None = None
    wcag_reference: str | None = None


@dataclass(frozen=True)
class ScanReport:
    """Fully resolved accessibility report for one completed scan."""

    score: int
    issues: tuple[Issue, ...]
    summary: ScanSummary
    compliance_level: ComplianceLevel
    recommendations: Mapping[str, str] = field(default_factory=dict)
    warnings: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "recommendations", MappingProxyType(dict(self.recommendations)))

    def recommendation_for(self, issue: Issue) -> str:
        """Recommendation text for an issue, falling back to its solution."""
        return self.recommendations.get(issue.title, issue.solution)

    def single_issue_view(self, issue: Issue) -> JsonObject:
        """Report-shaped payload restricted to one issue."""
        return {
            "score": self.score,
            "compliance_level": self.compliance_level,
            "issues": [issue.to_dict()],
            "summary": self.summary.to_dict(),
            "recommendations": (
                {issue.title: self.recommendations[issue.title]} if issue.title in self.recommendations else {}
            ),
        }

    def to_dict(self) -> JsonObject:
        return {
            "score": self.score,
            "compliance_level": self.compliance_level,
            "issues": [issue.to_dict() for issue in self.issues],
            "summary": self.summary.to_dict(),
            "recommendations": dict(self.recommendations),
            "warnings": list(self.warnings),
        }


@dataclass(frozen=True)
class EnrichedReport:
    """A report joined with per-issue AI interpretations.

    ``interpretations`` has exactly one entry per issue id; ``None`` marks an
    issue whose interpretation failed or was not requested.
    """

    report: ScanReport
    interpretations: Mapping[str, str | None] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "interpretations", MappingProxyType(dict(self.interpretations)))

    def interpretation_for(self, issue: Issue) -> str | None:
        return self.interpretations.get(issue.id)

    def to_dict(self) -> JsonObject:
        payload = self.report.to_dict()
        payload["interpretations"] = dict(self.interpretations)
        return payload


@dataclass(frozen=True)
class ScanRecord:
    """Persistence row for one scan."""

    url: str
    score: int
    completed_at: str

    def to_dict(self) -> JsonObject:
        return {"url": self.url, "score": self.score, "completed_at": self.completed_at}


@dataclass(frozen=True)
class IssueRecord:
    """Persistence row for one issue of a scan."""

    scan_id: str
    severity: Severity
    message: str
    impact: str | None
    recommendation: str
    wcag_criterion: str | None = None
    html_element: str | None = None

    def to_dict(self) -> JsonObject:
        return {
            "scan_id": self.scan_id,
            "severity": self.severity,
            "message": self.message,
            "impact": self.impact,
            "recommendation": self.recommendation,
            "wcag_criterion": self.wcag_criterion,
            "html_element": self.html_element,
        }
