"""Core data models for a11yscore."""

from .entities import (
    AffectedNode,
    EnrichedReport,
    Issue,
    IssueRecord,
    RawViolation,
    Recommendation,
    ScanRecord,
    ScanReport,
    ScanSummary,
)

__all__ = [
    "AffectedNode",
    "EnrichedReport",
    "Issue",
    "IssueRecord",
    "RawViolation",
    "Recommendation",
    "ScanRecord",
    "ScanReport",
    "ScanSummary",
]
