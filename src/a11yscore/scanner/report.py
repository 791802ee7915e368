"""Assembly of scan reports from one batch of raw violations."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, TypeAlias

from a11yscore.constants.scoring import MAX_SCORE, MIN_SCORE
from a11yscore.exceptions import ReportInvariantError
from a11yscore.model import Issue, Recommendation, ScanReport, ScanSummary
from a11yscore.scanner.normalize import ViolationInput, build_issue, coerce_violations
from a11yscore.scanner.score import compliance_level, compute_score, summarize

logger = logging.getLogger(__name__)

RecommendationInput: TypeAlias = Recommendation | Mapping[str, Any]


def fold_recommendations(
    recommendations: Iterable[RecommendationInput],
    *,
    warnings: list[str] | None = None,
) -> dict[str, str]:
    """Fold recommendation entries into a mapping keyed by issue title.

    Later entries win when titles repeat.  Entries without a usable title or
    text are skipped with a warning.
    """
    sink = warnings if warnings is not None else []
    folded: dict[str, str] = {}
    for position, entry in enumerate(recommendations):
        if isinstance(entry, Recommendation):
            title, text = entry.issue, entry.recommendation
        elif isinstance(entry, Mapping):
            title, text = entry.get("issue"), entry.get("recommendation")
        else:
            title = text = None
        if not isinstance(title, str) or not isinstance(text, str):
            warning = f"Recommendation #{position}: missing 'issue' or 'recommendation'; skipped"
            sink.append(warning)
            logger.warning(warning)
            continue
        folded[title] = text
    return folded


def check_invariants(score: int, issues: Sequence[Issue], summary: ScanSummary) -> None:
    """Raise ``ReportInvariantError`` if the report is internally inconsistent."""
    if not MIN_SCORE <= score <= MAX_SCORE:
        raise ReportInvariantError(f"score {score} outside [{MIN_SCORE}, {MAX_SCORE}]")
    ids = [issue.id for issue in issues]
    if len(set(ids)) != len(ids):
        raise ReportInvariantError("duplicate issue ids in report")
    if summary.total != len(issues):
        raise ReportInvariantError(f"summary counts {summary.total} issue(s) but report holds {len(issues)}")


def assemble(
    raw_violations: Sequence[ViolationInput],
    recommendations: Iterable[RecommendationInput] = (),
) -> ScanReport:
    """Build a complete ``ScanReport`` from one batch of violations.

    The batch is coerced once; score and issues are both derived from that
    same coerced tuple, and the summary from those issues.
    """
    warnings: list[str] = []
    violations = coerce_violations(raw_violations, warnings=warnings)

    score = compute_score(violations)
    issues = tuple(build_issue(index, violation) for index, violation in enumerate(violations))
    summary = summarize(issues)
    check_invariants(score, issues, summary)

    folded = fold_recommendations(recommendations, warnings=warnings)

    logger.info(
        "Assembled report: score=%d issues=%d (high=%d medium=%d low=%d)",
        score,
        len(issues),
        summary.high,
        summary.medium,
        summary.low,
    )
    return ScanReport(
        score=score,
        issues=issues,
        summary=summary,
        compliance_level=compliance_level(score),
        recommendations=folded,
        warnings=tuple(warnings),
    )
