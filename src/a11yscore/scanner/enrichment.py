"""Concurrent per-issue AI enrichment of assembled reports."""

from __future__ import annotations

import asyncio
import logging

from a11yscore.constants.config import (
    DEFAULT_INTERPRETATION_MAX_CONCURRENCY,
    DEFAULT_INTERPRETATION_TIMEOUT_SECONDS,
)
from a11yscore.model import EnrichedReport, Issue, ScanReport
from a11yscore.scanner.interpretation import InterpretationOracle

logger = logging.getLogger(__name__)


async def interpret_issue(
    report: ScanReport,
    issue: Issue,
    oracle: InterpretationOracle,
    *,
    timeout_seconds: float = DEFAULT_INTERPRETATION_TIMEOUT_SECONDS,
) -> str | None:
    """Ask the oracle about one issue; any failure degrades to ``None``."""
    try:
        async with asyncio.timeout(timeout_seconds):
            text = await oracle.interpret(report.single_issue_view(issue))
    except TimeoutError:
        logger.warning("Interpretation of %s timed out after %.1fs", issue.id, timeout_seconds)
        return None
    except Exception as exc:
        logger.warning("Interpretation of %s failed: %s", issue.id, exc)
        return None

    if not isinstance(text, str) or not text.strip():
        return None
    return text.strip()


async def enrich_report(
    report: ScanReport,
    oracle: InterpretationOracle,
    *,
    max_concurrency: int = DEFAULT_INTERPRETATION_MAX_CONCURRENCY,
    timeout_seconds: float = DEFAULT_INTERPRETATION_TIMEOUT_SECONDS,
) -> EnrichedReport:
    """Interpret every issue concurrently and join the results by issue id.

    Requests are independent and bounded by *max_concurrency*.  The returned
    mapping follows report issue order regardless of completion order.
    """
    semaphore = asyncio.Semaphore(max(1, max_concurrency))

    async def _bounded(issue: Issue) -> str | None:
        async with semaphore:
            return await interpret_issue(report, issue, oracle, timeout_seconds=timeout_seconds)

    results = await asyncio.gather(*(_bounded(issue) for issue in report.issues))
    interpretations = {issue.id: text for issue, text in zip(report.issues, results, strict=True)}

    produced = sum(1 for text in results if text is not None)
    logger.info("Interpreted %d of %d issue(s)", produced, len(report.issues))
    return EnrichedReport(report=report, interpretations=interpretations)
