"""End-to-end scan orchestration for a11yscore.

``run_scan`` is the pipeline entry point.  Its collaborators (the violation
source and, optionally, the interpretation oracle) are passed in explicitly.
"""

from __future__ import annotations

import logging
import time
import uuid
from dataclasses import dataclass
from datetime import UTC, datetime

from a11yscore.constants.config import (
    DEFAULT_INTERPRETATION_MAX_CONCURRENCY,
    DEFAULT_INTERPRETATION_TIMEOUT_SECONDS,
)
from a11yscore.model import EnrichedReport, IssueRecord, ScanRecord, ScanReport
from a11yscore.scanner.enrichment import enrich_report
from a11yscore.scanner.interpretation import InterpretationOracle
from a11yscore.scanner.records import build_issue_records, build_scan_record
from a11yscore.scanner.report import assemble
from a11yscore.scanner.sources import ViolationSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScanOutcome:
    """Everything produced by one completed scan."""

    scan_id: str
    url: str
    enriched: EnrichedReport
    scan_record: ScanRecord
    issue_records: tuple[IssueRecord, ...]
    duration_seconds: float

    @property
    def report(self) -> ScanReport:
        return self.enriched.report


async def run_scan(
    url: str,
    *,
    source: ViolationSource,
    oracle: InterpretationOracle | None = None,
    scan_id: str | None = None,
    max_concurrency: int = DEFAULT_INTERPRETATION_MAX_CONCURRENCY,
    timeout_seconds: float = DEFAULT_INTERPRETATION_TIMEOUT_SECONDS,
) -> ScanOutcome:
    """Fetch violations for *url*, assemble the report, and optionally enrich it.

    Without an oracle every issue carries a ``None`` interpretation.
    """
    started_at = time.perf_counter()
    resolved_scan_id = scan_id or uuid.uuid4().hex

    batch = await source.fetch_violations(url)
    logger.info("Fetched %d violation(s) for %s", len(batch.violations), url)

    report = assemble(batch.violations, batch.recommendations)
    if oracle is None:
        enriched = EnrichedReport(report=report, interpretations={issue.id: None for issue in report.issues})
    else:
        enriched = await enrich_report(
            report,
            oracle,
            max_concurrency=max_concurrency,
            timeout_seconds=timeout_seconds,
        )

    return ScanOutcome(
        scan_id=resolved_scan_id,
        url=url,
        enriched=enriched,
        scan_record=build_scan_record(url, report, datetime.now(UTC)),
        issue_records=tuple(build_issue_records(resolved_scan_id, report)),
        duration_seconds=time.perf_counter() - started_at,
    )
