"""Rich stdout reporter for accessibility reports."""

from __future__ import annotations

from a11yscore.constants.branding import ASCII_LOGO_LINES, SCAN_SUMMARY_TITLE
from a11yscore.constants.reporting import (
    ACTION_PLAN_LINES,
    ANSI_GREEN,
    ANSI_RED,
    ANSI_RESET,
    ANSI_YELLOW,
    SCORE_GOOD_MIN,
    SCORE_WARN_MIN,
    SEVERITY_COLORS,
)
from a11yscore.constants.scoring import SEVERITY_ORDER
from a11yscore.model import EnrichedReport, ScanReport, ScanSummary
from a11yscore.reporting.filters import OutputFilters, filter_issues
from a11yscore.scanner.normalize import sorted_by_severity
from a11yscore.scanner.score import impact_counts
from a11yscore.types import Severity


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


def _color_severity(severity: Severity) -> str:
    color = SEVERITY_COLORS.get(severity, "")
    return _colorize(severity, color) if color else severity


def _color_score(score: int) -> str:
    if score >= SCORE_GOOD_MIN:
        return _colorize(str(score), ANSI_GREEN)
    if score >= SCORE_WARN_MIN:
        return _colorize(str(score), ANSI_YELLOW)
    return _colorize(str(score), ANSI_RED)


def _truncate(text: str, width: int) -> str:
    flat = " ".join(text.split())
    return flat if len(flat) <= width else flat[: width - 1] + "…"


def action_plan(summary: ScanSummary) -> list[str]:
    """Prioritized remediation steps, most severe tier first, skipping empty tiers."""
    steps: list[str] = []
    for severity in SEVERITY_ORDER:
        count = summary.count_for(severity)
        if count > 0:
            steps.append(f"{len(steps) + 1}. {ACTION_PLAN_LINES[severity].format(count=count)}")
    return steps


class StdoutReporter:
    """Formats a report as human-readable stdout output."""

    def __init__(
        self,
        report: ScanReport,
        *,
        enriched: EnrichedReport | None = None,
        url: str | None = None,
        color: bool = True,
        verbose: bool = False,
        min_severity: Severity | None = None,
    ) -> None:
        """Initialise the reporter."""
        self._report = report
        self._enriched = enriched
        self._url = url
        self._color = color
        self._verbose = verbose
        self._filters = OutputFilters(min_severity=min_severity)
        self._shown_issues = sorted_by_severity(filter_issues(report.issues, self._filters))

    def render(self) -> str:
        """Render the full stdout report as a single string."""
        sections = [
            self._render_header(),
            self._render_issues_table(),
            self._render_action_plan(),
            self._render_interpretations(),
            self._render_warnings(),
        ]
        return "\n".join(section for section in sections if section)

    def _render_header(self) -> str:
        r = self._report
        sep = "  " + "─" * 38
        score_str = _color_score(r.score) if self._color else str(r.score)

        lines = [
            "",
            f"  {ASCII_LOGO_LINES[0]}",
            f"  {ASCII_LOGO_LINES[1]}",
            f"  {SCAN_SUMMARY_TITLE}",
            sep,
            "",
        ]
        if self._url:
            lines.append(f"  URL         {self._url}")
        lines.append(f"  Score       {score_str}/100 ({r.compliance_level})")

        total = len(r.issues)
        shown = len(self._shown_issues)
        if self._filters.active():
            lines.append(f"  Issues      {shown} shown / {total} total (below {self._filters.min_severity} hidden)")
        else:
            lines.append(f"  Issues      {total}")
        lines.append(f"  Severities  {self._format_severity_breakdown(r.summary)}")
        lines.append(f"  Impacts     {self._format_impacts(impact_counts(r.issues))}")
        if r.warnings:
            lines.append(f"  Warnings    {len(r.warnings)}")
        lines.append("")
        return "\n".join(lines)

    def _render_issues_table(self) -> str:
        issues = self._shown_issues
        if not issues:
            return ""

        w_id = 10
        w_sev = 8
        w_wcag = 10
        w_title = 48

        def _hline(left: str, mid: str, right: str) -> str:
            return (
                f"  {left}{'─' * (w_id + 2)}{mid}{'─' * (w_sev + 2)}"
                f"{mid}{'─' * (w_wcag + 2)}{mid}{'─' * (w_title + 2)}{right}"
            )

        hdr = f"  │ {'ID':<{w_id}} │ {'Severity':<{w_sev}} │ {'WCAG':<{w_wcag}} │ {'Issue':<{w_title}} │"
        lines = ["  Issues", _hline("┌", "┬", "┐"), hdr, _hline("├", "┼", "┤")]
        for issue in issues:
            # Pad before colouring so escape codes do not break alignment.
            sev_cell = f"{issue.severity:<{w_sev}}"
            if self._color:
                sev_cell = sev_cell.replace(issue.severity, _color_severity(issue.severity), 1)
            lines.append(
                f"  │ {issue.id:<{w_id}} │ {sev_cell} │ {(issue.wcag_reference or '-'):<{w_wcag}}"
                f" │ {_truncate(issue.title, w_title):<{w_title}} │"
            )
            if self._verbose:
                lines.append(f"      {_truncate(issue.description, 96)}")
                if issue.solution:
                    lines.append(f"      fix: {issue.solution}")
        lines.append(_hline("└", "┴", "┘"))
        return "\n".join(lines)

    def _render_action_plan(self) -> str:
        steps = action_plan(self._report.summary)
        if not steps:
            return ""
        return "\n".join(["", "  Action plan", *(f"  {step}" for step in steps)])

    def _render_interpretations(self) -> str:
        if self._enriched is None:
            return ""
        lines: list[str] = []
        for issue in self._shown_issues:
            text = self._enriched.interpretation_for(issue)
            if text:
                lines.extend([f"  [{issue.id}] {issue.title}", f"    {text}"])
        if not lines:
            return ""
        return "\n".join(["", "  Interpretation", *lines])

    def _render_warnings(self) -> str:
        if not self._verbose or not self._report.warnings:
            return ""
        return "\n".join(["", "  Input warnings", *(f"  - {warning}" for warning in self._report.warnings)])

    def _format_severity_breakdown(self, summary: ScanSummary) -> str:
        """Render High/Medium/Low issue counts in fixed order."""
        parts: list[str] = []
        for severity in SEVERITY_ORDER:
            label = _color_severity(severity) if self._color else severity
            parts.append(f"{summary.count_for(severity)} {label}")
        return " · ".join(parts)

    @staticmethod
    def _format_impacts(counts: dict[str, int]) -> str:
        """Render impact label counts sorted by descending count, then label."""
        if not counts:
            return "none"
        ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
        return " · ".join(f"{label} {count}" for label, count in ranked)
