"""Conversion of raw rule-engine violations into report issues.

Raw records arrive from the rule engine as loosely typed mappings, in either
the engine's own camelCase shape or the snake_case shape used by saved scan
payloads.  Anything missing or ill-typed is replaced with a safe default and
reported as a warning string; a bad record never aborts the batch.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any, TypeAlias

from a11yscore.constants.normalize import (
    AFFECTED_NODES_KEYS,
    DESCRIPTION_KEYS,
    HELP_URL_KEYS,
    ISSUE_ID_PREFIX,
    NO_DETAILS_PLACEHOLDER,
    NODE_COUNT_KEYS,
    NODE_SUMMARY_KEYS,
    NODE_TARGET_KEYS,
    RULE_ID_KEYS,
    UNKNOWN_RULE_ID,
    UNTITLED_DESCRIPTION,
    WCAG_TAG_PREFIX,
)
from a11yscore.model import AffectedNode, Issue, RawViolation
from a11yscore.scanner.severity import classify, severity_rank

logger = logging.getLogger(__name__)

ViolationInput: TypeAlias = RawViolation | Mapping[str, Any]


def _is_text(value: object) -> bool:
    return isinstance(value, str) and bool(value.strip())


def _is_count(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _first(record: Mapping[str, Any], keys: tuple[str, ...], accept: Callable[[object], bool]) -> Any:
    """Return the first value under *keys* that passes *accept*, else ``None``."""
    for key in keys:
        value = record.get(key)
        if value is not None and accept(value):
            return value
    return None


def _warn(warnings: list[str], index: int, message: str) -> None:
    warning = f"Violation #{index}: {message}"
    warnings.append(warning)
    logger.warning(warning)


def _coerce_target(value: object) -> tuple[str, ...]:
    """Flatten a node target (string, selector list, or nested frame list)."""
    if isinstance(value, str):
        return (value,) if value else ()
    if isinstance(value, (list, tuple)):
        parts: list[str] = []
        for item in value:
            parts.extend(_coerce_target(item))
        return tuple(parts)
    return ()


def _coerce_node(node: object, *, index: int, position: int, warnings: list[str]) -> AffectedNode | None:
    if isinstance(node, str):
        return AffectedNode(html=node)
    if not isinstance(node, Mapping):
        _warn(warnings, index, f"affected node {position} is not an object; skipped")
        return None

    html = node.get("html")
    if html is not None and not isinstance(html, str):
        _warn(warnings, index, f"affected node {position} has non-text markup; using empty markup")
        html = None

    target_value = _first(node, NODE_TARGET_KEYS, lambda _: True)
    if target_value is None:
        details = node.get("node_details")
        if isinstance(details, Mapping):
            target_value = details.get("location")

    summary = _first(node, NODE_SUMMARY_KEYS, _is_text)
    return AffectedNode(
        html=html or "",
        target=_coerce_target(target_value),
        failure_summary=summary,
    )


def _coerce_tags(value: object, *, index: int, warnings: list[str]) -> tuple[str, ...]:
    if value is None:
        _warn(warnings, index, "missing 'tags'; no WCAG reference available")
        return ()
    if not isinstance(value, (list, tuple)):
        _warn(warnings, index, "'tags' is not a list; ignored")
        return ()
    tags = tuple(tag for tag in value if isinstance(tag, str))
    if len(tags) != len(value):
        _warn(warnings, index, "'tags' contains non-text entries; dropped")
    return tags


def coerce_violation(record: object, *, index: int, warnings: list[str]) -> RawViolation:
    """Convert one raw record into a ``RawViolation``, substituting safe defaults."""
    if isinstance(record, RawViolation):
        return record
    if not isinstance(record, Mapping):
        _warn(warnings, index, f"expected an object, got {type(record).__name__}; using defaults")
        return RawViolation(rule_id=UNKNOWN_RULE_ID, description=UNTITLED_DESCRIPTION, impact=None)

    rule_id = _first(record, RULE_ID_KEYS, _is_text)
    if rule_id is None:
        _warn(warnings, index, "missing 'rule_id'")
        rule_id = UNKNOWN_RULE_ID

    description = _first(record, DESCRIPTION_KEYS, _is_text)
    if description is None:
        _warn(warnings, index, "missing 'description'")
        description = UNTITLED_DESCRIPTION

    impact = record.get("impact")
    if impact is None:
        _warn(warnings, index, "missing 'impact'; treating as Low")
    elif not isinstance(impact, str):
        _warn(warnings, index, f"'impact' is not text ({impact!r}); treating as Low")
        impact = None

    nodes_value = _first(record, AFFECTED_NODES_KEYS, lambda value: isinstance(value, (list, tuple)))
    nodes: list[AffectedNode] = []
    for position, node in enumerate(nodes_value or ()):
        coerced = _coerce_node(node, index=index, position=position, warnings=warnings)
        if coerced is not None:
            nodes.append(coerced)

    node_count = _first(record, NODE_COUNT_KEYS, _is_count)
    if node_count is None:
        # "nodes" doubles as the node list, which is not a count anomaly.
        explicit = _first(record, NODE_COUNT_KEYS, lambda value: not isinstance(value, (list, tuple)))
        if explicit is not None:
            _warn(warnings, index, f"affected node count is not an integer ({explicit!r}); using {len(nodes)}")
        node_count = len(nodes)
    elif node_count < 0:
        _warn(warnings, index, f"negative affected node count {node_count}; using {len(nodes)}")
        node_count = len(nodes)

    help_url = _first(record, HELP_URL_KEYS, _is_text) or ""

    return RawViolation(
        rule_id=rule_id,
        description=description,
        impact=impact,
        affected_node_count=node_count,
        affected_nodes=tuple(nodes),
        help_url=help_url,
        tags=_coerce_tags(record.get("tags"), index=index, warnings=warnings),
    )


def coerce_violations(records: Iterable[object], *, warnings: list[str] | None = None) -> tuple[RawViolation, ...]:
    """Coerce a batch of raw records, preserving order."""
    sink = warnings if warnings is not None else []
    return tuple(coerce_violation(record, index=index, warnings=sink) for index, record in enumerate(records))


def wcag_reference(tags: Iterable[str]) -> str | None:
    """First tag carrying the WCAG criterion prefix, or ``None``."""
    return next((tag for tag in tags if tag.startswith(WCAG_TAG_PREFIX)), None)


def describe_occurrences(node_count: int, first_node_html: str) -> str:
    """Sentence describing how many elements are affected, with sample markup."""
    plural = "s" if node_count > 1 else ""
    sample = first_node_html.strip() or NO_DETAILS_PLACEHOLDER
    return f"Found in {node_count} element{plural}. {sample}"


def build_issue(index: int, violation: RawViolation) -> Issue:
    """Build the issue at position *index* from a coerced violation."""
    html = violation.first_node_html
    return Issue(
        id=f"{ISSUE_ID_PREFIX}{index}",
        title=violation.description,
        description=describe_occurrences(violation.affected_node_count, html),
        severity=classify(violation.impact),
        wcag_reference=wcag_reference(violation.tags),
        solution=violation.help_url,
        rule_id=violation.rule_id,
        impact=violation.impact,
        html_element=html or None,
    )


def normalize(violations: Sequence[ViolationInput], *, warnings: list[str] | None = None) -> list[Issue]:
    """Convert violations into issues, one per input and in input order.

    Issue ids are ``issue-<index>`` and therefore unique within the result.
    Coercion anomalies are appended to *warnings* when given.
    """
    coerced = coerce_violations(violations, warnings=warnings)
    return [build_issue(index, violation) for index, violation in enumerate(coerced)]


def sorted_by_severity(issues: Iterable[Issue]) -> list[Issue]:
    """Return a new list ordered High to Low, stable within a tier."""
    return sorted(issues, key=lambda issue: -severity_rank(issue.severity))
