"""Constants for converting rule-engine violations into report issues."""

from __future__ import annotations

ISSUE_ID_PREFIX: str = "issue-"
WCAG_TAG_PREFIX: str = "wcag"
NO_DETAILS_PLACEHOLDER: str = "No details available"
UNKNOWN_RULE_ID: str = "unknown-rule"
UNTITLED_DESCRIPTION: str = "Untitled accessibility violation"

# Accepted spellings for each RawViolation field, first match wins.
RULE_ID_KEYS: tuple[str, ...] = ("rule_id", "id")
DESCRIPTION_KEYS: tuple[str, ...] = ("description", "help")
HELP_URL_KEYS: tuple[str, ...] = ("help_url", "helpUrl")
NODE_COUNT_KEYS: tuple[str, ...] = ("affected_node_count", "nodes")
AFFECTED_NODES_KEYS: tuple[str, ...] = ("affected_nodes", "nodes")
NODE_TARGET_KEYS: tuple[str, ...] = ("target", "location")
NODE_SUMMARY_KEYS: tuple[str, ...] = ("failure_summary", "failureSummary")
