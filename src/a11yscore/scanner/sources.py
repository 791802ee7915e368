"""Violation sources: the rule-engine side of a scan."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol

from a11yscore.exceptions import ViolationInputError
from a11yscore.io import load_json_file


@dataclass(frozen=True)
class ViolationBatch:
    """Raw violation and recommendation records for one page."""

    violations: tuple[Any, ...] = ()
    recommendations: tuple[Any, ...] = ()


class ViolationSource(Protocol):
    """Produces raw rule-engine output for a URL."""

    async def fetch_violations(self, url: str) -> ViolationBatch:
        """Return the violations found on *url*."""
        ...


def _as_records(value: object, label: str) -> tuple[Any, ...]:
    if value is None:
        return ()
    if not isinstance(value, list):
        raise ViolationInputError(f"'{label}' must be a list")
    return tuple(value)


def parse_violation_document(document: object) -> ViolationBatch:
    """Extract violations and recommendations from a saved results document.

    Accepted shapes: a bare list of violations, a rule-engine results object
    with a top-level ``violations`` list, or an API envelope nesting them
    under ``data.analysis``.
    """
    if isinstance(document, list):
        return ViolationBatch(violations=tuple(document))
    if not isinstance(document, Mapping):
        raise ViolationInputError(f"Violations document must be a list or object, got {type(document).__name__}")

    container: Mapping[str, Any] = document
    data = document.get("data")
    if isinstance(data, Mapping) and isinstance(data.get("analysis"), Mapping):
        container = data["analysis"]

    if "violations" not in container:
        raise ViolationInputError("Violations document has no 'violations' list")
    return ViolationBatch(
        violations=_as_records(container.get("violations"), "violations"),
        recommendations=_as_records(container.get("recommendations"), "recommendations"),
    )


def load_violation_file(path: Path) -> ViolationBatch:
    """Read and parse a saved results document from disk."""
    try:
        document = load_json_file(path)
    except FileNotFoundError as exc:
        raise ViolationInputError(f"Violations file not found: {path}") from exc
    except (OSError, json.JSONDecodeError) as exc:
        raise ViolationInputError(f"Could not read violations file {path}: {exc}") from exc
    return parse_violation_document(document)


def load_recommendation_file(path: Path) -> tuple[Any, ...]:
    """Read a standalone recommendations list (or an object holding one)."""
    try:
        document = load_json_file(path)
    except FileNotFoundError as exc:
        raise ViolationInputError(f"Recommendations file not found: {path}") from exc
    except (OSError, json.JSONDecodeError) as exc:
        raise ViolationInputError(f"Could not read recommendations file {path}: {exc}") from exc
    if isinstance(document, Mapping):
        document = document.get("recommendations")
    return _as_records(document, "recommendations")


class JsonFileViolationSource:
    """Serves violations previously captured from the rule engine to a JSON file."""

    def __init__(self, path: Path, *, recommendations_path: Path | None = None) -> None:
        self.path = path
        self.recommendations_path = recommendations_path

    async def fetch_violations(self, url: str) -> ViolationBatch:
        batch = load_violation_file(self.path)
        if self.recommendations_path is not None:
            batch = ViolationBatch(
                violations=batch.violations,
                recommendations=load_recommendation_file(self.recommendations_path),
            )
        return batch
