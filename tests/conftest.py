"""Shared pytest fixtures for repository-local test data."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeAlias

import pytest

ViolationFactory: TypeAlias = Callable[..., dict[str, Any]]


@pytest.fixture(scope="session")
def fixtures_root() -> Path:
    """Return root directory for test fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def axe_results_path(fixtures_root: Path) -> Path:
    """Saved rule-engine results with three violations and one recommendation."""
    return fixtures_root / "axe_results.json"


@pytest.fixture(scope="session")
def api_envelope_path(fixtures_root: Path) -> Path:
    """API envelope nesting violations under ``data.analysis``."""
    return fixtures_root / "api_envelope.json"


def _make_violation(
    impact: Any = "minor",
    *,
    rule_id: str = "image-alt",
    description: str = "Images must have alternate text",
    tags: list[str] | None = None,
    nodes: list[dict[str, Any]] | None = None,
    help_url: str = "https://dequeuniversity.com/rules/axe/4.7/image-alt",
) -> dict[str, Any]:
    return {
        "id": rule_id,
        "impact": impact,
        "description": description,
        "helpUrl": help_url,
        "tags": ["wcag2a", "wcag111"] if tags is None else tags,
        "nodes": [{"html": "<img src='x.png'>", "target": ["img"]}] if nodes is None else nodes,
    }


@pytest.fixture()
def make_violation() -> ViolationFactory:
    """Return a builder for rule-engine violation mappings in the engine's own shape."""
    return _make_violation
