"""Scoring pipeline package."""

from __future__ import annotations

from typing import Any

__all__ = ["assemble", "run_scan"]


def __getattr__(name: str) -> Any:
    """Lazily expose pipeline entry points to avoid import cycles at package import time."""
    if name == "assemble":
        from .report import assemble

        return assemble
    if name == "run_scan":
        from .orchestrator import run_scan

        return run_scan
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
