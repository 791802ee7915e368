"""Reporting package for a11yscore outputs."""

from __future__ import annotations

from typing import Any

__all__ = ["build_summary_payload", "write_report"]


def __getattr__(name: str) -> Any:
    """Lazily expose reporting APIs to avoid import cycles at package import time."""
    if name in {"build_summary_payload", "write_report"}:
        from .writer import build_summary_payload, write_report

        exports = {
            "build_summary_payload": build_summary_payload,
            "write_report": write_report,
        }
        return exports[name]
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
