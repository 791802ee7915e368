"""Shared exception hierarchy for a11yscore."""

from __future__ import annotations

from .base import A11yScoreError
from .config import ConfigError
from .input import InterpretationError, ReportInvariantError, ViolationInputError

__all__ = [
    "A11yScoreError",
    "ConfigError",
    "InterpretationError",
    "ReportInvariantError",
    "ViolationInputError",
]
