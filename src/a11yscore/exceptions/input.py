"""Input- and report-related exceptions."""

from __future__ import annotations

from a11yscore.exceptions.base import A11yScoreError


class ViolationInputError(A11yScoreError, ValueError):
    """Raised when a violations document cannot be read at all."""


class ReportInvariantError(A11yScoreError, AssertionError):
    """Raised when an assembled report breaks its own consistency rules."""


class InterpretationError(A11yScoreError):
    """Raised by interpretation oracles on transport or protocol failure."""
