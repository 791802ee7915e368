"""Configuration-related exceptions."""

from __future__ import annotations

from a11yscore.exceptions.base import A11yScoreError


class ConfigError(A11yScoreError, ValueError):
    """Raised when scoring configuration is invalid."""
