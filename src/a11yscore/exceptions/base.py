"""Root exception for a11yscore."""

from __future__ import annotations


class A11yScoreError(Exception):
    """Base class for all package errors."""
