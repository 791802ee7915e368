"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "a11yscore.yaml"

CONFIG_ALLOWED_KEYS: frozenset[str] = frozenset({"output_formats", "min_severity", "interpretation"})
INTERPRETATION_ALLOWED_KEYS: frozenset[str] = frozenset({"endpoint", "timeout_seconds", "max_concurrency"})
VALID_SEVERITIES: frozenset[str] = frozenset({"High", "Medium", "Low"})

DEFAULT_INTERPRETATION_TIMEOUT_SECONDS: float = 30.0
DEFAULT_INTERPRETATION_MAX_CONCURRENCY: int = 8
