"""Config loading and normalization for a11yscore runs."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from a11yscore.config.model import InterpretationConfig, ScoreConfig
from a11yscore.config.validator import read_config_mapping, resolve_config_path, validate_config_mapping
from a11yscore.constants.config import (
    DEFAULT_INTERPRETATION_MAX_CONCURRENCY,
    DEFAULT_INTERPRETATION_TIMEOUT_SECONDS,
)
from a11yscore.constants.reporting import DEFAULT_OUTPUT_FORMAT
from a11yscore.exceptions import ConfigError
from a11yscore.exceptions.validation import format_errors


def load_config(root: Path, config_path: Path | None = None) -> ScoreConfig:
    """Load and validate config from ``a11yscore.yaml`` or an explicit path."""
    path = resolve_config_path(root, config_path)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return ScoreConfig()

    raw, errors = read_config_mapping(path)
    if raw is not None:
        errors = validate_config_mapping(raw, str(path))
    if errors or raw is None:
        raise ConfigError(format_errors(errors))

    return ScoreConfig(
        output_formats=_dedupe(raw.get("output_formats") or [DEFAULT_OUTPUT_FORMAT]),
        min_severity=raw.get("min_severity"),
        interpretation=_build_interpretation_config(raw.get("interpretation") or {}),
    )


def _dedupe(values: list[str]) -> tuple[str, ...]:
    """Drop repeated entries while keeping first-seen order."""
    return tuple(dict.fromkeys(values))


def _build_interpretation_config(raw: dict[str, Any]) -> InterpretationConfig:
    return InterpretationConfig(
        endpoint=raw.get("endpoint"),
        timeout_seconds=float(raw.get("timeout_seconds", DEFAULT_INTERPRETATION_TIMEOUT_SECONDS)),
        max_concurrency=int(raw.get("max_concurrency", DEFAULT_INTERPRETATION_MAX_CONCURRENCY)),
    )
