"""Configuration loading and validation for a11yscore runs."""

from __future__ import annotations

from a11yscore.config.loader import load_config
from a11yscore.config.model import InterpretationConfig, ScoreConfig
from a11yscore.config.validator import validate_config_file

__all__ = [
    "InterpretationConfig",
    "ScoreConfig",
    "load_config",
    "validate_config_file",
]
