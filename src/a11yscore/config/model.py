"""Config data model for a11yscore runs."""

from __future__ import annotations

from dataclasses import dataclass, field

from a11yscore.constants.config import (
    DEFAULT_INTERPRETATION_MAX_CONCURRENCY,
    DEFAULT_INTERPRETATION_TIMEOUT_SECONDS,
)
from a11yscore.constants.reporting import DEFAULT_OUTPUT_FORMAT
from a11yscore.types import Severity


@dataclass(frozen=True)
class InterpretationConfig:
    """Settings for the AI interpretation oracle."""

    endpoint: str | None = None
    timeout_seconds: float = DEFAULT_INTERPRETATION_TIMEOUT_SECONDS
    max_concurrency: int = DEFAULT_INTERPRETATION_MAX_CONCURRENCY

    @property
    def enabled(self) -> bool:
        return bool(self.endpoint)


@dataclass(frozen=True)
class ScoreConfig:
    """Resolved run config."""

    output_formats: tuple[str, ...] = (DEFAULT_OUTPUT_FORMAT,)
    min_severity: Severity | None = None
    interpretation: InterpretationConfig = field(default_factory=InterpretationConfig)
