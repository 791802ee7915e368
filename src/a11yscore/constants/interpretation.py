"""Constants for the AI interpretation oracle adapter."""

from __future__ import annotations

INTERPRETATION_RESPONSE_FIELD: str = "text"
INTERPRETATION_CONNECT_TIMEOUT_SECONDS: float = 10.0
INTERPRETATION_HEADERS: dict[str, str] = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}
