"""AI interpretation oracle interface and its HTTP adapter."""

from __future__ import annotations

import logging
from typing import Any, Protocol

import httpx

from a11yscore.constants.config import DEFAULT_INTERPRETATION_TIMEOUT_SECONDS
from a11yscore.constants.interpretation import (
    INTERPRETATION_CONNECT_TIMEOUT_SECONDS,
    INTERPRETATION_HEADERS,
    INTERPRETATION_RESPONSE_FIELD,
)
from a11yscore.exceptions import InterpretationError
from a11yscore.types import JsonObject

logger = logging.getLogger(__name__)


class InterpretationOracle(Protocol):
    """Turns a single-issue report payload into a paragraph of prose."""

    async def interpret(self, payload: JsonObject) -> str | None:
        """Return interpretation text, or ``None`` when nothing was produced."""
        ...


class HttpInterpretationOracle:
    """Interpretation oracle reached over HTTP.

    Posts the single-issue payload as JSON and reads the ``text`` field of
    the JSON response.  Use as an async context manager, or pass an existing
    ``httpx.AsyncClient`` which then stays owned by the caller.
    """

    def __init__(
        self,
        endpoint: str,
        *,
        timeout_seconds: float = DEFAULT_INTERPRETATION_TIMEOUT_SECONDS,
        client: httpx.AsyncClient | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.endpoint = endpoint
        self.timeout_seconds = timeout_seconds
        self._headers = {**INTERPRETATION_HEADERS, **(headers or {})}
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self) -> HttpInterpretationOracle:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout_seconds, connect=INTERPRETATION_CONNECT_TIMEOUT_SECONDS),
                headers=self._headers,
            )
        return self

    async def __aexit__(self, *args: object) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def interpret(self, payload: JsonObject) -> str | None:
        if self._client is None:
            raise InterpretationError("HttpInterpretationOracle used outside of its async context")
        try:
            response = await self._client.post(self.endpoint, json=payload, headers=self._headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise InterpretationError(
                f"Interpretation endpoint returned {exc.response.status_code} for {self.endpoint}"
            ) from exc
        except httpx.HTTPError as exc:
            raise InterpretationError(f"Interpretation request to {self.endpoint} failed: {exc}") from exc

        try:
            data: Any = response.json()
        except ValueError as exc:
            raise InterpretationError(f"Interpretation endpoint returned invalid JSON: {exc}") from exc

        if not isinstance(data, dict):
            logger.debug("Interpretation response is not an object: %r", data)
            return None
        text = data.get(INTERPRETATION_RESPONSE_FIELD)
        return text if isinstance(text, str) else None
