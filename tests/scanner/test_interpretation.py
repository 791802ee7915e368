"""Tests for the HTTP interpretation oracle."""

from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from a11yscore.exceptions import InterpretationError
from a11yscore.scanner.interpretation import HttpInterpretationOracle

ENDPOINT = "https://interpret.example/api/interpret"
PAYLOAD = {"score": 85, "issues": [{"id": "issue-0", "title": "Images must have alternate text"}]}


def _client(handler: httpx.MockTransport) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=handler)


async def _interpret_with(handler: httpx.MockTransport) -> str | None:
    async with _client(handler) as client:
        async with HttpInterpretationOracle(ENDPOINT, client=client) as oracle:
            return await oracle.interpret(PAYLOAD)


def test_posts_payload_and_reads_text_field() -> None:
    received: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        received.append(request)
        return httpx.Response(200, json={"text": "Screen reader users cannot perceive the image."})

    text = asyncio.run(_interpret_with(httpx.MockTransport(handler)))

    assert text == "Screen reader users cannot perceive the image."
    assert received[0].method == "POST"
    assert str(received[0].url) == ENDPOINT
    assert json.loads(received[0].content) == PAYLOAD
    assert received[0].headers["content-type"] == "application/json"


@pytest.mark.parametrize(
    "body",
    [[1, 2, 3], {"text": 42}, {"message": "no text field"}],
    ids=["list_body", "non_text_field", "missing_field"],
)
def test_unusable_response_shape_returns_none(body: object) -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json=body))

    assert asyncio.run(_interpret_with(transport)) is None


def test_error_status_raises_interpretation_error() -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(500, json={"error": "boom"}))

    with pytest.raises(InterpretationError, match="returned 500"):
        asyncio.run(_interpret_with(transport))


def test_transport_failure_raises_interpretation_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(InterpretationError, match="failed"):
        asyncio.run(_interpret_with(httpx.MockTransport(handler)))


def test_invalid_json_raises_interpretation_error() -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(200, content=b"not json"))

    with pytest.raises(InterpretationError, match="invalid JSON"):
        asyncio.run(_interpret_with(transport))


def test_use_outside_context_raises() -> None:
    oracle = HttpInterpretationOracle(ENDPOINT)

    with pytest.raises(InterpretationError, match="outside"):
        asyncio.run(oracle.interpret(PAYLOAD))


def test_injected_client_stays_open_after_exit() -> None:
    async def _run() -> bool:
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"text": "x"}))
        async with _client(transport) as client:
            async with HttpInterpretationOracle(ENDPOINT, client=client):
                pass
            return client.is_closed

    assert asyncio.run(_run()) is False
