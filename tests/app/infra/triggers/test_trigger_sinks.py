"""Testes dos sinks de trigger."""

from __future__ import annotations

import json
import logging

import httpx
import pytest

from app.infra.http import HttpClient
from app.infra.triggers import HttpTriggerSink, LoggingTriggerSink
from utils.errors import ProviderError, TransportError

TRIGGER_URL = "https://automations.example.com/hooks/whatsapp"


@pytest.mark.asyncio
async def test_logging_sink_masks_sender(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO):
        await LoggingTriggerSink().trigger(message_text="hi", sender_number="5511999998888")

    record = next(r for r in caplog.records if r.getMessage() == "trigger_logged")
    assert record.sender == "*********8888"
    assert record.text_length == 2


@pytest.mark.asyncio
async def test_http_sink_posts_json() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(204)

    sink = HttpTriggerSink(HttpClient(transport=httpx.MockTransport(handler)), TRIGGER_URL)
    await sink.trigger(message_text="hi", sender_number="15551234")
    await sink.aclose()

    assert str(seen[0].url) == TRIGGER_URL
    assert json.loads(seen[0].content) == {"message_text": "hi", "sender_number": "15551234"}


@pytest.mark.asyncio
async def test_http_sink_rejected_raises_provider_error() -> None:
    sink = HttpTriggerSink(
        HttpClient(transport=httpx.MockTransport(lambda request: httpx.Response(500))),
        TRIGGER_URL,
    )

    with pytest.raises(ProviderError) as exc_info:
        await sink.trigger(message_text="hi", sender_number="15551234")

    assert exc_info.value.status_code == 500


@pytest.mark.asyncio
async def test_http_sink_network_error_raises_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timeout", request=request)

    sink = HttpTriggerSink(HttpClient(transport=httpx.MockTransport(handler)), TRIGGER_URL)

    with pytest.raises(TransportError, match="http_timeout"):
        await sink.trigger(message_text="hi", sender_number="15551234")
