"""Testes do endpoint POST /messages."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from api.routes.whatsapp import messages
from app.protocols.models import ProviderResponse
from utils.errors import CredentialError, ProviderError, TransportError


class _FakeSender:
    def __init__(self, error: Exception | None = None) -> None:
        self._error = error
        self.calls: list[tuple[str, str]] = []

    async def send(self, recipient: str, text: str) -> ProviderResponse:
        self.calls.append((recipient, text))
        if self._error is not None:
            raise self._error
        return ProviderResponse(ok=True, message_id="wamid.OUT")


def _body() -> messages.SendMessageRequest:
    return messages.SendMessageRequest(recipient_number="5511999998888", message_text="Olá")


@pytest.mark.asyncio
async def test_send_message_success(monkeypatch: pytest.MonkeyPatch) -> None:
    sender = _FakeSender()
    monkeypatch.setattr(messages, "get_outbound_sender", lambda: sender)

    response = await messages.send_message(_body())

    assert response.status_code == 200
    assert json.loads(response.body) == {"status": "sent", "message_id": "wamid.OUT"}
    assert sender.calls == [("5511999998888", "Olá")]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("error", "expected_status"),
    [
        (CredentialError("Missing credentials in app settings."), 500),
        (ProviderError("Invalid token", status_code=401), 502),
        (TransportError("http_timeout"), 503),
    ],
)
async def test_send_message_maps_errors(
    monkeypatch: pytest.MonkeyPatch,
    error: Exception,
    expected_status: int,
) -> None:
    monkeypatch.setattr(messages, "get_outbound_sender", lambda: _FakeSender(error))

    response = await messages.send_message(_body())
    payload = json.loads(response.body)

    assert response.status_code == expected_status
    assert payload["status"] == "failed"
    assert payload["error"] == type(error).__name__
    assert payload["detail"] == str(error)


def test_send_message_request_rejects_empty_fields() -> None:
    with pytest.raises(ValidationError):
        messages.SendMessageRequest(recipient_number="", message_text="x")
