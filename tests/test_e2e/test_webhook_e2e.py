"""Fluxo ponta a ponta: handshake, entrega, read receipt e trigger.

Usa a aplicação FastAPI real via TestClient; só a Graph API (MockTransport)
e o motor de automação (sink fake) são substituídos.
"""

from __future__ import annotations

import json
from collections.abc import Iterator

import httpx
import pytest
from fastapi.testclient import TestClient

from api.connectors.whatsapp.http_client import WhatsAppHttpClient
from app import bootstrap
from app.app import create_app
from app.bootstrap import dependencies
from tests.fakes.whatsapp_fakes import EXAMPLE_PAYLOAD, FakeTriggerSink


class _GraphApi:
    """Graph API fake que registra os requests recebidos."""

    def __init__(self, status_code: int = 200, body: dict | None = None) -> None:
        self.status_code = status_code
        self.body = body if body is not None else {"messages": [{"id": "wamid.OUT"}]}
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.body)


@pytest.fixture
def graph_api() -> _GraphApi:
    return _GraphApi()


@pytest.fixture
def sink() -> FakeTriggerSink:
    return FakeTriggerSink()


def _configure(monkeypatch: pytest.MonkeyPatch, graph_api: _GraphApi, sink: FakeTriggerSink) -> None:
    monkeypatch.setenv("WHATSAPP_VERIFY_TOKEN", "abc")
    monkeypatch.setenv("WHATSAPP_ACCESS_TOKEN", "tok")
    monkeypatch.setenv("WHATSAPP_PHONE_ID", "123")
    monkeypatch.delenv("WHATSAPP_APP_SECRET", raising=False)
    monkeypatch.setattr(
        dependencies,
        "create_graph_http_client",
        lambda: WhatsAppHttpClient(transport=httpx.MockTransport(graph_api)),
    )
    monkeypatch.setattr(dependencies, "create_trigger_sink", lambda: sink)
    bootstrap.reset_runtime()


@pytest.fixture
def client(
    monkeypatch: pytest.MonkeyPatch,
    graph_api: _GraphApi,
    sink: FakeTriggerSink,
) -> Iterator[TestClient]:
    _configure(monkeypatch, graph_api, sink)

    with TestClient(create_app()) as test_client:
        yield test_client
    bootstrap.reset_runtime()


def test_handshake_returns_numeric_challenge(client: TestClient) -> None:
    response = client.get(
        "/webhook",
        params={"hub.mode": "subscribe", "hub.verify_token": "abc", "hub.challenge": "1158201444"},
    )

    assert response.status_code == 200
    assert response.text == "1158201444"


def test_handshake_wrong_token_is_forbidden(client: TestClient) -> None:
    response = client.get(
        "/webhook",
        params={"hub.mode": "subscribe", "hub.verify_token": "nope", "hub.challenge": "1"},
    )

    assert response.status_code == 403


def test_delivery_triggers_sink_and_marks_read(
    monkeypatch: pytest.MonkeyPatch,
    graph_api: _GraphApi,
    sink: FakeTriggerSink,
) -> None:
    _configure(monkeypatch, graph_api, sink)

    # Sair do contexto executa o shutdown, que drena o read receipt pendente
    with TestClient(create_app()) as test_client:
        response = test_client.post("/webhook", json=EXAMPLE_PAYLOAD)
    bootstrap.reset_runtime()

    assert response.status_code == 200
    assert response.text == "EVENT_RECEIVED"
    assert sink.calls == [("hi", "15551234")]
    assert len(graph_api.requests) == 1
    read_request = graph_api.requests[0]
    assert str(read_request.url) == "https://graph.facebook.com/v19.0/123/messages"
    assert json.loads(read_request.content) == {
        "messaging_product": "whatsapp",
        "status": "read",
        "message_id": "wamid.X",
    }


def test_other_object_is_ignored(client: TestClient, sink: FakeTriggerSink) -> None:
    response = client.post("/webhook", json={"object": "page", "entry": []})

    assert response.status_code == 200
    assert response.text == "Ignored"
    assert sink.calls == []


def test_invalid_json_is_acknowledged(client: TestClient) -> None:
    response = client.post(
        "/webhook",
        content=b"not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 200
    assert response.text == "OK"


def test_send_message_endpoint(client: TestClient, graph_api: _GraphApi) -> None:
    response = client.post(
        "/messages",
        json={"recipient_number": "5511999998888", "message_text": "Olá"},
    )

    assert response.status_code == 200
    assert response.json() == {"status": "sent", "message_id": "wamid.OUT"}
    assert graph_api.requests[0].headers["Authorization"] == "Bearer tok"


def test_send_message_provider_error(client: TestClient, graph_api: _GraphApi) -> None:
    graph_api.status_code = 401
    graph_api.body = {"error": {"message": "Invalid token"}}

    response = client.post(
        "/messages",
        json={"recipient_number": "5511999998888", "message_text": "Olá"},
    )

    assert response.status_code == 502
    assert response.json()["detail"] == "Invalid token"


def test_send_message_without_credentials(
    client: TestClient,
    monkeypatch: pytest.MonkeyPatch,
    graph_api: _GraphApi,
) -> None:
    monkeypatch.delenv("WHATSAPP_ACCESS_TOKEN")

    response = client.post(
        "/messages",
        json={"recipient_number": "5511999998888", "message_text": "Olá"},
    )

    assert response.status_code == 500
    assert response.json()["detail"] == "Missing credentials in app settings."
    assert graph_api.requests == []


def test_callback_url(client: TestClient) -> None:
    response = client.get("/webhook/url")

    assert response.status_code == 200
    assert response.json()["url"].endswith("/webhook")


def test_health(client: TestClient) -> None:
    assert client.get("/health").json()["status"] == "healthy"
    assert client.get("/ready").status_code == 200
