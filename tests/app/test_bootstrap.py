"""Testes do composition root (app.bootstrap)."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from app import bootstrap
from app.bootstrap.dependencies import create_dedupe_store, create_trigger_sink
from app.infra.stores import MemoryDedupeStore
from app.infra.triggers import HttpTriggerSink, LoggingTriggerSink
from app.use_cases.whatsapp import InboundEventDispatcher, OutboundMessageSender
from config.settings import (
    DedupeSettings,
    TriggerSettings,
    get_base_settings,
    get_dedupe_settings,
    get_trigger_settings,
    get_whatsapp_settings,
)

_SETTINGS_GETTERS = (
    get_base_settings,
    get_dedupe_settings,
    get_trigger_settings,
    get_whatsapp_settings,
)


@pytest.fixture(autouse=True)
def fresh_runtime() -> Iterator[None]:
    for getter in _SETTINGS_GETTERS:
        getter.cache_clear()
    bootstrap.reset_runtime()
    yield
    for getter in _SETTINGS_GETTERS:
        getter.cache_clear()
    bootstrap.reset_runtime()


def test_validate_runtime_settings_warns_in_development(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "development")
    monkeypatch.setenv("WHATSAPP_API_BASE_URL", "ftp://invalid")

    bootstrap.validate_runtime_settings()


def test_validate_runtime_settings_fails_in_production(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("WHATSAPP_API_BASE_URL", "ftp://invalid")

    with pytest.raises(RuntimeError, match="Configuração inválida para production"):
        bootstrap.validate_runtime_settings()


def test_validate_runtime_settings_missing_credentials_does_not_fail(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")
    for name in ("WHATSAPP_VERIFY_TOKEN", "WHATSAPP_ACCESS_TOKEN", "WHATSAPP_PHONE_ID"):
        monkeypatch.delenv(name, raising=False)

    bootstrap.validate_runtime_settings()


def test_create_trigger_sink_selects_backend() -> None:
    assert isinstance(create_trigger_sink(TriggerSettings()), LoggingTriggerSink)
    assert isinstance(
        create_trigger_sink(TriggerSettings(webhook_url="https://automations.local/hook")),
        HttpTriggerSink,
    )


def test_create_dedupe_store_follows_flag() -> None:
    assert create_dedupe_store(DedupeSettings(enabled=False)) is None
    assert isinstance(create_dedupe_store(DedupeSettings(enabled=True)), MemoryDedupeStore)


def test_getters_return_singletons() -> None:
    dispatcher = bootstrap.get_inbound_dispatcher()
    sender = bootstrap.get_outbound_sender()

    assert isinstance(dispatcher, InboundEventDispatcher)
    assert isinstance(sender, OutboundMessageSender)
    assert bootstrap.get_inbound_dispatcher() is dispatcher
    assert bootstrap.get_outbound_sender() is sender


@pytest.mark.asyncio
async def test_shutdown_runtime_closes_clients() -> None:
    client = bootstrap.get_graph_http_client()
    client._get_client()

    await bootstrap.shutdown_runtime(timeout_seconds=0.1)

    assert client._client is not None
    assert client._client.is_closed
