"""Testes dos provedores de credenciais."""

from __future__ import annotations

import pytest

from app.infra.secrets import EnvCredentialProvider, StaticCredentialProvider


def test_env_provider_reads_prefixed_variable(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WHATSAPP_ACCESS_TOKEN", "tok")

    assert EnvCredentialProvider().get("access_token") == "tok"


def test_env_provider_reads_fresh_value_every_call(monkeypatch: pytest.MonkeyPatch) -> None:
    provider = EnvCredentialProvider(prefix="WHATSAPP")
    monkeypatch.delenv("WHATSAPP_PHONE_ID", raising=False)
    assert provider.get("phone_id") is None

    monkeypatch.setenv("WHATSAPP_PHONE_ID", "123")
    assert provider.get("phone_id") == "123"

    monkeypatch.setenv("WHATSAPP_PHONE_ID", "456")
    assert provider.get("phone-id") == "456"


def test_env_provider_custom_prefix(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WA_VERIFY_TOKEN", "abc")

    assert EnvCredentialProvider(prefix="wa_").get("verify_token") == "abc"


def test_static_provider() -> None:
    provider = StaticCredentialProvider({"verify_token": "abc"})

    assert provider.get("verify_token") == "abc"
    assert provider.get("access_token") is None
