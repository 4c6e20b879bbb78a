"""Testes dos endpoints de health e readiness."""

from __future__ import annotations

import json

import pytest

from api.routes.health import router as health_router
from app.infra.secrets import StaticCredentialProvider


@pytest.mark.asyncio
async def test_health_check_returns_healthy() -> None:
    response = await health_router.health_check()

    assert response.status == "healthy"
    assert response.service


@pytest.mark.asyncio
async def test_readiness_not_ready_without_credentials(monkeypatch: pytest.MonkeyPatch) -> None:
    provider = StaticCredentialProvider({})
    monkeypatch.setattr(health_router, "get_credential_provider", lambda: provider)

    response = await health_router.readiness_check()
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["status"] == "not_ready"
    assert "credentials: WHATSAPP_ACCESS_TOKEN ausente" in payload["problems"]
    assert "credentials: WHATSAPP_PHONE_ID ausente" in payload["problems"]


@pytest.mark.asyncio
async def test_readiness_ready_with_credentials(monkeypatch: pytest.MonkeyPatch) -> None:
    provider = StaticCredentialProvider(
        {"verify_token": "v", "access_token": "a", "phone_id": "1"}
    )
    monkeypatch.setattr(health_router, "get_credential_provider", lambda: provider)

    response = await health_router.readiness_check()
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 200
    assert payload["status"] == "ready"
    assert payload["problems"] == []
