"""Secrets — provedores de credenciais do canal WhatsApp."""

from __future__ import annotations

from app.infra.secrets.env_secrets import EnvCredentialProvider, StaticCredentialProvider

__all__ = [
    "EnvCredentialProvider",
    "StaticCredentialProvider",
]
