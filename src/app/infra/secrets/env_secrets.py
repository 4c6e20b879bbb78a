"""Provedor de credenciais via variáveis de ambiente.

Lê o ambiente a cada chamada (sem cache), então rotação de token via
reconfiguração do processo/secret mount é refletida imediatamente.
"""

from __future__ import annotations

import logging
import os

from app.protocols.credentials import CredentialProviderProtocol

logger = logging.getLogger(__name__)


class EnvCredentialProvider(CredentialProviderProtocol):
    """Provedor de credenciais usando variáveis de ambiente.

    Args:
        prefix: Prefixo das variáveis (default: "WHATSAPP")

    Exemplo:
        EnvCredentialProvider().get("access_token")  # lê WHATSAPP_ACCESS_TOKEN
    """

    def __init__(self, prefix: str = "WHATSAPP") -> None:
        self._prefix = prefix.upper().rstrip("_") + "_" if prefix else ""

    def _env_key(self, key: str) -> str:
        """Converte nome da credencial para variável de ambiente."""
        # access-token / access_token -> WHATSAPP_ACCESS_TOKEN
        env_key = key.upper().replace("-", "_")
        return f"{self._prefix}{env_key}"

    def get(self, key: str) -> str | None:
        """Obtém credencial do ambiente.

        Returns:
            Valor ou None se a variável não estiver definida.
        """
        env_key = self._env_key(key)
        value = os.getenv(env_key)
        if value is None:
            logger.debug("env_credential_not_found", extra={"key": key, "env_key": env_key})
        return value


class StaticCredentialProvider(CredentialProviderProtocol):
    """Provedor com valores fixos (embedding em outro serviço, scripts)."""

    def __init__(self, values: dict[str, str] | None = None) -> None:
        self._values = dict(values or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)
