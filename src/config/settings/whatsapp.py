"""Settings específicas de WhatsApp.

Configurações não-secretas do canal WhatsApp via Graph API.
Credenciais (tokens, phone id) NÃO ficam aqui: são lidas a cada operação
via CredentialProviderProtocol (ver app/infra/secrets).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Constantes do Graph API
GRAPH_API_VERSION: str = "v19.0"
GRAPH_API_BASE_URL: str = "https://graph.facebook.com"

# Caminho público do webhook (registrado no Meta Developer Portal)
WEBHOOK_PATH: str = "/webhook"


@dataclass(frozen=True)
class WhatsAppSettings:
    """Configurações do canal WhatsApp.

    Attributes:
        api_version: Versão da Graph API (ex: v19.0)
        api_base_url: URL base da Graph API
        request_timeout_seconds: Timeout para requisições HTTP outbound
        public_base_url: URL pública do serviço (para montar a callback URL)
    """

    api_version: str = GRAPH_API_VERSION
    api_base_url: str = GRAPH_API_BASE_URL
    request_timeout_seconds: float = 30.0
    public_base_url: str = ""

    @property
    def api_endpoint(self) -> str:
        """URL base completa da API com versão."""
        return f"{self.api_base_url.rstrip('/')}/{self.api_version}"

    def get_messages_endpoint(self, phone_number_id: str) -> str:
        """Retorna URL para envio de mensagens e read receipts.

        Args:
            phone_number_id: ID do número remetente no Meta Business.

        Returns:
            URL completa no formato: https://graph.facebook.com/v19.0/{id}/messages

        Raises:
            ValueError: Se phone_number_id vazio.
        """
        if not phone_number_id:
            raise ValueError("phone_number_id é obrigatório")
        return f"{self.api_endpoint}/{phone_number_id}/messages"

    def get_webhook_callback_url(self, fallback_base_url: str | None = None) -> str:
        """Retorna a callback URL completa para configurar no portal da Meta.

        Args:
            fallback_base_url: Base usada se PUBLIC_BASE_URL não estiver
                configurada (ex.: base_url da requisição atual).

        Raises:
            ValueError: Se nenhuma base estiver disponível.
        """
        base = self.public_base_url or fallback_base_url
        if not base:
            raise ValueError("PUBLIC_BASE_URL não configurada")
        return f"{base.rstrip('/')}{WEBHOOK_PATH}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas de WhatsApp.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_version.startswith("v"):
            errors.append("WHATSAPP_API_VERSION deve ter o formato vNN.N")

        if not self.api_base_url.startswith(("http://", "https://")):
            errors.append("WHATSAPP_API_BASE_URL deve ser uma URL http(s)")

        if self.request_timeout_seconds <= 0:
            errors.append("WHATSAPP_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> WhatsAppSettings:
    """Carrega WhatsAppSettings a partir de variáveis de ambiente."""
    return WhatsAppSettings(
        api_version=os.getenv("WHATSAPP_API_VERSION", GRAPH_API_VERSION),
        api_base_url=os.getenv("WHATSAPP_API_BASE_URL", GRAPH_API_BASE_URL),
        request_timeout_seconds=float(
            os.getenv("WHATSAPP_REQUEST_TIMEOUT_SECONDS", "30")
        ),
        public_base_url=os.getenv("PUBLIC_BASE_URL", ""),
    )


@lru_cache(maxsize=1)
def get_whatsapp_settings() -> WhatsAppSettings:
    """Retorna instância cacheada de WhatsAppSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
