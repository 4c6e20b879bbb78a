"""Cliente HTTP especializado para WhatsApp/Meta API.

Estende HttpClient genérico com comportamentos específicos de WhatsApp:
- Authorization: Bearer <access_token>
- Tradução de respostas de erro Meta (error.message) em ProviderError
- Logging estruturado sem PII (tokens, números)
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from api.connectors.whatsapp.meta_errors import UNKNOWN_API_ERROR, parse_meta_error
from api.connectors.whatsapp.meta_logging import log_meta_error, log_success
from app.infra.http import HttpClient, HttpClientConfig
from utils.errors import CredentialError, ProviderError

if TYPE_CHECKING:
    import httpx

    from config.settings import WhatsAppSettings

logger: logging.Logger = logging.getLogger(__name__)


class WhatsAppHttpClient(HttpClient):
    """Cliente HTTP para Meta/WhatsApp Cloud API.

    Uma tentativa por chamada (sem retry). TransportError sobe do HttpClient.
    """

    async def send_message(
        self,
        endpoint: str,
        access_token: str,
        payload: dict[str, Any],
    ) -> dict[str, Any]:
        """POST autenticado em /{phone_id}/messages.

        Args:
            endpoint: URL do endpoint (ex: .../messages)
            access_token: Bearer token para autenticação
            payload: Payload JSON da mensagem

        Returns:
            Response JSON da Meta

        Raises:
            CredentialError: Se access_token está vazio
            TransportError: Falha de rede
            ProviderError: Status não-2xx ou corpo com `error`
        """
        if not access_token or not access_token.strip():
            logger.error("whatsapp_access_token_missing")
            raise CredentialError("access_token é obrigatório para chamadas à Graph API")

        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {access_token}",
        }
        response = await self.post(endpoint, json=payload, headers=headers)
        return self._process_response(response)

    def _process_response(self, response: httpx.Response) -> dict[str, Any]:
        """Valida response da API Meta/WhatsApp."""
        try:
            response_data = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            response_data = None

        meta_error = parse_meta_error(response_data)
        if response.is_error or meta_error is not None:
            log_meta_error(meta_error, "send_message", response.status_code)
            raise ProviderError(
                meta_error.error_message if meta_error else UNKNOWN_API_ERROR,
                status_code=response.status_code,
                error_code=meta_error.error_code if meta_error else None,
                error_type=meta_error.error_type if meta_error else None,
                is_permanent=meta_error.is_permanent if meta_error else response.status_code < 500,
            )

        if not isinstance(response_data, dict):
            logger.error("whatsapp_response_invalid_json", extra={"status_code": response.status_code})
            raise ProviderError("invalid_response_json", status_code=response.status_code)

        log_success("send_message", response.status_code)
        return response_data


def create_whatsapp_http_client(
    settings: WhatsAppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> WhatsAppHttpClient:
    """Factory para criar cliente WhatsApp com config padrão.

    Args:
        settings: WhatsAppSettings opcional. Se None, carrega do ambiente.
        transport: Transport httpx opcional (testes)
    """
    # Import local para evitar dependência circular
    from config.settings import get_whatsapp_settings

    whatsapp = settings or get_whatsapp_settings()
    config = HttpClientConfig(timeout_seconds=whatsapp.request_timeout_seconds)
    return WhatsAppHttpClient(config=config, transport=transport)
