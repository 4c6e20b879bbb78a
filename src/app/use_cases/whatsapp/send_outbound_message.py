"""Use case de envio outbound de texto via WhatsApp Cloud API.

Operação falível: levanta CredentialError, TransportError ou ProviderError
para que o chamador (ex.: ação de automação) saiba que o envio falhou.
Sem retry.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.observability import measure_latency
from app.protocols.credentials import Credentials
from app.protocols.models import OutboundMessageRequest, ProviderResponse
from config.logging import mask_phone_number
from utils.errors import CredentialError, ProviderError, TransportError

if TYPE_CHECKING:
    from app.protocols.credentials import CredentialProviderProtocol
    from app.protocols.http_client import WhatsAppHttpClientProtocol
    from app.protocols.payload_builder import TextPayloadBuilderProtocol
    from config.settings import WhatsAppSettings

logger = logging.getLogger(__name__)

MISSING_CREDENTIALS = "Missing credentials in app settings."


class OutboundMessageSender:
    """Envia mensagens de texto autenticadas."""

    def __init__(
        self,
        http_client: WhatsAppHttpClientProtocol,
        credentials: CredentialProviderProtocol,
        builder: TextPayloadBuilderProtocol,
        settings: WhatsAppSettings,
    ) -> None:
        self._http = http_client
        self._credentials = credentials
        self._builder = builder
        self._settings = settings

    async def send(self, recipient: str, text: str) -> ProviderResponse:
        """Envia `text` para `recipient`.

        Raises:
            CredentialError: access token ou phone id ausente (antes de qualquer IO)
            TransportError: falha de rede
            ProviderError: resposta de erro da Graph API

        Returns:
            ProviderResponse com o message_id atribuído pela Meta
        """
        creds = Credentials.load(self._credentials)
        if not creds.can_call_api:
            logger.error(
                "outbound_credentials_missing",
                extra={
                    "has_access_token": bool(creds.access_token),
                    "has_phone_id": bool(creds.phone_id),
                },
            )
            raise CredentialError(MISSING_CREDENTIALS)

        request = OutboundMessageRequest(recipient=recipient, text=text)
        payload = self._builder.build(request)
        endpoint = self._settings.get_messages_endpoint(creds.phone_id)

        logger.info("outbound_sending", extra={"recipient": mask_phone_number(recipient)})
        try:
            with measure_latency("outbound_sender", "send"):
                data = await self._http.send_message(
                    endpoint=endpoint,
                    access_token=creds.access_token,
                    payload=payload,
                )
        except (TransportError, ProviderError) as exc:
            logger.error(
                "outbound_send_failed",
                extra={
                    "recipient": mask_phone_number(recipient),
                    "error_type": type(exc).__name__,
                    "status_code": getattr(exc, "status_code", None),
                },
            )
            raise

        message_id = _extract_message_id(data)
        if message_id is None:
            logger.error("outbound_response_without_message_id")
            raise ProviderError("Unexpected API response: missing message id")

        logger.info(
            "outbound_sent",
            extra={"recipient": mask_phone_number(recipient), "message_id": message_id},
        )
        return ProviderResponse(ok=True, message_id=message_id)


def _extract_message_id(data: dict[str, object]) -> str | None:
    """Lê messages[0].id do response de sucesso."""
    messages = data.get("messages")
    if not isinstance(messages, list) or not messages:
        return None
    first = messages[0]
    if not isinstance(first, dict):
        return None
    message_id = first.get("id")
    return message_id if isinstance(message_id, str) and message_id else None
