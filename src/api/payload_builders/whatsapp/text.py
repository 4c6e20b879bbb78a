"""Builder para mensagens de texto."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.whatsapp.base import build_base_payload
from app.constants.whatsapp import MessageType, RecipientType

if TYPE_CHECKING:
    from app.protocols.models import OutboundMessageRequest


class TextPayloadBuilder:
    """Builder para mensagens de texto simples (sem preview de link)."""

    def build(self, request: OutboundMessageRequest) -> dict[str, Any]:
        """Constrói payload completo de texto.

        Args:
            request: Requisição de envio

        Returns:
            Payload de texto conforme API Meta
        """
        payload = build_base_payload()
        payload.update(
            {
                "recipient_type": RecipientType.INDIVIDUAL.value,
                "to": request.recipient,
                "type": MessageType.TEXT.value,
                "text": {
                    "preview_url": False,
                    "body": request.text,
                },
            }
        )
        return payload
