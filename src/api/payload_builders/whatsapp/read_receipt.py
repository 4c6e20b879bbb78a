"""Builder para marcação de mensagem como lida (double blue tick)."""

from __future__ import annotations

from typing import Any

from api.payload_builders.whatsapp.base import build_base_payload
from app.constants.whatsapp import MessageStatus


class ReadReceiptPayloadBuilder:
    """Builder do payload {messaging_product, status: read, message_id}."""

    def build(self, message_id: str) -> dict[str, Any]:
        payload = build_base_payload()
        payload.update({"status": MessageStatus.READ.value, "message_id": message_id})
        return payload
