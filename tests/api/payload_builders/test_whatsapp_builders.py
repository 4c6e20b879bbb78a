"""Testes dos builders de payload WhatsApp."""

from __future__ import annotations

from api.payload_builders.whatsapp import ReadReceiptPayloadBuilder, TextPayloadBuilder
from app.protocols.models import OutboundMessageRequest


def test_text_payload_builder_builds_fixed_envelope() -> None:
    payload = TextPayloadBuilder().build(
        OutboundMessageRequest(recipient="5511999998888", text="Olá")
    )

    assert payload == {
        "messaging_product": "whatsapp",
        "recipient_type": "individual",
        "to": "5511999998888",
        "type": "text",
        "text": {"preview_url": False, "body": "Olá"},
    }


def test_read_receipt_payload_builder() -> None:
    payload = ReadReceiptPayloadBuilder().build("wamid.X")

    assert payload == {
        "messaging_product": "whatsapp",
        "status": "read",
        "message_id": "wamid.X",
    }


def test_builders_return_independent_dicts() -> None:
    builder = ReadReceiptPayloadBuilder()
    first = builder.build("a")
    first["status"] = "changed"

    assert builder.build("a")["status"] == "read"
