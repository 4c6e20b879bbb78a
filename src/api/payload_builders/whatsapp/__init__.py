"""Builders de payload para API Meta/WhatsApp."""

from api.payload_builders.whatsapp.base import build_base_payload
from api.payload_builders.whatsapp.read_receipt import ReadReceiptPayloadBuilder
from api.payload_builders.whatsapp.text import TextPayloadBuilder

__all__ = [
    "ReadReceiptPayloadBuilder",
    "TextPayloadBuilder",
    "build_base_payload",
]
