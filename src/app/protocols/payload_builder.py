"""Protocolos de construção de payload outbound."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from .models import OutboundMessageRequest


class TextPayloadBuilderProtocol(Protocol):
    """Constrói o payload de envio de texto."""

    def build(self, request: OutboundMessageRequest) -> dict[str, Any]: ...


class ReadReceiptPayloadBuilderProtocol(Protocol):
    """Constrói o payload de marcação como lida."""

    def build(self, message_id: str) -> dict[str, Any]: ...
