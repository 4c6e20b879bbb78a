"""Factory de wiring para WhatsApp (bootstrap).

Conecta builders e clientes concretos (camada api) aos use cases da
camada app, que dependem apenas de protocolos.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.payload_builders.whatsapp import ReadReceiptPayloadBuilder, TextPayloadBuilder
from app.use_cases.whatsapp import (
    InboundEventDispatcher,
    OutboundMessageSender,
    ReadReceiptNotifier,
)
from config.settings import get_whatsapp_settings

if TYPE_CHECKING:
    from app.infra.background_tasks import BackgroundTaskRunner
    from app.protocols.credentials import CredentialProviderProtocol
    from app.protocols.dedupe import AsyncDedupeProtocol
    from app.protocols.http_client import WhatsAppHttpClientProtocol
    from app.protocols.read_receipt import ReadReceiptNotifierProtocol
    from app.protocols.trigger_sink import TriggerSinkProtocol
    from config.settings import WhatsAppSettings


def create_outbound_sender(
    *,
    http_client: WhatsAppHttpClientProtocol,
    credentials: CredentialProviderProtocol,
    settings: WhatsAppSettings | None = None,
) -> OutboundMessageSender:
    """Cria sender de texto com builder Graph API injetado."""
    return OutboundMessageSender(
        http_client=http_client,
        credentials=credentials,
        builder=TextPayloadBuilder(),
        settings=settings or get_whatsapp_settings(),
    )


def create_read_receipt_notifier(
    *,
    http_client: WhatsAppHttpClientProtocol,
    credentials: CredentialProviderProtocol,
    settings: WhatsAppSettings | None = None,
) -> ReadReceiptNotifier:
    """Cria notificador de read receipt (best-effort)."""
    return ReadReceiptNotifier(
        http_client=http_client,
        credentials=credentials,
        builder=ReadReceiptPayloadBuilder(),
        settings=settings or get_whatsapp_settings(),
    )


def create_inbound_dispatcher(
    *,
    read_receipts: ReadReceiptNotifierProtocol,
    trigger_sink: TriggerSinkProtocol,
    background: BackgroundTaskRunner,
    dedupe: AsyncDedupeProtocol | None = None,
    dedupe_ttl_seconds: int = 3600,
) -> InboundEventDispatcher:
    """Wiring do dispatcher de entregas do webhook."""
    return InboundEventDispatcher(
        read_receipts=read_receipts,
        trigger_sink=trigger_sink,
        background=background,
        dedupe=dedupe,
        dedupe_ttl_seconds=dedupe_ttl_seconds,
    )
