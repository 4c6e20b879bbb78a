"""Use case de despacho de entregas POST do webhook WhatsApp.

Contrato de transporte: a Meta exige 200 OK rápido ou reentrega o payload
inteiro. Por isso `handle_event` nunca levanta exceção e sempre devolve
um DispatchStatus.

Fluxo:
1. `object` diferente de whatsapp_business_account -> Ignored
2. Parse estrito da primeira mensagem; ausência/malformação -> EVENT_RECEIVED
3. (opcional) dedupe por wamid, marcado antes do trigger
4. Read receipt em background (não aguardado, falha isolada)
5. Trigger aguardado (falha logada, não altera o status)
6. Qualquer exceção inesperada -> OK
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from api.connectors.whatsapp.webhook.payload import extract_first_message
from app.constants.whatsapp import WHATSAPP_BUSINESS_ACCOUNT, DispatchStatus
from app.observability import measure_latency, record_dispatch_status
from config.logging import mask_phone_number

if TYPE_CHECKING:
    from app.infra.background_tasks import BackgroundTaskRunner
    from app.protocols.dedupe import AsyncDedupeProtocol
    from app.protocols.models import ExtractedMessage
    from app.protocols.read_receipt import ReadReceiptNotifierProtocol
    from app.protocols.trigger_sink import TriggerSinkProtocol

logger = logging.getLogger(__name__)


class InvalidPayloadError(ValueError):
    """Corpo da entrega não é um objeto JSON."""


class InboundEventDispatcher:
    """Valida, extrai e encaminha a primeira mensagem de uma entrega."""

    def __init__(
        self,
        read_receipts: ReadReceiptNotifierProtocol,
        trigger_sink: TriggerSinkProtocol,
        background: BackgroundTaskRunner,
        dedupe: AsyncDedupeProtocol | None = None,
        dedupe_ttl_seconds: int = 3600,
    ) -> None:
        self._read_receipts = read_receipts
        self._trigger_sink = trigger_sink
        self._background = background
        self._dedupe = dedupe
        self._dedupe_ttl = dedupe_ttl_seconds

    async def handle_event(self, payload: Any) -> DispatchStatus:
        """Processa uma entrega e retorna o corpo da resposta 200."""
        try:
            with measure_latency("inbound_dispatcher", "handle_event"):
                status = await self._dispatch(payload)
        except Exception:
            logger.exception("webhook_payload_processing_error")
            status = DispatchStatus.OK

        record_dispatch_status(status.value)
        return status

    async def _dispatch(self, payload: Any) -> DispatchStatus:
        if not isinstance(payload, Mapping):
            raise InvalidPayloadError(f"payload_not_object:{type(payload).__name__}")

        if payload.get("object") != WHATSAPP_BUSINESS_ACCOUNT:
            logger.info("webhook_payload_ignored", extra={"object": str(payload.get("object"))})
            return DispatchStatus.IGNORED

        message = extract_first_message(dict(payload))
        if message is None:
            logger.info("webhook_no_message")
            return DispatchStatus.EVENT_RECEIVED

        logger.info(
            "webhook_message_received",
            extra={
                "sender": mask_phone_number(message.sender_number),
                "message_id": message.message_id,
                "message_type": message.message_type,
                "has_text": message.text is not None,
            },
        )

        if await self._is_duplicate(message.message_id):
            logger.info("webhook_message_duplicate", extra={"message_id": message.message_id})
            return DispatchStatus.EVENT_RECEIVED

        self._background.schedule(
            self._read_receipts.mark_read(message.message_id),
            operation="mark_read",
        )
        await self._forward(message)
        return DispatchStatus.EVENT_RECEIVED

    async def _forward(self, message: ExtractedMessage) -> None:
        """Entrega ao trigger sink; falha é logada e engolida."""
        try:
            await self._trigger_sink.trigger(
                message_text=message.text or "",
                sender_number=message.sender_number,
            )
        except Exception as exc:
            logger.error(
                "trigger_failed",
                extra={"message_id": message.message_id, "error_type": type(exc).__name__},
                exc_info=True,
            )

    async def _is_duplicate(self, message_id: str) -> bool:
        """Reivindica o wamid antes de qualquer efeito colateral."""
        if self._dedupe is None:
            return False
        try:
            return await self._dedupe.seen(message_id, self._dedupe_ttl)
        except Exception as exc:
            logger.warning("dedupe_check_failed", extra={"error_type": type(exc).__name__})
            return False
