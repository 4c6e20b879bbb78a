"""Sinks de trigger para o motor de automação.

- LoggingTriggerSink: apenas registra o evento (padrão sem URL configurada)
- HttpTriggerSink: POST JSON {message_text, sender_number} para uma URL
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.protocols.trigger_sink import TriggerSinkProtocol
from config.logging import mask_phone_number
from utils.errors import ProviderError

if TYPE_CHECKING:
    from app.infra.http import HttpClient

logger = logging.getLogger(__name__)


class LoggingTriggerSink(TriggerSinkProtocol):
    """Sink que só loga o trigger (sem PII)."""

    async def trigger(self, *, message_text: str, sender_number: str) -> None:
        logger.info(
            "trigger_logged",
            extra={
                "sender": mask_phone_number(sender_number),
                "text_length": len(message_text),
            },
        )


class HttpTriggerSink(TriggerSinkProtocol):
    """Entrega o trigger via HTTP POST.

    Raises (em trigger):
        TransportError: falha de rede
        ProviderError: resposta não-2xx do motor de automação
    """

    def __init__(self, http_client: HttpClient, url: str) -> None:
        self._http = http_client
        self._url = url

    async def trigger(self, *, message_text: str, sender_number: str) -> None:
        response = await self._http.post(
            self._url,
            json={"message_text": message_text, "sender_number": sender_number},
        )
        if response.is_error:
            raise ProviderError(
                "trigger_rejected",
                status_code=response.status_code,
            )
        logger.info(
            "trigger_delivered",
            extra={
                "sender": mask_phone_number(sender_number),
                "status_code": response.status_code,
            },
        )

    async def aclose(self) -> None:
        """Fecha o cliente HTTP do sink."""
        await self._http.aclose()
