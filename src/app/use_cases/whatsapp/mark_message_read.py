"""Use case best-effort: marca mensagem inbound como lida.

Nunca levanta exceção. Sem credenciais é no-op silencioso; erros de rede
ou da API são apenas logados.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.protocols.credentials import Credentials
from app.protocols.models import BestEffortResult
from app.protocols.read_receipt import ReadReceiptNotifierProtocol

if TYPE_CHECKING:
    from app.protocols.credentials import CredentialProviderProtocol
    from app.protocols.http_client import WhatsAppHttpClientProtocol
    from app.protocols.payload_builder import ReadReceiptPayloadBuilderProtocol
    from config.settings import WhatsAppSettings

logger = logging.getLogger(__name__)


class ReadReceiptNotifier(ReadReceiptNotifierProtocol):
    """Envia o status `read` (double blue tick) para uma mensagem."""

    def __init__(
        self,
        http_client: WhatsAppHttpClientProtocol,
        credentials: CredentialProviderProtocol,
        builder: ReadReceiptPayloadBuilderProtocol,
        settings: WhatsAppSettings,
    ) -> None:
        self._http = http_client
        self._credentials = credentials
        self._builder = builder
        self._settings = settings

    async def mark_read(self, message_id: str) -> BestEffortResult:
        try:
            creds = Credentials.load(self._credentials)
            if not creds.can_call_api:
                logger.debug("read_receipt_skipped", extra={"reason": "credentials_missing"})
                return BestEffortResult.skipped("credentials_missing")

            await self._http.send_message(
                endpoint=self._settings.get_messages_endpoint(creds.phone_id),
                access_token=creds.access_token,
                payload=self._builder.build(message_id),
            )
        except Exception as exc:
            logger.warning(
                "read_receipt_failed",
                extra={"message_id": message_id, "error_type": type(exc).__name__},
            )
            return BestEffortResult.failed(exc)

        logger.info("read_receipt_sent", extra={"message_id": message_id})
        return BestEffortResult.done()
