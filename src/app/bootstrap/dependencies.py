"""Factories de infra — criação de implementações concretas.

Centraliza a escolha de implementações a partir das settings:
credenciais, clientes HTTP, dedupe, trigger sink e runner de background.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.whatsapp.http_client import create_whatsapp_http_client
from app.infra.background_tasks import BackgroundTaskRunner
from app.infra.http import HttpClient, HttpClientConfig
from app.infra.secrets import EnvCredentialProvider
from app.infra.stores import MemoryDedupeStore
from app.infra.triggers import HttpTriggerSink, LoggingTriggerSink
from config.settings import get_dedupe_settings, get_trigger_settings

if TYPE_CHECKING:
    from api.connectors.whatsapp.http_client import WhatsAppHttpClient
    from app.protocols.credentials import CredentialProviderProtocol
    from app.protocols.dedupe import AsyncDedupeProtocol
    from app.protocols.trigger_sink import TriggerSinkProtocol
    from config.settings import DedupeSettings, TriggerSettings, WhatsAppSettings

logger = logging.getLogger(__name__)


def create_credential_provider() -> CredentialProviderProtocol:
    """Cria provedor de credenciais lido do ambiente (prefixo WHATSAPP_)."""
    return EnvCredentialProvider(prefix="WHATSAPP")


def create_graph_http_client(settings: WhatsAppSettings | None = None) -> WhatsAppHttpClient:
    """Cria cliente HTTP da Graph API."""
    return create_whatsapp_http_client(settings)


def create_trigger_sink(
    settings: TriggerSettings | None = None,
    http_client: HttpClient | None = None,
) -> TriggerSinkProtocol:
    """Cria o sink de trigger.

    Com TRIGGER_WEBHOOK_URL configurada entrega via HTTP; sem URL apenas loga.
    """
    trigger = settings or get_trigger_settings()
    if not trigger.is_http:
        logger.info("trigger_sink_created", extra={"backend": "logging"})
        return LoggingTriggerSink()

    client = http_client or HttpClient(HttpClientConfig(timeout_seconds=trigger.timeout_seconds))
    logger.info("trigger_sink_created", extra={"backend": "http"})
    return HttpTriggerSink(client, trigger.webhook_url)


def create_dedupe_store(settings: DedupeSettings | None = None) -> AsyncDedupeProtocol | None:
    """Cria store de dedupe quando DEDUPE_ENABLED está ligado.

    Returns:
        MemoryDedupeStore ou None (dedupe desligado)
    """
    dedupe = settings or get_dedupe_settings()
    if not dedupe.enabled:
        logger.info("dedupe_store_disabled")
        return None
    logger.info(
        "dedupe_store_created",
        extra={"backend": "memory", "ttl_seconds": dedupe.ttl_seconds},
    )
    return MemoryDedupeStore()


def create_background_runner() -> BackgroundTaskRunner:
    """Cria runner de tasks fire-and-forget."""
    return BackgroundTaskRunner()
