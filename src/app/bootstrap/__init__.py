"""Bootstrap da aplicação — inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings e
conecta implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, get_inbound_dispatcher

    # Na inicialização do serviço
    initialize_app()

    # Obter use cases
    dispatcher = get_inbound_dispatcher()
    sender = get_outbound_sender()
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from app.observability import get_correlation_id
from app.protocols.credentials import Credentials
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_dedupe_settings,
    get_trigger_settings,
    get_whatsapp_settings,
)

if TYPE_CHECKING:
    from api.connectors.whatsapp.http_client import WhatsAppHttpClient
    from app.infra.background_tasks import BackgroundTaskRunner
    from app.protocols.credentials import CredentialProviderProtocol
    from app.protocols.trigger_sink import TriggerSinkProtocol
    from app.use_cases.whatsapp import (
        InboundEventDispatcher,
        OutboundMessageSender,
        ReadReceiptNotifier,
    )

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa a aplicação com todas as configurações necessárias.

    Deve ser chamada uma vez no início do serviço.

    Configura:
    - Logging estruturado (JSON ou texto) com correlation_id
    """
    settings = get_base_settings()
    configure_logging(
        level=settings.log_level,
        service_name=settings.service_name,
        correlation_id_getter=get_correlation_id,
        log_format=settings.log_format,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.
    Credenciais ausentes geram apenas alerta: são lidas a cada operação
    e podem ser configuradas depois do boot.
    """
    base = get_base_settings()
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"whatsapp: {error}" for error in get_whatsapp_settings().validate())
    errors.extend(f"dedupe: {error}" for error in get_dedupe_settings().validate())
    errors.extend(f"trigger: {error}" for error in get_trigger_settings().validate())

    credentials = Credentials.load(get_credential_provider())
    if not credentials.verify_token or not credentials.can_call_api:
        logger.warning(
            "credentials_incomplete",
            extra={
                "component": "bootstrap",
                "has_verify_token": bool(credentials.verify_token),
                "has_access_token": bool(credentials.access_token),
                "has_phone_id": bool(credentials.phone_id),
            },
        )

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.is_strict:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


# ──────────────────────────────────────────────────────────────────────────────
# Getters (lazy initialization com cache)
# ──────────────────────────────────────────────────────────────────────────────


@lru_cache(maxsize=1)
def get_credential_provider() -> CredentialProviderProtocol:
    """Obtém provedor de credenciais (singleton)."""
    from app.bootstrap.dependencies import create_credential_provider
    return create_credential_provider()


@lru_cache(maxsize=1)
def get_graph_http_client() -> WhatsAppHttpClient:
    """Obtém cliente HTTP da Graph API (singleton, conexão compartilhada)."""
    from app.bootstrap.dependencies import create_graph_http_client
    return create_graph_http_client()


@lru_cache(maxsize=1)
def get_trigger_sink() -> TriggerSinkProtocol:
    """Obtém sink de trigger (singleton)."""
    from app.bootstrap.dependencies import create_trigger_sink
    return create_trigger_sink()


@lru_cache(maxsize=1)
def get_background_runner() -> BackgroundTaskRunner:
    """Obtém runner de tasks em background (singleton)."""
    from app.bootstrap.dependencies import create_background_runner
    return create_background_runner()


@lru_cache(maxsize=1)
def get_outbound_sender() -> OutboundMessageSender:
    """Obtém use case de envio outbound (singleton)."""
    from app.bootstrap.whatsapp_factory import create_outbound_sender
    return create_outbound_sender(
        http_client=get_graph_http_client(),
        credentials=get_credential_provider(),
    )


@lru_cache(maxsize=1)
def get_read_receipt_notifier() -> ReadReceiptNotifier:
    """Obtém notificador de read receipt (singleton)."""
    from app.bootstrap.whatsapp_factory import create_read_receipt_notifier
    return create_read_receipt_notifier(
        http_client=get_graph_http_client(),
        credentials=get_credential_provider(),
    )


@lru_cache(maxsize=1)
def get_inbound_dispatcher() -> InboundEventDispatcher:
    """Obtém dispatcher de entregas do webhook (singleton)."""
    from app.bootstrap.dependencies import create_dedupe_store
    from app.bootstrap.whatsapp_factory import create_inbound_dispatcher

    return create_inbound_dispatcher(
        read_receipts=get_read_receipt_notifier(),
        trigger_sink=get_trigger_sink(),
        background=get_background_runner(),
        dedupe=create_dedupe_store(),
        dedupe_ttl_seconds=get_dedupe_settings().ttl_seconds,
    )


async def shutdown_runtime(timeout_seconds: float = 10.0) -> None:
    """Drena tasks pendentes e fecha conexões HTTP abertas."""
    await get_background_runner().drain(timeout_seconds=timeout_seconds)
    await get_graph_http_client().aclose()
    sink = get_trigger_sink()
    close = getattr(sink, "aclose", None)
    if callable(close):
        await close()


def reset_runtime() -> None:
    """Limpa singletons (testes ou recarga de settings)."""
    for getter in (
        get_credential_provider,
        get_graph_http_client,
        get_trigger_sink,
        get_background_runner,
        get_outbound_sender,
        get_read_receipt_notifier,
        get_inbound_dispatcher,
    ):
        getter.cache_clear()
