"""Endpoints de webhook do WhatsApp.

Endpoints:
- GET /webhook: verificação de webhook (Meta challenge)
- POST /webhook: recebimento de eventos inbound
- GET /webhook/url: callback URL a configurar no portal da Meta

Segurança:
- Validação HMAC em POST quando WHATSAPP_APP_SECRET está configurado
- Resposta rápida (200 OK) para evitar reentrega pela Meta
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse, PlainTextResponse

from api.connectors.whatsapp.webhook.receive import (
    InvalidJsonError,
    InvalidSignatureError,
    parse_webhook_request,
)
from api.connectors.whatsapp.webhook.verify import verify_webhook_challenge
from app.bootstrap import get_credential_provider, get_inbound_dispatcher
from app.constants.whatsapp import DispatchStatus
from app.observability import correlation_scope
from app.protocols.credentials import Credentials
from config.settings import get_whatsapp_settings
from utils.errors import AuthorizationError, ConfigurationError

logger = logging.getLogger(__name__)

router = APIRouter()

CORRELATION_HEADER = "x-correlation-id"


@router.get("")
async def verify_webhook(request: Request) -> Response:
    """Verificação de webhook — responde ao challenge da Meta.

    Query params esperados:
    - hub.mode: deve ser "subscribe"
    - hub.verify_token: deve corresponder ao configurado
    - hub.challenge: valor a retornar

    Returns:
        Texto do challenge, 403 (token/modo inválido) ou 500 (sem token).
    """
    credentials = Credentials.load(get_credential_provider())

    try:
        challenge = verify_webhook_challenge(
            hub_mode=request.query_params.get("hub.mode"),
            hub_verify_token=request.query_params.get("hub.verify_token"),
            hub_challenge=request.query_params.get("hub.challenge"),
            expected_token=credentials.verify_token,
        )
    except ConfigurationError as exc:
        return PlainTextResponse(str(exc), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    except AuthorizationError as exc:
        return PlainTextResponse(str(exc), status_code=status.HTTP_403_FORBIDDEN)

    # Meta espera o challenge como texto puro
    return PlainTextResponse(str(challenge), status_code=status.HTTP_200_OK)


@router.post("")
async def receive_webhook(request: Request) -> Response:
    """Recebimento de eventos inbound do WhatsApp.

    Sempre 200 com corpo "Ignored" | "EVENT_RECEIVED" | "OK", exceto
    assinatura inválida (401): nesse caso a entrega não veio da Meta.
    """
    with correlation_scope(request.headers.get(CORRELATION_HEADER)) as correlation_id:
        raw_body = await request.body()
        credentials = Credentials.load(get_credential_provider())

        try:
            payload, signature_result = parse_webhook_request(
                raw_body=raw_body,
                headers=dict(request.headers),
                secret=credentials.app_secret,
            )
        except InvalidSignatureError as exc:
            logger.warning(
                "webhook_signature_invalid",
                extra={"channel": "whatsapp", "error": str(exc)},
            )
            return PlainTextResponse("Unauthorized", status_code=status.HTTP_401_UNAUTHORIZED)
        except InvalidJsonError:
            logger.warning(
                "webhook_json_invalid",
                extra={"channel": "whatsapp", "payload_size": len(raw_body)},
            )
            return PlainTextResponse(DispatchStatus.OK.value)

        logger.info(
            "webhook_received",
            extra={
                "channel": "whatsapp",
                "signature_skipped": signature_result.skipped,
                "payload_size": len(raw_body),
            },
        )

        result = await get_inbound_dispatcher().handle_event(payload)
        return PlainTextResponse(
            result.value,
            headers={CORRELATION_HEADER: correlation_id},
        )


@router.get("/url")
async def webhook_callback_url(request: Request) -> JSONResponse:
    """Retorna a callback URL para registro no Meta Developer Portal."""
    settings = get_whatsapp_settings()
    return JSONResponse({"url": settings.get_webhook_callback_url(str(request.base_url))})
