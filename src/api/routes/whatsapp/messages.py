"""Endpoint de envio de mensagens de texto (ação de automação).

POST /messages {recipient_number, message_text} -> {status, message_id}
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from app.bootstrap import get_outbound_sender
from utils.errors import CredentialError, ProviderError, TransportError

logger = logging.getLogger(__name__)

router = APIRouter()


class SendMessageRequest(BaseModel):
    """Corpo da requisição de envio."""

    recipient_number: str = Field(min_length=1)
    message_text: str = Field(min_length=1)


@router.post("/messages")
async def send_message(body: SendMessageRequest) -> JSONResponse:
    """Envia texto para um número via WhatsApp Cloud API.

    Mapeamento de erros:
    - CredentialError -> 500
    - ProviderError -> 502 (mensagem da Meta)
    - TransportError -> 503
    """
    sender = get_outbound_sender()
    try:
        response = await sender.send(body.recipient_number, body.message_text)
    except CredentialError as exc:
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, exc)
    except ProviderError as exc:
        return _error(status.HTTP_502_BAD_GATEWAY, exc)
    except TransportError as exc:
        return _error(status.HTTP_503_SERVICE_UNAVAILABLE, exc)

    return JSONResponse({"status": "sent", "message_id": response.message_id})


def _error(status_code: int, exc: Exception) -> JSONResponse:
    return JSONResponse(
        {"status": "failed", "error": type(exc).__name__, "detail": str(exc)},
        status_code=status_code,
    )
