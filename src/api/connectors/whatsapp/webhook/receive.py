"""Parse e validação inicial do webhook POST (sem PII)."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from ..signature import SignatureResult, verify_meta_signature

if TYPE_CHECKING:
    from collections.abc import Mapping


class WebhookRequestError(ValueError):
    """Erro base para falhas de webhook."""


class InvalidSignatureError(WebhookRequestError):
    """Assinatura inválida do webhook."""


class InvalidJsonError(WebhookRequestError):
    """Corpo do webhook não é JSON válido."""


def parse_webhook_request(
    raw_body: bytes,
    headers: Mapping[str, str],
    secret: str | None,
) -> tuple[Any, SignatureResult]:
    """Valida assinatura e parseia JSON do webhook.

    O formato do JSON (objeto, listas etc.) NÃO é validado aqui; isso é
    responsabilidade do dispatcher, que nunca rejeita uma entrega.

    Args:
        raw_body: Corpo bruto do request
        headers: Headers recebidos
        secret: App secret da Meta (None desliga a validação)

    Raises:
        InvalidSignatureError: Se assinatura for inválida
        InvalidJsonError: Se o corpo não for JSON

    Returns:
        (payload decodificado, SignatureResult)
    """
    signature_result = verify_meta_signature(raw_body, headers, secret)
    if not signature_result.valid:
        raise InvalidSignatureError(signature_result.error or "invalid_signature")

    try:
        payload = json.loads(raw_body or b"null")
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidJsonError("invalid_json") from exc

    return payload, signature_result
