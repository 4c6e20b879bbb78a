"""Validação de assinatura X-Hub-Signature-256 (HMAC-SHA256 do corpo bruto)."""

from __future__ import annotations

import hashlib
import hmac
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

SIGNATURE_HEADER = "x-hub-signature-256"
SIGNATURE_PREFIX = "sha256="


@dataclass(frozen=True, slots=True)
class SignatureResult:
    """Resultado da validação.

    `skipped` indica que não há secret configurado (validação desligada).
    """

    valid: bool
    skipped: bool = False
    error: str | None = None


def _get_header(headers: Mapping[str, str], name: str) -> str | None:
    for key, value in headers.items():
        if key.lower() == name:
            return value
    return None


def verify_meta_signature(
    raw_body: bytes,
    headers: Mapping[str, str],
    secret: str | None,
) -> SignatureResult:
    """Compara a assinatura recebida com o HMAC do corpo.

    Args:
        raw_body: Corpo bruto do request
        headers: Headers recebidos (case-insensitive)
        secret: App secret da Meta; None/vazio desliga a validação
    """
    if not secret:
        return SignatureResult(valid=True, skipped=True)

    received = _get_header(headers, SIGNATURE_HEADER)
    if not received:
        return SignatureResult(valid=False, error="missing_signature")
    if not received.startswith(SIGNATURE_PREFIX):
        return SignatureResult(valid=False, error="malformed_signature")

    expected = hmac.new(secret.encode("utf-8"), raw_body, hashlib.sha256).hexdigest()
    if not hmac.compare_digest(expected, received[len(SIGNATURE_PREFIX):]):
        return SignatureResult(valid=False, error="signature_mismatch")
    return SignatureResult(valid=True)
