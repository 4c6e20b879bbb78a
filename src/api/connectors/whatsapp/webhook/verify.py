"""Verificação de webhook exigida pela Meta (handshake GET)."""

from __future__ import annotations

import logging
import re

from app.constants.whatsapp import HUB_MODE_SUBSCRIBE
from utils.errors import AuthorizationError, ConfigurationError

logger = logging.getLogger(__name__)

VERIFY_TOKEN_NOT_CONFIGURED = "Verification Token not configured"
VERIFICATION_FAILED = "Forbidden: Verification failed"

_NUMERIC_CHALLENGE = re.compile(r"[0-9]+")


def coerce_challenge(challenge: str | None) -> int | str:
    """Converte challenge totalmente numérico em int.

    A Meta espera o número "cru" na resposta; strings não numéricas são
    devolvidas sem alteração.
    """
    if challenge is None:
        return ""
    if _NUMERIC_CHALLENGE.fullmatch(challenge):
        return int(challenge)
    return challenge


def verify_webhook_challenge(
    hub_mode: str | None,
    hub_verify_token: str | None,
    hub_challenge: str | None,
    expected_token: str | None,
) -> int | str:
    """Valida challenge de webhook e retorna o conteúdo a ser respondido.

    Args:
        hub_mode: Valor de hub.mode
        hub_verify_token: Valor de hub.verify_token
        hub_challenge: Valor de hub.challenge
        expected_token: Verify token configurado no servidor

    Raises:
        ConfigurationError: Se não houver verify token configurado
        AuthorizationError: Se modo != "subscribe" ou token divergente

    Returns:
        Challenge como int (se numérico) ou string original
    """
    if not expected_token:
        logger.error("webhook_verification_failed", extra={"reason": "verify_token_not_configured"})
        raise ConfigurationError(VERIFY_TOKEN_NOT_CONFIGURED)

    if hub_mode != HUB_MODE_SUBSCRIBE or hub_verify_token != expected_token:
        logger.warning(
            "webhook_verification_failed",
            extra={
                "reason": "mode_mismatch" if hub_mode != HUB_MODE_SUBSCRIBE else "token_mismatch",
                "hub_mode": hub_mode,
            },
        )
        raise AuthorizationError(VERIFICATION_FAILED)

    reply = coerce_challenge(hub_challenge)
    logger.info(
        "webhook_verified",
        extra={"channel": "whatsapp", "numeric_challenge": isinstance(reply, int)},
    )
    return reply
