"""Webhook WhatsApp: verificação, assinatura e parsing seguro."""

from ..signature import SignatureResult, verify_meta_signature
from .payload import WebhookPayload, extract_first_message
from .receive import (
    InvalidJsonError,
    InvalidSignatureError,
    WebhookRequestError,
    parse_webhook_request,
)
from .verify import coerce_challenge, verify_webhook_challenge

__all__ = [
    "InvalidJsonError",
    "InvalidSignatureError",
    "SignatureResult",
    "WebhookPayload",
    "WebhookRequestError",
    "coerce_challenge",
    "extract_first_message",
    "parse_webhook_request",
    "verify_meta_signature",
    "verify_webhook_challenge",
]
