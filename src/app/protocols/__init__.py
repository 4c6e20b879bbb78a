"""Protocolos e contratos do core da aplicação."""

from .credentials import (
    ACCESS_TOKEN_KEY,
    APP_SECRET_KEY,
    PHONE_ID_KEY,
    VERIFY_TOKEN_KEY,
    CredentialProviderProtocol,
    Credentials,
)
from .dedupe import AsyncDedupeProtocol
from .http_client import WhatsAppHttpClientProtocol
from .models import (
    BestEffortResult,
    ExtractedMessage,
    OutboundMessageRequest,
    ProviderResponse,
)
from .payload_builder import ReadReceiptPayloadBuilderProtocol, TextPayloadBuilderProtocol
from .read_receipt import ReadReceiptNotifierProtocol
from .trigger_sink import TriggerSinkProtocol

__all__ = [
    "ACCESS_TOKEN_KEY",
    "APP_SECRET_KEY",
    "PHONE_ID_KEY",
    "VERIFY_TOKEN_KEY",
    "AsyncDedupeProtocol",
    "BestEffortResult",
    "CredentialProviderProtocol",
    "Credentials",
    "ExtractedMessage",
    "OutboundMessageRequest",
    "ProviderResponse",
    "ReadReceiptNotifierProtocol",
    "ReadReceiptPayloadBuilderProtocol",
    "TextPayloadBuilderProtocol",
    "TriggerSinkProtocol",
    "WhatsAppHttpClientProtocol",
]
