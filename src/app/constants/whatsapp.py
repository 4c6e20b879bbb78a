"""Constantes e enums do canal WhatsApp."""

from __future__ import annotations

from enum import StrEnum

# Valor de `object` nas entregas do WhatsApp Cloud API
WHATSAPP_BUSINESS_ACCOUNT = "whatsapp_business_account"

MESSAGING_PRODUCT = "whatsapp"

HUB_MODE_SUBSCRIBE = "subscribe"


class DispatchStatus(StrEnum):
    """Corpo da resposta 200 para entregas POST do webhook."""

    IGNORED = "Ignored"
    EVENT_RECEIVED = "EVENT_RECEIVED"
    OK = "OK"


class MessageType(StrEnum):
    """Tipos de conteúdo enviados pelo relay."""

    TEXT = "text"


class RecipientType(StrEnum):
    """Tipo de destinatário aceito pela Graph API."""

    INDIVIDUAL = "individual"


class MessageStatus(StrEnum):
    """Status de mensagem atualizáveis via POST /messages."""

    READ = "read"
