"""Agregador de settings do wabot-relay.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    DedupeSettings,
    Environment,
    LogFormat,
    get_base_settings,
    get_dedupe_settings,
)

# Trigger de automação
from config.settings.trigger import TriggerSettings, get_trigger_settings

# Canal WhatsApp
from config.settings.whatsapp import (
    GRAPH_API_BASE_URL,
    GRAPH_API_VERSION,
    WEBHOOK_PATH,
    WhatsAppSettings,
    get_whatsapp_settings,
)

__all__ = [
    # Constants
    "GRAPH_API_BASE_URL",
    "GRAPH_API_VERSION",
    "WEBHOOK_PATH",
    # Base
    "BaseSettings",
    "DedupeSettings",
    "Environment",
    "LogFormat",
    # Trigger
    "TriggerSettings",
    # Channels
    "WhatsAppSettings",
    "get_base_settings",
    "get_dedupe_settings",
    "get_trigger_settings",
    "get_whatsapp_settings",
]
