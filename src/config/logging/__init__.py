"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="wabot_relay")
    logger = get_logger(__name__)
    logger.info("webhook_verified", extra={"channel": "whatsapp"})

Sem PII: números de telefone passam por mask_phone_number e corpos de
mensagem nunca são logados.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import ContextFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
    create_text_formatter,
)
from config.logging.redaction import mask_phone_number

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "ContextFilter",
    "configure_logging",
    "create_json_formatter",
    "create_text_formatter",
    "get_logger",
    "mask_phone_number",
]
