"""Formatters de logging do relay.

JSON (padrão, via python-json-logger) com campos obrigatórios:
- asctime, level, logger, message
- correlation_id, service

Texto (LOG_FORMAT=text) para leitura humana em execução local.
"""

from __future__ import annotations

import logging

from pythonjsonlogger.json import JsonFormatter

# Campos obrigatórios em todo log estruturado
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

# Mapeamento de nomes de campos para formato padrão
FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}

TEXT_FORMAT = "%(asctime)s %(levelname)-8s [%(service)s %(correlation_id)s] %(name)s: %(message)s"


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Campos passados via `extra` são serializados no mesmo objeto.

    Exemplo de output:
        {"asctime": "...", "level": "INFO", "logger": "api.routes.whatsapp.webhook",
         "message": "webhook_verified", "correlation_id": "abc", "service": "wabot_relay"}
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)


def create_text_formatter() -> logging.Formatter:
    """Cria formatter de texto simples para desenvolvimento."""
    return logging.Formatter(TEXT_FORMAT)
