"""Campos comuns a todo payload enviado para /{phone_id}/messages."""

from __future__ import annotations

from typing import Any

from app.constants.whatsapp import MESSAGING_PRODUCT


def build_base_payload() -> dict[str, Any]:
    """Retorna os campos obrigatórios em qualquer chamada de mensagens."""
    return {"messaging_product": MESSAGING_PRODUCT}
