"""Mascaramento de PII para logs.

Números de telefone aparecem em payloads inbound e outbound; nos logs
registramos apenas os últimos dígitos.
"""

from __future__ import annotations

VISIBLE_DIGITS = 4


def mask_phone_number(phone: str | None) -> str:
    """Mascara número de telefone mantendo apenas os últimos dígitos.

    Exemplo:
        mask_phone_number("5511999998888") -> "*********8888"
    """
    if not phone:
        return ""
    if len(phone) <= VISIBLE_DIGITS:
        return "*" * len(phone)
    return "*" * (len(phone) - VISIBLE_DIGITS) + phone[-VISIBLE_DIGITS:]
