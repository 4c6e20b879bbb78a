"""Contrato do notificador de leitura (best-effort)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import BestEffortResult


class ReadReceiptNotifierProtocol(Protocol):
    """Marca uma mensagem como lida. Nunca levanta exceção."""

    async def mark_read(self, message_id: str) -> BestEffortResult: ...
