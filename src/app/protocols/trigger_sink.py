"""Contrato do sink de trigger (motor de automação externo)."""

from __future__ import annotations

from typing import Protocol


class TriggerSinkProtocol(Protocol):
    """Recebe o texto e o remetente de uma mensagem inbound.

    Falhas podem ser levantadas livremente: o dispatcher as isola.
    """

    async def trigger(self, *, message_text: str, sender_number: str) -> None: ...
