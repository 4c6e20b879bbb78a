"""Protocolo de store de deduplicação de entregas."""

from __future__ import annotations

from abc import ABC, abstractmethod


class AsyncDedupeProtocol(ABC):
    """Contrato mínimo assíncrono para stores de deduplicação.

    Métodos:
    - seen(key, ttl) -> bool: verifica e marca a chave de forma atômica.
    - is_duplicate(key, ttl) -> bool: True se a chave já foi vista.
    - mark_processed(key, ttl) -> None: marca a chave com TTL.
    """

    @abstractmethod
    async def seen(self, key: str, ttl: int = 3600) -> bool:
        """Verifica e marca a chave (wamid) atomicamente.

        Returns:
            True se já foi vista (duplicado); False se foi marcada agora.
        """

    @abstractmethod
    async def is_duplicate(self, key: str, ttl: int = 3600) -> bool:
        """Verifica se a chave (wamid) já foi processada."""

    @abstractmethod
    async def mark_processed(self, key: str, ttl: int = 3600) -> None:
        """Marca a chave (wamid) como processada por `ttl` segundos."""
