"""Store de dedupe em memória.

Escopo do processo, sem persistência entre reinícios.
"""

from __future__ import annotations

import time

from app.protocols.dedupe import AsyncDedupeProtocol


class MemoryDedupeStore(AsyncDedupeProtocol):
    """Store de dedupe em memória com expiração por TTL."""

    def __init__(self, max_entries: int = 10000) -> None:
        self._store: dict[str, float] = {}  # key -> expires_at
        self._max_entries = max_entries

    def _cleanup_expired(self) -> None:
        """Remove entradas expiradas."""
        now = time.monotonic()
        expired = [k for k, v in self._store.items() if v <= now]
        for k in expired:
            del self._store[k]

    async def seen(self, key: str, ttl: int = 3600) -> bool:
        """Verifica e marca chave atomicamente (sem await intermediário)."""
        self._cleanup_expired()
        expires_at = self._store.get(key)
        if expires_at is not None and expires_at > time.monotonic():
            return True  # Duplicado
        self._remember(key, ttl)
        return False  # Novo

    async def is_duplicate(self, key: str, ttl: int = 3600) -> bool:
        """Verifica se chave já foi processada e ainda não expirou."""
        self._cleanup_expired()
        expires_at = self._store.get(key)
        return expires_at is not None and expires_at > time.monotonic()

    async def mark_processed(self, key: str, ttl: int = 3600) -> None:
        """Marca chave como processada."""
        self._remember(key, ttl)

    def _remember(self, key: str, ttl: int) -> None:
        self._store[key] = time.monotonic() + ttl
        # Limita tamanho: descarta as chaves mais antigas (ordem de inserção)
        while len(self._store) > self._max_entries:
            del self._store[next(iter(self._store))]

    def __len__(self) -> int:
        return len(self._store)
