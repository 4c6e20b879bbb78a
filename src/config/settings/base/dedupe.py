"""Settings de dedupe de entregas do webhook.

A Meta entrega eventos at-least-once; o dedupe em memória evita disparar
o trigger duas vezes para o mesmo wamid dentro do TTL.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class DedupeSettings:
    """Configurações de dedupe.

    Attributes:
        enabled: Liga o dedupe por message_id (desligado por padrão)
        ttl_seconds: Janela em que um wamid repetido é considerado duplicado
    """

    enabled: bool = False
    ttl_seconds: int = 3600

    def validate(self) -> list[str]:
        """Valida configurações de dedupe.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []
        if self.enabled and self.ttl_seconds <= 0:
            errors.append("DEDUPE_TTL_SECONDS deve ser > 0")
        return errors


def _load_dedupe_from_env() -> DedupeSettings:
    """Carrega DedupeSettings de variáveis de ambiente."""
    return DedupeSettings(
        enabled=os.getenv("DEDUPE_ENABLED", "").lower() in ("true", "1", "yes"),
        ttl_seconds=int(os.getenv("DEDUPE_TTL_SECONDS", "3600")),
    )


@lru_cache(maxsize=1)
def get_dedupe_settings() -> DedupeSettings:
    """Retorna instância cacheada de DedupeSettings."""
    return _load_dedupe_from_env()
