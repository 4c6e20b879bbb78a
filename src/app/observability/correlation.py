"""Correlation id por entrega/requisição.

Guardado em ContextVar (async-safe) e injetado nos logs pelo ContextFilter.
Tasks criadas com asyncio.create_task herdam o valor do contexto atual,
então o read receipt em background loga com o mesmo id da entrega.
"""

from __future__ import annotations

import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual (ou string vazia)."""
    return _correlation_id.get()


def new_correlation_id() -> str:
    """Gera um novo correlation_id (UUID v4 hex)."""
    return uuid.uuid4().hex


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """Define o correlation_id durante o bloco e restaura ao sair.

    Args:
        correlation_id: ID recebido (ex.: header x-correlation-id).
            Se vazio, gera um novo.

    Yields:
        O correlation_id efetivo.
    """
    value = correlation_id or new_correlation_id()
    token = _correlation_id.set(value)
    try:
        yield value
    finally:
        _correlation_id.reset(token)
