"""Métricas via structured logging.

Registradas como logs `metric_*` para agregação posterior (Cloud Logging,
BigQuery etc.).
"""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)


def record_latency(component: str, operation: str, latency_ms: float) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "inbound_dispatcher")
        operation: Nome da operação (ex: "handle_event")
        latency_ms: Latência em milissegundos
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
        },
    )


def record_dispatch_status(status: str) -> None:
    """Registra o resultado do despacho de uma entrega do webhook."""
    logger.info(
        "metric_dispatch_status",
        extra={"metric_type": "counter", "component": "inbound_dispatcher", "status": status},
    )


@contextmanager
def measure_latency(component: str, operation: str) -> Iterator[None]:
    """Mede o bloco e registra latência mesmo em caso de exceção."""
    started_at = time.perf_counter()
    try:
        yield
    finally:
        record_latency(component, operation, (time.perf_counter() - started_at) * 1000)
