"""Observabilidade — correlation_id e métricas em logs estruturados."""

from app.observability.correlation import (
    correlation_scope,
    get_correlation_id,
    new_correlation_id,
)
from app.observability.metrics import (
    measure_latency,
    record_dispatch_status,
    record_latency,
)

__all__ = [
    "correlation_scope",
    "get_correlation_id",
    "measure_latency",
    "new_correlation_id",
    "record_dispatch_status",
    "record_latency",
]
