"""Helpers de logging para API Meta/WhatsApp (sem PII)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .meta_errors import WhatsAppApiError

logger = logging.getLogger(__name__)


def log_meta_error(
    meta_error: WhatsAppApiError | None,
    operation: str,
    status_code: int,
) -> None:
    """Loga erro da Meta sem expor tokens ou números."""
    extra: dict[str, object] = {
        "operation": operation,
        "status_code": status_code,
    }
    if meta_error is not None:
        extra.update(
            {
                "error_type": meta_error.error_type,
                "error_code": meta_error.error_code,
                "is_permanent": meta_error.is_permanent,
                "fbtrace_id": meta_error.fbtrace_id,
            }
        )
    logger.warning("whatsapp_api_error", extra=extra)


def log_success(operation: str, status_code: int) -> None:
    """Loga sucesso sem expor dados sensíveis."""
    logger.debug(
        "whatsapp_api_success",
        extra={"operation": operation, "status_code": status_code},
    )
