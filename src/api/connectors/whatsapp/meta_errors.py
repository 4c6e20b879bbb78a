"""Erros e helpers de parsing para API Meta/WhatsApp."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

UNKNOWN_API_ERROR = "Unknown API error"


@dataclass(frozen=True)
class WhatsAppApiError:
    """Erro retornado pela API Meta/WhatsApp."""

    error_type: str
    error_code: int
    error_message: str
    is_permanent: bool  # True se erro não é retentável
    fbtrace_id: str | None = None


def is_permanent_error(error_code: int, error_type: str) -> bool:
    """Classifica erro como permanente ou transitório.

    Permanentes: 400, 401, 403, 404, 413 e OAuthException/InvalidRequest.
    Transitórios: 429 (rate limit), 5xx e códigos Meta de throttling.
    """
    permanent_codes = {400, 401, 403, 404, 413}
    if error_code in permanent_codes:
        return True

    permanent_types = {"OAuthException", "InvalidRequest"}
    return error_type in permanent_types


def parse_meta_error(response_data: Any) -> WhatsAppApiError | None:
    """Extrai informações de erro do response da Meta.

    Formato esperado:
        {"error": {"message": "...", "type": "OAuthException", "code": 190,
                   "fbtrace_id": "..."}}

    Args:
        response_data: JSON do response (qualquer tipo)

    Returns:
        WhatsAppApiError se houver objeto `error`, None caso contrário
    """
    if not isinstance(response_data, dict):
        return None
    error_obj = response_data.get("error")
    if not error_obj or not isinstance(error_obj, dict):
        return None

    error_type = str(error_obj.get("type") or "unknown")
    raw_code = error_obj.get("code", 0)
    error_code = raw_code if isinstance(raw_code, int) else 0
    error_message = error_obj.get("message") or UNKNOWN_API_ERROR

    return WhatsAppApiError(
        error_type=error_type,
        error_code=error_code,
        error_message=str(error_message),
        is_permanent=is_permanent_error(error_code, error_type),
        fbtrace_id=error_obj.get("fbtrace_id"),
    )
