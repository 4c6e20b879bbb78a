"""Endpoints de health check (liveness e readiness)."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.bootstrap import get_credential_provider
from app.protocols.credentials import Credentials
from config.settings import (
    get_base_settings,
    get_dedupe_settings,
    get_trigger_settings,
    get_whatsapp_settings,
)

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe — verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service=get_base_settings().service_name,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check() -> JSONResponse:
    """Readiness probe: settings válidas e credenciais de envio presentes."""
    problems = _collect_problems()
    ready = not problems
    if not ready:
        logger.warning("readiness_check_failed", extra={"problems": problems})

    payload = {
        "status": "ready" if ready else "not_ready",
        "problems": problems,
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


def _collect_problems() -> list[str]:
    problems: list[str] = []
    problems.extend(f"base: {error}" for error in get_base_settings().validate())
    problems.extend(f"whatsapp: {error}" for error in get_whatsapp_settings().validate())
    problems.extend(f"dedupe: {error}" for error in get_dedupe_settings().validate())
    problems.extend(f"trigger: {error}" for error in get_trigger_settings().validate())

    credentials = Credentials.load(get_credential_provider())
    if not credentials.verify_token:
        problems.append("credentials: WHATSAPP_VERIFY_TOKEN ausente")
    if not credentials.access_token:
        problems.append("credentials: WHATSAPP_ACCESS_TOKEN ausente")
    if not credentials.phone_id:
        problems.append("credentials: WHATSAPP_PHONE_ID ausente")
    return problems
