"""Router principal do WhatsApp — agrega todos os endpoints do canal."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.whatsapp.messages import router as messages_router
from api.routes.whatsapp.webhook import router as webhook_router
from config.settings import WEBHOOK_PATH

router = APIRouter()

# Webhook endpoints (GET para challenge, POST para eventos)
router.include_router(webhook_router, prefix=WEBHOOK_PATH)
router.include_router(messages_router)
