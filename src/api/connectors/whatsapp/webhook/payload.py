"""Schema do payload de mensagens do WhatsApp Cloud API.

Referência:
https://developers.facebook.com/docs/whatsapp/cloud-api/webhooks/reference/messages

Todos os níveis são opcionais: ausência em qualquer profundidade significa
"nada a processar". Campos extras são ignorados para tolerar mudanças da API.
Somente o caminho entry[0].changes[0].value.messages[0] é validado; irmãos
malformados não invalidam a primeira mensagem.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from app.protocols.models import ExtractedMessage


class _WebhookModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, coerce_numbers_to_str=True)


class TextBody(_WebhookModel):
    body: str | None = None


class InboundMessage(_WebhookModel):
    """Mensagem recebida. `from` e `id` são obrigatórios."""

    from_: str = Field(alias="from", min_length=1)
    id: str = Field(min_length=1)
    type: str | None = None
    text: TextBody | None = None


class ChangeValue(_WebhookModel):
    messaging_product: str | None = None
    messages: list[Any] = Field(default_factory=list)


class Change(_WebhookModel):
    field: str | None = None
    value: ChangeValue | None = None


class Entry(_WebhookModel):
    id: str | None = None
    changes: list[Any] = Field(default_factory=list)


class WebhookPayload(_WebhookModel):
    """Envelope raiz: {object, entry: [Entry]}."""

    object: str | None = None
    entry: list[Any] = Field(default_factory=list)

    def first_message(self) -> InboundMessage | None:
        """Retorna entry[0].changes[0].value.messages[0], se existir e for válida."""
        try:
            if not self.entry:
                return None
            entry = Entry.model_validate(self.entry[0])
            if not entry.changes:
                return None
            value = Change.model_validate(entry.changes[0]).value
            if value is None or not value.messages:
                return None
            return InboundMessage.model_validate(value.messages[0])
        except ValidationError:
            return None


def extract_first_message(payload: dict[str, Any]) -> ExtractedMessage | None:
    """Extrai a primeira mensagem; None se ausente ou malformada no caminho.

    Tipos errados ou `from`/`id` ausentes em entry[0]...messages[0] também
    resultam em None.
    """
    try:
        parsed = WebhookPayload.model_validate(payload)
    except ValidationError:
        return None

    message = parsed.first_message()
    if message is None:
        return None

    return ExtractedMessage(
        sender_number=message.from_,
        message_id=message.id,
        text=message.text.body if message.text else None,
        message_type=message.type,
    )
