"""Modelos de domínio transitórios (escopo de uma requisição)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ExtractedMessage:
    """Primeira mensagem extraída de uma entrega do webhook.

    `text` é None para tipos sem corpo de texto (imagem, áudio, etc.).
    """

    sender_number: str
    message_id: str
    text: str | None = None
    message_type: str | None = None


@dataclass(frozen=True, slots=True)
class OutboundMessageRequest:
    """Requisição de envio de texto."""

    recipient: str
    text: str


@dataclass(frozen=True, slots=True)
class ProviderResponse:
    """Resultado normalizado de uma chamada outbound."""

    ok: bool
    message_id: str | None = None
    error_message: str | None = None


@dataclass(frozen=True, slots=True)
class BestEffortResult:
    """Resultado de operação best-effort (nunca levanta exceção).

    Attributes:
        completed: True se a operação foi concluída
        skipped_reason: Motivo de não ter sido tentada (ex.: sem credenciais)
        error_type: Nome da exceção capturada, se houve falha
    """

    completed: bool
    skipped_reason: str | None = None
    error_type: str | None = None

    @classmethod
    def done(cls) -> BestEffortResult:
        return cls(completed=True)

    @classmethod
    def skipped(cls, reason: str) -> BestEffortResult:
        return cls(completed=False, skipped_reason=reason)

    @classmethod
    def failed(cls, exc: BaseException) -> BestEffortResult:
        return cls(completed=False, error_type=type(exc).__name__)
