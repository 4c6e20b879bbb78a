"""Settings do trigger de automação.

Sem TRIGGER_WEBHOOK_URL o relay usa o sink de log (apenas registra o evento).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class TriggerSettings:
    """Configurações do sink de trigger.

    Attributes:
        webhook_url: URL que recebe {message_text, sender_number} via POST
        timeout_seconds: Timeout da chamada ao motor de automação
    """

    webhook_url: str = ""
    timeout_seconds: float = 10.0

    @property
    def is_http(self) -> bool:
        """True quando o trigger deve ser entregue via HTTP."""
        return bool(self.webhook_url)

    def validate(self) -> list[str]:
        """Valida configurações do trigger."""
        errors: list[str] = []
        if self.webhook_url and not self.webhook_url.startswith(("http://", "https://")):
            errors.append("TRIGGER_WEBHOOK_URL deve ser uma URL http(s)")
        if self.timeout_seconds <= 0:
            errors.append("TRIGGER_TIMEOUT_SECONDS deve ser > 0")
        return errors


def _load_trigger_from_env() -> TriggerSettings:
    """Carrega TriggerSettings de variáveis de ambiente."""
    return TriggerSettings(
        webhook_url=os.getenv("TRIGGER_WEBHOOK_URL", ""),
        timeout_seconds=float(os.getenv("TRIGGER_TIMEOUT_SECONDS", "10")),
    )


@lru_cache(maxsize=1)
def get_trigger_settings() -> TriggerSettings:
    """Retorna instância cacheada de TriggerSettings."""
    return _load_trigger_from_env()
