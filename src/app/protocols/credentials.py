"""Contrato do provedor de credenciais e snapshot por operação.

As credenciais são lidas a cada operação (sem cache): o operador pode
trocar o token sem reiniciar o serviço.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

# Chaves aceitas pelo provedor
VERIFY_TOKEN_KEY = "verify_token"
ACCESS_TOKEN_KEY = "access_token"
PHONE_ID_KEY = "phone_id"
APP_SECRET_KEY = "app_secret"


class CredentialProviderProtocol(Protocol):
    """Leitura somente-leitura de credenciais externas.

    Retorna None (ou vazio) para chaves não configuradas.
    """

    def get(self, key: str) -> str | None: ...


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


@dataclass(frozen=True, slots=True)
class Credentials:
    """Snapshot das credenciais no momento da operação.

    Valores vazios ou só com espaços são normalizados para None.
    """

    verify_token: str | None = None
    access_token: str | None = None
    phone_id: str | None = None
    app_secret: str | None = None

    @classmethod
    def load(cls, provider: CredentialProviderProtocol) -> Credentials:
        """Lê todas as chaves do provedor."""
        return cls(
            verify_token=_clean(provider.get(VERIFY_TOKEN_KEY)),
            access_token=_clean(provider.get(ACCESS_TOKEN_KEY)),
            phone_id=_clean(provider.get(PHONE_ID_KEY)),
            app_secret=_clean(provider.get(APP_SECRET_KEY)),
        )

    @property
    def can_call_api(self) -> bool:
        """True se access token e phone id estão presentes."""
        return bool(self.access_token and self.phone_id)
