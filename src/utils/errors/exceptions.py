"""Exceções de domínio do relay WhatsApp.

Taxonomia:
- ConfigurationError: segredo/configuração ausente (operador corrige)
- AuthorizationError: handshake de webhook rejeitado
- CredentialError: envio sem credenciais completas
- TransportError: falha de rede até a Graph API (sem retry interno)
- ProviderError: Graph API respondeu erro
"""

from __future__ import annotations


class RelayError(Exception):
    """Base para todas as falhas do relay."""


class ConfigurationError(RelayError):
    """Configuração obrigatória ausente (ex.: verify token)."""


class AuthorizationError(RelayError):
    """Verificação de webhook recusada (modo ou token inválido)."""


class CredentialError(RelayError):
    """Access token ou phone id ausente para chamada outbound."""


class TransportError(RelayError):
    """Falha de rede (DNS, timeout, conexão resetada) ao chamar o provedor."""


class ProviderError(RelayError):
    """Resposta de erro da API Meta/WhatsApp.

    Attributes:
        status_code: Status HTTP retornado
        error_code: Código numérico Meta (error.code), quando presente
        error_type: Tipo Meta (error.type), quando presente
        is_permanent: True se o erro não deve ser retentado pelo chamador
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        error_code: int | None = None,
        error_type: str | None = None,
        is_permanent: bool = False,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.error_type = error_type
        self.is_permanent = is_permanent
