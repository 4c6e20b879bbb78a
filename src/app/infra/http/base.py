"""Cliente HTTP base (httpx) para chamadas externas.

Sem retry/backoff: uma tentativa por chamada. Falhas de rede viram
TransportError; a política de retry é do chamador.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import httpx

from utils.errors import TransportError

if TYPE_CHECKING:
    from types import TracebackType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpClient:
    """Cliente HTTP assíncrono com um httpx.AsyncClient compartilhado.

    Args:
        config: Configuração (timeout, headers padrão, SSL)
        transport: Transport httpx opcional (ex.: httpx.MockTransport em testes)
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self._config.timeout_seconds,
                verify=self._config.verify_ssl,
                headers=self._config.default_headers,
                transport=self._transport,
            )
        return self._client

    async def post(
        self,
        url: str,
        json: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Executa POST JSON.

        Raises:
            TransportError: Timeout, DNS, conexão recusada/resetada.
        """
        try:
            return await self._get_client().post(url, json=json, headers=headers)
        except httpx.TimeoutException as exc:
            logger.warning("http_timeout", extra={"error_type": type(exc).__name__})
            raise TransportError("http_timeout") from exc
        except httpx.TransportError as exc:
            logger.warning("http_connection_error", extra={"error_type": type(exc).__name__})
            raise TransportError("http_connection_error") from exc

    async def aclose(self) -> None:
        """Fecha o AsyncClient subjacente (idempotente)."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self) -> HttpClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
