"""Rotas HTTP da API — adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (webhook, envio, health)
- Leitura inicial de request (headers, query params, corpo bruto)
- Delegação para connectors/use_cases
- Tradução de exceções de domínio em status HTTP

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
