"""Connectors por canal — adapters de borda para APIs externas.

Estrutura:
- whatsapp/: WhatsApp Cloud API (webhook + Graph API)
"""

__all__: list[str] = []
