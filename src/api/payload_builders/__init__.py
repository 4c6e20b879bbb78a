"""Payload builders — construção de payloads para APIs externas.

Estrutura:
- whatsapp/: WhatsApp Cloud API (texto e read receipt)
"""

__all__: list[str] = []
