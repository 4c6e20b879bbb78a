"""API — camada de borda e adapters do canal WhatsApp.

Responsabilidades:
- Receber requests da Meta (webhook)
- Validar assinaturas e o schema do payload
- Construir payloads para a Graph API
- Traduzir respostas de erro da Graph API

Subpastas:
- connectors/: adapters HTTP por canal
- payload_builders/: construção de payloads para APIs externas
- routes/: endpoints HTTP (webhook, envio, health)

NÃO PODE conter: regras de despacho ou orquestração de use cases.
"""
