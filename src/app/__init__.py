"""App — orquestração, casos de uso e infraestrutura do relay.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: despacho inbound, envio outbound e read receipt
- infra/: implementações concretas de IO (HTTP, credenciais, dedupe, triggers)
- protocols/: contratos/interfaces
- observability/: correlation_id e métricas em logs estruturados
- constants/: constantes da aplicação

Padrão: app executa; api adapta; config configura; utils apoia.
"""
