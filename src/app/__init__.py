"""App — orquestração, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- domain/: modelos de domínio (Event)
- use_cases/: casos de uso (listagem de eventos)
- infra/: implementações concretas de IO (HTTP)
- protocols/: contratos/interfaces
- observability/: correlation_id e métricas via logs

Padrão: app executa; api adapta; config configura; utils apoia.
"""
