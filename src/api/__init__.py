"""API — camada de borda e adapters.

Responsabilidades:
- Receber requests HTTP do front-end
- Consultar a API do Notion
- Normalizar páginas do Notion para o modelo interno Event

Subpastas:
- connectors/: adapters HTTP para APIs externas (Notion)
- normalizers/: conversão de payloads externos → modelos internos
- routes/: endpoints HTTP (eventos, health)

NÃO PODE conter: orquestração de use cases.
"""
