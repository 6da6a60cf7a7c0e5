"""Rotas HTTP da API — adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (eventos, health)
- Validação inicial de request (método, query params)
- Delegação para use_cases
- Respostas HTTP apropriadas (CORS, Cache-Control, status de erro)

Estrutura:
- routes/events/: relay de eventos do Notion
- routes/health/: health check

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
