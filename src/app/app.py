"""Entrypoint da aplicação notion-events-relay.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção / serverless ASGI):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from app.bootstrap import initialize_app, validate_runtime_settings
from config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Valida configurações no startup; não há conexões persistentes."""
    logger.info("app_starting", extra={"service": "notion-events-relay"})
    validate_runtime_settings()
    yield
    logger.info("app_shutting_down", extra={"service": "notion-events-relay"})


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    CORS é aplicado pela própria rota de eventos (inclusive em 405 e erros),
    por isso não registramos CORSMiddleware.
    """
    fastapi_app = FastAPI(
        title="notion-events-relay",
        description="Relay de eventos de uma database do Notion para o front-end",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url=None,
        openapi_url="/openapi.json",
    )

    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": "notion-events-relay"})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn / runtime serverless
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting notion-events-relay in development mode")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()
