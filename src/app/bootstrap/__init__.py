"""Bootstrap da aplicação — inicialização e wiring.

Este módulo é o composition root: configura logging e valida settings.
As factories concretas ficam em app.bootstrap.dependencies.

Uso:
    from app.bootstrap import initialize_app, validate_runtime_settings

    initialize_app()
"""

from __future__ import annotations

import logging

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_cache_settings, get_notion_settings

DEFAULT_LOG_LEVEL = "INFO"

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa logging JSON estruturado com correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level or DEFAULT_LOG_LEVEL,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> list[str]:
    """Valida settings no startup e loga problemas encontrados.

    Nunca bloqueia o boot: sem configuração do Notion a rota de eventos
    responde 500 com dica de configuração.

    Returns:
        Lista de erros encontrados (vazia = OK).
    """
    base = get_base_settings()
    errors: list[str] = []
    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"cache: {error}" for error in get_cache_settings().validate())
    errors.extend(f"notion: {error}" for error in get_notion_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return errors

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    return errors
