"""Configuração do logging JSON do relay.

O handler raiz recebe o formatter JSON e os filters de contexto e de
mascaramento de token. Loggers de bibliotecas HTTP ficam em WARNING:
cada requisição ao Notion já gera `notion_page_fetched`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter, NotionTokenRedactionFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "notion_events_relay"

# httpx loga "HTTP Request: POST ..." em INFO para cada página da query
QUIET_LIBRARY_LOGGERS = ("httpx", "httpcore")


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Instala o handler JSON no root logger, substituindo os existentes.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))
    handler.addFilter(NotionTokenRedactionFilter())

    root = logging.getLogger()
    root.setLevel(level_upper)
    root.handlers = [handler]

    if level_upper != "DEBUG":
        for name in QUIET_LIBRARY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_fallback(
    logger: logging.Logger,
    component: str,
    reason: str | None = None,
    elapsed_ms: float | None = None,
) -> None:
    """Registra um caminho alternativo (ex: ordenação recusada pelo Notion).

    Args:
        logger: Logger do módulo que aplicou o fallback.
        component: Ex: "notion_sort".
        reason: Código que disparou o fallback (ex: "validation_error").
        elapsed_ms: Tempo gasto no caminho original, quando medido.
    """
    extra: dict[str, object] = {
        "fallback_used": True,
        "component": component,
    }
    if reason:
        extra["reason"] = reason
    if elapsed_ms is not None:
        extra["elapsed_ms"] = elapsed_ms

    logger.info("Fallback applied for %s", component, extra=extra)
