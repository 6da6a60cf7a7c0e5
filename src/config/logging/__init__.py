"""Configuração de logging estruturado.

Re-exporta funções e classes para configuração de logging JSON.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (bootstrap)
    configure_logging(level="INFO", service_name="notion_events_relay")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("notion_query_completed", extra={"page_count": 3})

Campos obrigatórios em todo log:
- correlation_id
- service
- level
- logger
- message
- timestamp (ISO 8601 UTC)

Tokens de integração são mascarados pelo NotionTokenRedactionFilter;
mesmo assim, não logar propriedades brutas das páginas.
"""

from config.logging.config import configure_logging, get_logger, log_fallback
from config.logging.filters import REDACTED_TOKEN, CorrelationIdFilter, NotionTokenRedactionFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    # Filters
    "CorrelationIdFilter",
    "NotionTokenRedactionFilter",
    "REDACTED_TOKEN",
    # Configuração principal
    "configure_logging",
    # Formatters
    "create_json_formatter",
    "get_logger",
    "log_fallback",
]
