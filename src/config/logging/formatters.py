"""Formatter JSON dos logs do relay.

Uma linha JSON por record, com timestamp ISO 8601 em UTC e texto
japonês legível (sem escapes \\uXXXX) para nomes de propriedades do Notion.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos do LogRecord presentes em toda linha (timestamp é adicionado à parte)
REQUIRED_LOG_FIELDS = frozenset(
    {
        "levelname",
        "name",
        "message",
        "correlation_id",
        "service",
    }
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria o formatter usado pelo handler raiz.

    Ex: {"correlation_id": "abc-123", "level": "INFO",
    "logger": "api.connectors.notion.http_client",
    "message": "notion_query_completed", "service": "notion_events_relay",
    "timestamp": "2026-10-19T10:30:00.123000+00:00", "page_count": 42}
    """
    format_string = " ".join(f"%({field})s" for field in sorted(REQUIRED_LOG_FIELDS))
    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
        timestamp=True,
        json_ensure_ascii=False,
    )
