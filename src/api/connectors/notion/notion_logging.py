"""Helpers de logging para a API do Notion (sem tokens)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .errors import NotionApiError

logger = logging.getLogger(__name__)


def log_notion_error(notion_error: NotionApiError, database_id: str) -> None:
    """Loga erro do Notion sem expor credenciais."""
    logger.warning(
        "notion_api_error",
        extra={
            "database_id": database_id,
            "error_code": notion_error.code,
            "status_code": notion_error.status_code,
        },
    )


def log_page_fetched(database_id: str, page_number: int, result_count: int, has_more: bool) -> None:
    """Loga cada página recebida na paginação por cursor."""
    logger.debug(
        "notion_page_fetched",
        extra={
            "database_id": database_id,
            "page_number": page_number,
            "result_count": result_count,
            "has_more": has_more,
        },
    )
