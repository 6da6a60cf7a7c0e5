"""Contrato do cliente de database do Notion.

Mantemos apenas o protocolo aqui para que o caso de uso não dependa
da camada api (httpx, headers, formato de erro).
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class NotionDatabaseClientProtocol(Protocol):
    """Contrato mínimo para consultar uma database do Notion."""

    async def query_database(
        self,
        database_id: str,
        *,
        start_cursor: str | None = None,
        page_size: int = 100,
        sorts: list[dict[str, str]] | None = None,
    ) -> dict[str, Any]:
        """Retorna uma página de resultados (results, has_more, next_cursor)."""
        ...

    async def query_all_pages(
        self,
        database_id: str,
        *,
        page_size: int = 100,
        sorts: list[dict[str, str]] | None = None,
    ) -> list[dict[str, Any]]:
        """Retorna todas as páginas da database na ordem de paginação."""
        ...
