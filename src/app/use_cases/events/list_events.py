"""Use case de listagem de eventos a partir da database do Notion."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from app.domain.event import EventsResult
from app.observability import record_event_count
from config.logging import log_fallback
from utils.errors import UpstreamError

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.protocols import (
        NotionDatabaseClientProtocol,
        PageDescriberProtocol,
        PageNormalizerProtocol,
    )

logger = logging.getLogger(__name__)

_SORT_REJECTED_CODE = "validation_error"


def format_cached_at(moment: datetime) -> str:
    """ISO 8601 em UTC com milissegundos e sufixo Z (ex: 2026-10-19T09:00:00.000Z)."""
    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ListEventsUseCase:
    """Busca todas as páginas, normaliza, filtra e deduplica.

    Uma requisição ao Notion por vez; qualquer erro aborta a montagem
    inteira (sem resultados parciais).
    """

    def __init__(
        self,
        client: NotionDatabaseClientProtocol,
        *,
        database_id: str,
        normalize_pages: PageNormalizerProtocol,
        describe_page: PageDescriberProtocol,
        page_size: int = 100,
        sort_property: str = "",
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._client = client
        self._database_id = database_id
        self._normalize_pages = normalize_pages
        self._describe_page = describe_page
        self._page_size = page_size
        self._sort_property = sort_property
        self._clock = clock or (lambda: datetime.now(UTC))

    def _sorts(self) -> list[dict[str, str]] | None:
        if not self._sort_property:
            return None
        return [{"property": self._sort_property, "direction": "ascending"}]

    async def _fetch_pages(self) -> list[dict[str, Any]]:
        sorts = self._sorts()
        try:
            return await self._client.query_all_pages(
                self._database_id,
                page_size=self._page_size,
                sorts=sorts,
            )
        except UpstreamError as exc:
            # Ordenação é best-effort: database sem a propriedade recusa o sort
            if sorts is None or exc.code != _SORT_REJECTED_CODE:
                raise
            log_fallback(logger, "notion_sort", reason=exc.code)
            return await self._client.query_all_pages(
                self._database_id,
                page_size=self._page_size,
                sorts=None,
            )

    async def execute(self) -> EventsResult:
        """Monta a coleção de eventos.

        Raises:
            UpstreamError: Falha do Notion ou de transporte.
        """
        pages = await self._fetch_pages()
        events = self._normalize_pages(pages)
        record_event_count(len(pages), len(events))
        return EventsResult(events=events, cached_at=format_cached_at(self._clock()))

    async def describe_sample(self) -> dict[str, Any]:
        """Nomes e tipos das propriedades da primeira página (modo debug)."""
        data = await self._client.query_database(self._database_id, page_size=1)
        results = data.get("results")
        if not isinstance(results, list) or not results or not isinstance(results[0], dict):
            return {"id": None, "propertyNames": [], "propertyTypes": {}}
        return self._describe_page(results[0])
