"""Cliente HTTP especializado para a API do Notion.

Estende HttpClient genérico com comportamentos específicos do Notion:
- Headers Authorization (Bearer) e Notion-Version
- Parsing de erros do Notion (code, message, status)
- Paginação sequencial por cursor (has_more / next_cursor)
- Logging estruturado sem tokens

Sem retries: qualquer erro aborta a paginação inteira.
"""

from __future__ import annotations

import json
import logging
import time
from typing import TYPE_CHECKING, Any

from api.connectors.notion.errors import NotionApiError, parse_notion_error
from api.connectors.notion.notion_logging import log_notion_error, log_page_fetched
from app.infra.http import HttpClient, HttpClientConfig
from app.observability import record_latency
from config.settings import NOTION_API_BASE_URL, NOTION_API_VERSION, NOTION_MAX_PAGE_SIZE

if TYPE_CHECKING:
    import httpx

    from config.settings import NotionSettings

logger: logging.Logger = logging.getLogger(__name__)

_COMPONENT = "notion_http_client"


class NotionHttpClient(HttpClient):
    """Cliente HTTP para `POST /v1/databases/{id}/query`."""

    def __init__(
        self,
        api_key: str,
        config: HttpClientConfig | None = None,
        *,
        api_version: str = NOTION_API_VERSION,
        api_base_url: str = NOTION_API_BASE_URL,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Inicializa cliente Notion.

        Args:
            api_key: Token da integração (Bearer)
            config: Configuração HTTP base
            api_version: Valor do header Notion-Version
            api_base_url: URL base da API
            transport: Transport httpx alternativo (testes)

        Raises:
            ValueError: Se api_key está vazio
        """
        if not api_key or not api_key.strip():
            raise ValueError(
                "api_key é obrigatório para consultar o Notion. "
                "Verifique se NOTION_API_KEY está configurado."
            )
        super().__init__(config, transport=transport)
        self._api_key = api_key.strip()
        self._api_version = api_version
        self._api_base_url = api_base_url.rstrip("/")

    def _query_endpoint(self, database_id: str) -> str:
        return f"{self._api_base_url}/v1/databases/{database_id}/query"

    def _build_headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._api_key}",
            "Notion-Version": self._api_version,
        }

    async def query_database(
        self,
        database_id: str,
        *,
        start_cursor: str | None = None,
        page_size: int = NOTION_MAX_PAGE_SIZE,
        sorts: list[dict[str, str]] | None = None,
    ) -> dict[str, Any]:
        """Consulta uma página de resultados da database.

        Args:
            database_id: ID da database
            start_cursor: Cursor retornado pela página anterior
            page_size: Quantidade de resultados (máx. 100)
            sorts: Ordenação opcional no formato da API

        Returns:
            Response JSON (results, has_more, next_cursor)

        Raises:
            NotionApiError: Se o Notion responder com erro
            HttpError: Se houver falha de transporte
        """
        body: dict[str, Any] = {"page_size": min(max(page_size, 1), NOTION_MAX_PAGE_SIZE)}
        if start_cursor:
            body["start_cursor"] = start_cursor
        if sorts:
            body["sorts"] = sorts

        response = await self.post(
            self._query_endpoint(database_id),
            json=body,
            headers=self._build_headers(),
        )
        return self._process_response(response, database_id)

    async def query_all_pages(
        self,
        database_id: str,
        *,
        page_size: int = NOTION_MAX_PAGE_SIZE,
        sorts: list[dict[str, str]] | None = None,
    ) -> list[dict[str, Any]]:
        """Busca todas as páginas da database, em ordem, uma requisição por vez.

        Returns:
            Lista concatenada de páginas na ordem de paginação.
        """
        started_at = time.perf_counter()
        pages: list[dict[str, Any]] = []
        cursor: str | None = None
        page_number = 0

        while True:
            page_number += 1
            data = await self.query_database(
                database_id,
                start_cursor=cursor,
                page_size=page_size,
                sorts=sorts,
            )
            results = data.get("results")
            if isinstance(results, list):
                pages.extend(item for item in results if isinstance(item, dict))
            has_more = bool(data.get("has_more"))
            log_page_fetched(
                database_id,
                page_number,
                len(results) if isinstance(results, list) else 0,
                has_more,
            )
            cursor = data.get("next_cursor") or None
            if not has_more or cursor is None:
                break

        record_latency(_COMPONENT, "query_all_pages", (time.perf_counter() - started_at) * 1000)
        logger.info(
            "notion_query_completed",
            extra={
                "database_id": database_id,
                "request_count": page_number,
                "page_count": len(pages),
            },
        )
        return pages

    def _process_response(self, response: httpx.Response, database_id: str) -> dict[str, Any]:
        """Processa response do Notion, levantando NotionApiError em falha."""
        try:
            response_data = response.json()
        except (json.JSONDecodeError, ValueError):
            response_data = None

        if response.status_code >= 400:
            notion_error = parse_notion_error(response_data, response.status_code)
            log_notion_error(notion_error, database_id)
            raise notion_error

        if not isinstance(response_data, dict):
            logger.error("notion_invalid_json", extra={"database_id": database_id})
            raise NotionApiError(
                code="invalid_json",
                message="Notion API returned an invalid JSON body",
                status_code=response.status_code,
            )
        return response_data


def create_notion_http_client(
    settings: NotionSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> NotionHttpClient:
    """Factory para criar cliente Notion com config das settings.

    Args:
        settings: NotionSettings opcional. Se None, carrega do ambiente.
        transport: Transport httpx alternativo (testes)
    """
    # Import local para evitar dependência circular
    from config.settings import get_notion_settings

    notion = settings or get_notion_settings()
    return NotionHttpClient(
        notion.api_key,
        HttpClientConfig(timeout_seconds=notion.request_timeout_seconds),
        api_version=notion.api_version,
        api_base_url=notion.api_base_url,
        transport=transport,
    )
