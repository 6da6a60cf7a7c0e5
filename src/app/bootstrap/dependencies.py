"""Factories de dependências: criação de implementações concretas.

Conecta o cliente Notion (camada api) e o normalizer ao caso de uso
de listagem, a partir das settings de ambiente.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.notion import create_notion_http_client
from api.normalizers.notion import describe_properties, normalize_pages
from app.use_cases.events import ListEventsUseCase
from config.settings import get_notion_settings
from utils.errors import ConfigurationError

if TYPE_CHECKING:
    import httpx

    from config.settings import NotionSettings

logger = logging.getLogger(__name__)


def ensure_notion_configured(settings: NotionSettings) -> None:
    """Levanta ConfigurationError se token ou database estiverem ausentes."""
    missing: list[str] = []
    if not settings.api_key.strip():
        missing.append("NOTION_API_KEY")
    if not settings.database_id.strip():
        missing.append("NOTION_DATABASE_ID")
    if missing:
        raise ConfigurationError(missing)


def create_list_events_use_case(
    settings: NotionSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ListEventsUseCase:
    """Cria ListEventsUseCase com cliente Notion configurado.

    Args:
        settings: NotionSettings opcional. Se None, carrega do ambiente.
        transport: Transport httpx alternativo (testes)

    Raises:
        ConfigurationError: Se NOTION_API_KEY ou NOTION_DATABASE_ID ausentes.
    """
    notion = settings or get_notion_settings()
    ensure_notion_configured(notion)

    return ListEventsUseCase(
        create_notion_http_client(notion, transport=transport),
        database_id=notion.database_id.strip(),
        normalize_pages=normalize_pages,
        describe_page=describe_properties,
        page_size=notion.page_size,
        sort_property=notion.sort_property,
    )
