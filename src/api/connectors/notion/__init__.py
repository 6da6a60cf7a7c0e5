"""Connector Notion: query de database com paginação por cursor."""

from .errors import NotionApiError, parse_notion_error
from .http_client import NotionHttpClient, create_notion_http_client

__all__ = [
    "NotionApiError",
    "NotionHttpClient",
    "create_notion_http_client",
    "parse_notion_error",
]
