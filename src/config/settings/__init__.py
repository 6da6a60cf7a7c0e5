"""Agregador de settings do relay de eventos.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    CacheSettings,
    Environment,
    get_base_settings,
    get_cache_settings,
)

# Notion settings
from config.settings.notion import (
    NOTION_API_BASE_URL,
    NOTION_API_VERSION,
    NOTION_MAX_PAGE_SIZE,
    NotionSettings,
    get_notion_settings,
)

__all__ = [
    # Constants
    "NOTION_API_BASE_URL",
    "NOTION_API_VERSION",
    "NOTION_MAX_PAGE_SIZE",
    # Base
    "BaseSettings",
    "CacheSettings",
    "Environment",
    # Notion
    "NotionSettings",
    "get_base_settings",
    "get_cache_settings",
    "get_notion_settings",
]
