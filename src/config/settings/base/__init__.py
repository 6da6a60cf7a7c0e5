"""Agregador de settings base.

Re-exporta todas as settings base para uso externo.
"""

from __future__ import annotations

from config.settings.base.cache import (
    CacheSettings,
    get_cache_settings,
)
from config.settings.base.core import (
    BaseSettings,
    Environment,
    get_base_settings,
)

__all__ = [
    # Core
    "BaseSettings",
    # Cache
    "CacheSettings",
    # Types
    "Environment",
    "get_base_settings",
    "get_cache_settings",
]
