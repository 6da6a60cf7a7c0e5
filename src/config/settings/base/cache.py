"""Settings de cache HTTP.

Controlam o header Cache-Control das respostas de sucesso
(cache compartilhado de CDN com stale-while-revalidate).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class CacheSettings:
    """Configurações de cache compartilhado.

    Attributes:
        shared_max_age_seconds: s-maxage aplicado pela CDN
        stale_while_revalidate_seconds: janela em que a CDN serve conteúdo
            expirado enquanto revalida em background
    """

    shared_max_age_seconds: int = 60
    stale_while_revalidate_seconds: int = 300

    @property
    def cache_control(self) -> str:
        """Valor do header Cache-Control para respostas de sucesso."""
        return (
            f"s-maxage={self.shared_max_age_seconds}, "
            f"stale-while-revalidate={self.stale_while_revalidate_seconds}"
        )

    def validate(self) -> list[str]:
        """Valida configurações de cache."""
        errors: list[str] = []
        if self.shared_max_age_seconds < 0:
            errors.append("CACHE_SHARED_MAX_AGE_SECONDS deve ser >= 0")
        if self.stale_while_revalidate_seconds < 0:
            errors.append("CACHE_STALE_WHILE_REVALIDATE_SECONDS deve ser >= 0")
        return errors


def _load_cache_from_env() -> CacheSettings:
    """Carrega CacheSettings de variáveis de ambiente."""
    return CacheSettings(
        shared_max_age_seconds=int(os.getenv("CACHE_SHARED_MAX_AGE_SECONDS", "60")),
        stale_while_revalidate_seconds=int(
            os.getenv("CACHE_STALE_WHILE_REVALIDATE_SECONDS", "300")
        ),
    )


@lru_cache(maxsize=1)
def get_cache_settings() -> CacheSettings:
    """Retorna instância cacheada de CacheSettings."""
    return _load_cache_from_env()
