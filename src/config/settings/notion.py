"""Settings específicas do Notion.

Configurações de acesso à API pública do Notion (database query).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Constantes da API do Notion
NOTION_API_VERSION: str = "2022-06-28"
NOTION_API_BASE_URL: str = "https://api.notion.com"
NOTION_MAX_PAGE_SIZE: int = 100
DEFAULT_SORT_PROPERTY: str = "開催日（開始）"


@dataclass(frozen=True)
class NotionSettings:
    """Configurações de acesso ao Notion.

    Attributes:
        api_key: Token da integração interna (Bearer)
        database_id: ID da database de eventos
        api_version: Valor do header Notion-Version
        api_base_url: URL base da API
        page_size: Tamanho de página na paginação por cursor (1..100)
        request_timeout_seconds: Timeout para requisições HTTP
        sort_property: Propriedade de data usada para ordenar a query.
            Vazio desativa a ordenação.
    """

    # Credenciais
    api_key: str = ""
    database_id: str = ""

    # API
    api_version: str = NOTION_API_VERSION
    api_base_url: str = NOTION_API_BASE_URL

    # Query
    page_size: int = NOTION_MAX_PAGE_SIZE
    request_timeout_seconds: float = 30.0
    sort_property: str = DEFAULT_SORT_PROPERTY

    @property
    def is_configured(self) -> bool:
        """True quando token e database estão presentes."""
        return bool(self.api_key.strip()) and bool(self.database_id.strip())

    def validate(self) -> list[str]:
        """Valida configurações mínimas do Notion.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_key.strip():
            errors.append("NOTION_API_KEY não configurado")

        if not self.database_id.strip():
            errors.append("NOTION_DATABASE_ID não configurado")

        if not 1 <= self.page_size <= NOTION_MAX_PAGE_SIZE:
            errors.append(f"NOTION_PAGE_SIZE deve estar entre 1 e {NOTION_MAX_PAGE_SIZE}")

        if self.request_timeout_seconds <= 0:
            errors.append("NOTION_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> NotionSettings:
    """Carrega NotionSettings a partir de variáveis de ambiente."""
    return NotionSettings(
        api_key=os.getenv("NOTION_API_KEY", ""),
        database_id=os.getenv("NOTION_DATABASE_ID", ""),
        api_version=os.getenv("NOTION_API_VERSION", NOTION_API_VERSION),
        api_base_url=os.getenv("NOTION_API_BASE_URL", NOTION_API_BASE_URL),
        page_size=int(os.getenv("NOTION_PAGE_SIZE", str(NOTION_MAX_PAGE_SIZE))),
        request_timeout_seconds=float(os.getenv("NOTION_REQUEST_TIMEOUT_SECONDS", "30")),
        sort_property=os.getenv("NOTION_SORT_PROPERTY", DEFAULT_SORT_PROPERTY).strip(),
    )


@lru_cache(maxsize=1)
def get_notion_settings() -> NotionSettings:
    """Retorna instância cacheada de NotionSettings."""
    return _load_from_env()
