"""Filters aplicados ao handler raiz.

- CorrelationIdFilter: correlation_id da requisição e nome do serviço
- NotionTokenRedactionFilter: mascara tokens de integração do Notion
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

# Tokens de integração interna: "secret_..." (legado) e "ntn_..."
_NOTION_TOKEN_RE = re.compile(r"\b(?:secret|ntn)_[A-Za-z0-9]{8,}")
REDACTED_TOKEN = "[REDACTED]"


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record.

    Um correlation_id passado via `extra` tem prioridade sobre o do contexto.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


class NotionTokenRedactionFilter(logging.Filter):
    """Substitui tokens do Notion na mensagem final por REDACTED_TOKEN.

    Mensagens de exceção do httpx podem carregar headers ou URLs; o
    record é reescrito já formatado (msg % args) para cobrir os dois.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = _NOTION_TOKEN_RE.sub(REDACTED_TOKEN, message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True
