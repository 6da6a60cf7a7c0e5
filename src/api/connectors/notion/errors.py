"""Erros e helpers de parsing para a API do Notion.

Formato de erro do Notion:
    {"object": "error", "status": 404, "code": "object_not_found", "message": "..."}
"""

from __future__ import annotations

from typing import Any

from utils.errors import UpstreamError

OBJECT_NOT_FOUND = "object_not_found"
UNAUTHORIZED = "unauthorized"

# Fallback quando o corpo não traz `code`
_CODE_BY_STATUS = {
    401: UNAUTHORIZED,
    404: OBJECT_NOT_FOUND,
}


class NotionApiError(UpstreamError):
    """Erro retornado pela API do Notion."""

    def __init__(self, code: str, message: str, status_code: int | None = None) -> None:
        super().__init__(message, code=code, status_code=status_code)


def parse_notion_error(response_data: Any, status_code: int) -> NotionApiError:
    """Extrai informações de erro do response do Notion.

    Args:
        response_data: JSON decodificado do response (pode não ser dict)
        status_code: Status HTTP do response

    Returns:
        NotionApiError sempre preenchido, mesmo com corpo inválido.
    """
    body = response_data if isinstance(response_data, dict) else {}
    code = body.get("code")
    if not isinstance(code, str) or not code:
        code = _CODE_BY_STATUS.get(status_code, "http_error")
    message = body.get("message")
    if not isinstance(message, str) or not message:
        message = f"Notion API returned HTTP {status_code}"
    return NotionApiError(code=code, message=message, status_code=status_code)
