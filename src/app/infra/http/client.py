"""Cliente HTTP base para conectores externos."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from utils.errors import UpstreamError

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 30.0


class HttpError(UpstreamError):
    """Erro de transporte HTTP (timeout, conexão).

    A mensagem leva o rótulo e o texto da exceção do httpx,
    ex: "http_connection_error: [Errno 111] Connection refused".
    """

    def __init__(self, label: str, detail: str = "") -> None:
        message = f"{label}: {detail}" if detail else label
        super().__init__(message, code="http_transport_error")


class HttpClient:
    """Cliente HTTP simples para chamadas externas.

    Uma tentativa por chamada: falhas de transporte viram HttpError
    e sobem para o chamador.
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport

    async def post(
        self,
        url: str,
        json: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                return await client.post(
                    url,
                    json=json,
                    headers=headers,
                    timeout=self._config.timeout_seconds,
                )
        except httpx.TimeoutException as exc:
            logger.warning("http_timeout", extra={"url": url})
            raise HttpError("http_timeout", str(exc) or type(exc).__name__) from exc
        except httpx.HTTPError as exc:
            logger.warning(
                "http_connection_error",
                extra={"url": url, "error_type": type(exc).__name__},
            )
            raise HttpError("http_connection_error", str(exc) or type(exc).__name__) from exc
