"""Exceções de domínio do relay de eventos."""

from __future__ import annotations


class RelayError(RuntimeError):
    """Base para falhas que abortam a montagem da lista de eventos."""


class ConfigurationError(RelayError):
    """Configuração obrigatória ausente (token ou database do Notion)."""

    def __init__(self, missing: list[str]) -> None:
        super().__init__(f"missing_configuration: {', '.join(missing)}")
        self.missing = missing


class UpstreamError(RelayError):
    """Falha ao consultar a API externa.

    Attributes:
        code: Código de erro do provider (ex: "object_not_found")
        status_code: Status HTTP do provider, quando houve resposta
    """

    def __init__(self, message: str, *, code: str = "", status_code: int | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.status_code = status_code
