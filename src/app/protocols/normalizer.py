"""Protocolos de normalização de páginas em eventos."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from app.domain.event import Event


class PageNormalizerProtocol(Protocol):
    """Contrato para converter páginas brutas em eventos filtrados e deduplicados."""

    def __call__(self, pages: Iterable[Any]) -> list[Event]: ...


class PageDescriberProtocol(Protocol):
    """Contrato para resumir nomes/tipos de propriedades de uma página (debug)."""

    def __call__(self, page: Mapping[str, Any]) -> dict[str, Any]: ...
