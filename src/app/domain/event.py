"""Modelos de domínio para eventos publicados pelo relay.

O contrato fica no domínio para que a rota HTTP e o caso de uso
compartilhem o mesmo formato, independente do provider (Notion).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Event(BaseModel):
    """Evento canônico consumido pelo front-end (calendário/lista)."""

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    id: str = Field(..., description="ID da página de origem.")
    name: str = Field(default="", description="Nome do evento (vazio = descartado).")
    area: str = Field(default="", description="Área/região, sem emoji inicial.")
    start_date: str | None = Field(default=None, description="Data de início (ISO 8601).")
    end_date: str | None = Field(default=None, description="Data de término (ISO 8601).")
    categories: list[str] = Field(
        default_factory=list,
        description="Gêneros/categorias, sem emoji inicial.",
    )
    image_url: str = Field(default="", description="URL da imagem ou da capa da página.")
    detail_url: str = Field(default="", description="URL de detalhes do evento.")
    created_at: str | None = Field(default=None, description="created_time da página.")

    def to_payload(self) -> dict[str, Any]:
        """Serializa com chaves camelCase para o response HTTP."""
        return self.model_dump(by_alias=True)


class EventsResult(BaseModel):
    """Resultado da montagem da coleção de eventos."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    events: list[Event] = Field(default_factory=list)
    cached_at: str = Field(..., description="Instante da montagem (ISO 8601 UTC).")

    @property
    def total_count(self) -> int:
        return len(self.events)

    def to_payload(self) -> dict[str, Any]:
        return {
            "events": [event.to_payload() for event in self.events],
            "totalCount": self.total_count,
            "cachedAt": self.cached_at,
        }
