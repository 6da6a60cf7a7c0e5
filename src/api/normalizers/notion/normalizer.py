"""Normalizer Notion: página da database para Event canônico.

Responsabilidades:
- Resolver cada campo pela lista de nomes candidatos
- Limpar emoji inicial de área e categorias
- Descartar eventos sem nome e deduplicar por nome (primeiro vence)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.normalizers.notion.candidates import (
    AREA_CANDIDATES,
    CATEGORY_CANDIDATES,
    DATE_RANGE_CANDIDATES,
    DETAIL_URL_CANDIDATES,
    END_DATE_CANDIDATES,
    IMAGE_CANDIDATES,
    NAME_CANDIDATES,
    START_DATE_CANDIDATES,
)
from api.normalizers.notion.extractor import (
    get_any_text,
    get_cover_url,
    get_date_end,
    get_date_start,
    get_files,
    get_multi_select,
    get_rich_text,
    get_select,
    get_title,
    get_url,
)
from api.normalizers.notion.resolver import resolve
from api.normalizers.notion.text import split_categories, strip_leading_emoji
from app.domain.event import Event

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

logger = logging.getLogger(__name__)


def _rich_text_url(prop: Any) -> str:
    # URL guardada como texto: devolvida como está, só com strip()
    return get_rich_text(prop).strip()


def _resolve_area(properties: Mapping[str, Any]) -> str:
    area = resolve(properties, AREA_CANDIDATES, get_select)
    if not area:
        area = resolve(properties, AREA_CANDIDATES, get_any_text)
    return strip_leading_emoji(area)


def _resolve_categories(properties: Mapping[str, Any]) -> list[str]:
    names = resolve(properties, CATEGORY_CANDIDATES, get_multi_select)
    if not names:
        single = resolve(properties, CATEGORY_CANDIDATES, get_select)
        if single:
            names = [single]
        else:
            names = split_categories(resolve(properties, CATEGORY_CANDIDATES, get_any_text))
    cleaned = (strip_leading_emoji(name) for name in names)
    return [name for name in cleaned if name]


def _resolve_end_date(properties: Mapping[str, Any]) -> str | None:
    end = resolve(properties, END_DATE_CANDIDATES, get_date_start)
    if end is None:
        end = resolve(properties, DATE_RANGE_CANDIDATES, get_date_end)
    return end


def _resolve_detail_url(properties: Mapping[str, Any]) -> str:
    url = resolve(properties, DETAIL_URL_CANDIDATES, get_url)
    if not url:
        url = resolve(properties, DETAIL_URL_CANDIDATES, _rich_text_url)
    return url


def normalize_page(page: Mapping[str, Any]) -> Event:
    """Converte uma página do Notion em Event.

    Propriedades malformadas resultam em campos vazios, nunca em erro.
    """
    properties = page.get("properties")
    if not isinstance(properties, dict):
        properties = {}

    image_url = resolve(properties, IMAGE_CANDIDATES, get_files) or get_cover_url(page)
    created_at = page.get("created_time")

    return Event(
        id=str(page.get("id") or ""),
        name=resolve(properties, NAME_CANDIDATES, get_title).strip(),
        area=_resolve_area(properties),
        start_date=resolve(properties, START_DATE_CANDIDATES, get_date_start),
        end_date=_resolve_end_date(properties),
        categories=_resolve_categories(properties),
        image_url=image_url,
        detail_url=_resolve_detail_url(properties),
        created_at=created_at if isinstance(created_at, str) else None,
    )


def normalize_pages(pages: Iterable[Any]) -> list[Event]:
    """Normaliza páginas, descarta sem nome e deduplica por nome.

    A ordem de entrada (ordem de paginação) é preservada; entre eventos
    com o mesmo nome fica o primeiro.
    """
    events: list[Event] = []
    seen_names: set[str] = set()
    unnamed = 0
    duplicated = 0

    for page in pages:
        if not isinstance(page, dict):
            logger.warning("notion_page_skipped", extra={"reason": "not_an_object"})
            continue
        event = normalize_page(page)
        if not event.name:
            unnamed += 1
            continue
        if event.name in seen_names:
            duplicated += 1
            continue
        seen_names.add(event.name)
        events.append(event)

    if unnamed or duplicated:
        logger.info(
            "notion_pages_dropped",
            extra={"unnamed": unnamed, "duplicated": duplicated},
        )
    return events


def describe_properties(page: Mapping[str, Any]) -> dict[str, Any]:
    """Resumo de nomes e tipos de propriedades de uma página (modo debug)."""
    properties = page.get("properties")
    if not isinstance(properties, dict):
        properties = {}
    property_types = {
        str(name): (value.get("type") if isinstance(value, dict) else None)
        for name, value in properties.items()
    }
    return {
        "id": page.get("id"),
        "propertyNames": list(property_types),
        "propertyTypes": property_types,
    }
