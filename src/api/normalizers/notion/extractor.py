"""Acessores de propriedades do Notion.

Cada acessor recebe o valor bruto de uma propriedade (ou None) e
confere o `type`. Valor ausente, tipo divergente ou corpo malformado
retornam o vazio natural do tipo ("" / [] / None); nunca levantam.
"""

from __future__ import annotations

from typing import Any


def _typed_body(prop: Any, kind: str) -> Any:
    """Retorna o corpo do tipo `kind` ou None se o tipo não bate."""
    if not isinstance(prop, dict) or prop.get("type") != kind:
        return None
    return prop.get(kind)


def _join_fragments(fragments: Any) -> str:
    if not isinstance(fragments, list):
        return ""
    parts: list[str] = []
    for fragment in fragments:
        if not isinstance(fragment, dict):
            continue
        text = fragment.get("plain_text")
        if not isinstance(text, str):
            content = fragment.get("text")
            text = content.get("content") if isinstance(content, dict) else None
        if isinstance(text, str):
            parts.append(text)
    return "".join(parts)


def _file_url(file_obj: Any) -> str:
    """URL de um file object: hospedado no Notion ou externo."""
    if not isinstance(file_obj, dict):
        return ""
    kind = file_obj.get("type")
    if kind not in ("file", "external"):
        return ""
    body = file_obj.get(kind)
    url = body.get("url") if isinstance(body, dict) else None
    return url if isinstance(url, str) else ""


def get_title(prop: Any) -> str:
    return _join_fragments(_typed_body(prop, "title"))


def get_rich_text(prop: Any) -> str:
    return _join_fragments(_typed_body(prop, "rich_text"))


def get_select(prop: Any) -> str:
    body = _typed_body(prop, "select")
    name = body.get("name") if isinstance(body, dict) else None
    return name if isinstance(name, str) else ""


def get_multi_select(prop: Any) -> list[str]:
    body = _typed_body(prop, "multi_select")
    if not isinstance(body, list):
        return []
    return [
        option["name"]
        for option in body
        if isinstance(option, dict) and isinstance(option.get("name"), str)
    ]


def get_date_start(prop: Any) -> str | None:
    body = _typed_body(prop, "date")
    start = body.get("start") if isinstance(body, dict) else None
    return start if isinstance(start, str) and start else None


def get_date_end(prop: Any) -> str | None:
    body = _typed_body(prop, "date")
    end = body.get("end") if isinstance(body, dict) else None
    return end if isinstance(end, str) and end else None


def get_url(prop: Any) -> str:
    url = _typed_body(prop, "url")
    return url if isinstance(url, str) else ""


def get_files(prop: Any) -> str:
    """URL do primeiro arquivo da propriedade."""
    body = _typed_body(prop, "files")
    if not isinstance(body, list) or not body:
        return ""
    return _file_url(body[0])


def get_number(prop: Any) -> int | float | None:
    number = _typed_body(prop, "number")
    if isinstance(number, bool) or not isinstance(number, int | float):
        return None
    return number


def _format_number(number: int | float) -> str:
    if isinstance(number, float) and number.is_integer():
        return str(int(number))
    return str(number)


def get_any_text(prop: Any) -> str:
    """Texto da propriedade qualquer que seja o tipo.

    Usado como fallback quando a database foi criada com tipos
    diferentes do esperado (ex: Área como texto em vez de select).
    """
    if not isinstance(prop, dict):
        return ""
    kind = prop.get("type")
    if kind == "title":
        return get_title(prop)
    if kind == "rich_text":
        return get_rich_text(prop)
    if kind == "select":
        return get_select(prop)
    if kind == "multi_select":
        return ", ".join(get_multi_select(prop))
    if kind == "url":
        return get_url(prop)
    if kind == "number":
        number = get_number(prop)
        return _format_number(number) if number is not None else ""
    if kind == "date":
        return get_date_start(prop) or ""
    if kind in ("email", "phone_number"):
        value = prop.get(kind)
        return value if isinstance(value, str) else ""
    if kind == "formula":
        formula = prop.get("formula")
        if isinstance(formula, dict):
            value = formula.get(formula.get("type"))
            if isinstance(value, str):
                return value
            if isinstance(value, int | float) and not isinstance(value, bool):
                return _format_number(value)
    return ""


def get_cover_url(page: Any) -> str:
    """URL da capa da página (arquivo hospedado ou externo)."""
    if not isinstance(page, dict):
        return ""
    return _file_url(page.get("cover"))
