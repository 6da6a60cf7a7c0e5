"""Resolução de propriedades por lista de nomes candidatos."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping

T = TypeVar("T")


def find_property(properties: Mapping[str, Any], name: str) -> Any:
    """Busca a propriedade pelo nome exato, depois pelo nome sem espaços nas pontas.

    Formulários às vezes gravam a chave com espaço sobrando
    (ex: "エリア "), então a comparação por strip() é o fallback.
    """
    if name in properties:
        return properties[name]
    wanted = name.strip()
    for key, value in properties.items():
        if isinstance(key, str) and key.strip() == wanted:
            return value
    return None


def _has_content(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str | list):
        return len(value) > 0
    return True


def resolve(
    properties: Mapping[str, Any],
    candidates: Iterable[str],
    accessor: Callable[[Any], T],
) -> T:
    """Retorna o primeiro resultado não vazio do acessor entre os candidatos.

    Um candidato que existe mas está vazio não interrompe a busca.
    Sem resultado, retorna o vazio natural do acessor (accessor(None)).
    """
    for name in candidates:
        value = accessor(find_property(properties, name))
        if _has_content(value):
            return value
    return accessor(None)
