"""Normalizer Notion: extração e normalização de páginas de eventos.

Responsabilidades:
- Acessar propriedades tipadas do Notion de forma tolerante (extractor)
- Resolver campos por nomes candidatos multilíngues (resolver)
- Produzir o Event canônico, filtrado e deduplicado (normalizer)
"""

from .normalizer import describe_properties, normalize_page, normalize_pages

__all__ = [
    "describe_properties",
    "normalize_page",
    "normalize_pages",
]
