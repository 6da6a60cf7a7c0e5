"""Normalizers — conversão de payloads externos para modelos internos.

Estrutura:
- notion/: páginas de database do Notion -> Event
"""

from .notion import describe_properties, normalize_page, normalize_pages

__all__ = [
    "describe_properties",
    "normalize_page",
    "normalize_pages",
]
