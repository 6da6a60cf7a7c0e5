"""Connectors — adapters de borda para APIs externas.

Estrutura:
- notion/: Notion API (query de database com paginação por cursor)
"""

__all__: list[str] = []
