"""Protocolos e contratos do core da aplicação."""

from .normalizer import PageDescriberProtocol, PageNormalizerProtocol
from .notion_client import NotionDatabaseClientProtocol

__all__ = [
    "NotionDatabaseClientProtocol",
    "PageDescriberProtocol",
    "PageNormalizerProtocol",
]
