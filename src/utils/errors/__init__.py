"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ConfigurationError,
    RelayError,
    UpstreamError,
)

__all__ = [
    "ConfigurationError",
    "RelayError",
    "UpstreamError",
]
