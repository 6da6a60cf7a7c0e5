"""Use cases de eventos."""

from .list_events import ListEventsUseCase, format_cached_at

__all__ = [
    "ListEventsUseCase",
    "format_cached_at",
]
