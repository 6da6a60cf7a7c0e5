"""Registro de métricas via structured logging.

As métricas são registradas como logs estruturados e podem ser agregadas
posteriormente pela plataforma de logs do provedor serverless.

Uso:
    from app.observability import record_latency

    start = time.perf_counter()
    # ... operação ...
    record_latency("notion_http_client", "query_all_pages", (time.perf_counter() - start) * 1000)
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "notion_http_client")
        operation: Nome da operação (ex: "query_all_pages")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação; se None, o filter injeta o do contexto
    """
    extra: dict[str, object] = {
        "metric_type": "latency",
        "component": component,
        "operation": operation,
        "latency_ms": round(latency_ms, 2),
    }
    if correlation_id:
        extra["correlation_id"] = correlation_id
    logger.info("metric_latency", extra=extra)


def record_event_count(
    total_pages: int,
    emitted_events: int,
    correlation_id: str | None = None,
) -> None:
    """Registra quantas páginas viraram eventos após filtro e dedupe.

    Args:
        total_pages: Páginas recebidas do Notion
        emitted_events: Eventos emitidos na resposta
        correlation_id: ID de correlação opcional
    """
    extra: dict[str, object] = {
        "metric_type": "event_count",
        "component": "list_events",
        "total_pages": total_pages,
        "emitted_events": emitted_events,
        "dropped_pages": total_pages - emitted_events,
    }
    if correlation_id:
        extra["correlation_id"] = correlation_id
    logger.info("metric_event_count", extra=extra)
