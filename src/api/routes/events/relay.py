"""Endpoint de eventos: relay da database do Notion.

Endpoints:
- GET /api/events: lista normalizada de eventos
- GET /api/events?debug=true: nomes/tipos de propriedades de uma página
- OPTIONS /api/events: preflight CORS

Qualquer outro método responde 405. Sucesso leva Cache-Control
para cache compartilhado (CDN) com stale-while-revalidate.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request, Response

from api.routes.events.responses import (
    debug_response,
    events_response,
    method_not_allowed_response,
    missing_configuration_response,
    preflight_response,
    unexpected_error_response,
    upstream_error_response,
)
from app.bootstrap.dependencies import create_list_events_use_case
from app.observability import (
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.observability.correlation import CORRELATION_ID_HEADER
from config.settings import get_cache_settings, get_notion_settings
from utils.errors import ConfigurationError, UpstreamError

logger = logging.getLogger(__name__)

router = APIRouter()

# Registramos todos os métodos para responder 405 com CORS e corpo JSON
_HANDLED_METHODS = ["GET", "OPTIONS", "HEAD", "POST", "PUT", "PATCH", "DELETE"]
_TRUTHY = frozenset({"1", "true", "yes"})


def _is_debug(request: Request) -> bool:
    return request.query_params.get("debug", "").strip().lower() in _TRUTHY


async def _handle(request: Request) -> Response:
    if request.method == "OPTIONS":
        return preflight_response()
    if request.method != "GET":
        return method_not_allowed_response()

    try:
        cache_control = get_cache_settings().cache_control
        use_case = create_list_events_use_case(get_notion_settings())
    except ConfigurationError as exc:
        logger.error(
            "events_missing_configuration",
            extra={"component": "events_route", "missing": exc.missing},
        )
        return missing_configuration_response()
    except ValueError as exc:
        # Variável numérica malformada (ex: NOTION_PAGE_SIZE=abc)
        logger.error(
            "events_invalid_configuration",
            extra={"component": "events_route", "error_type": type(exc).__name__},
        )
        return unexpected_error_response(exc)

    try:
        if _is_debug(request):
            return debug_response(await use_case.describe_sample())
        result = await use_case.execute()
    except UpstreamError as exc:
        logger.error(
            "events_upstream_error",
            extra={
                "component": "events_route",
                "error_code": exc.code,
                "status_code": exc.status_code,
            },
        )
        return upstream_error_response(exc)
    except Exception as exc:
        logger.exception("events_unexpected_error", extra={"component": "events_route"})
        return unexpected_error_response(exc)

    logger.info(
        "events_served",
        extra={"component": "events_route", "total_count": result.total_count},
    )
    return events_response(result, cache_control)


@router.api_route("/events", methods=_HANDLED_METHODS)
async def events_endpoint(request: Request) -> Response:
    """Relay de eventos do Notion (ver docstring do módulo)."""
    token = set_correlation_id(request.headers.get(CORRELATION_ID_HEADER))
    try:
        response = await _handle(request)
        response.headers[CORRELATION_ID_HEADER] = get_correlation_id()
        return response
    finally:
        reset_correlation_id(token)
