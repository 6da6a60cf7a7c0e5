"""Builders de response HTTP do endpoint de eventos.

Todo response (sucesso, erro, preflight) leva os headers CORS.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import Response
from fastapi.responses import JSONResponse

from api.connectors.notion.errors import OBJECT_NOT_FOUND, UNAUTHORIZED

if TYPE_CHECKING:
    from app.domain.event import EventsResult
    from utils.errors import UpstreamError

CORS_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

MISSING_CONFIG_HINT = "Set NOTION_API_KEY and NOTION_DATABASE_ID in the deployment environment"
NOT_FOUND_HINT = (
    "Check NOTION_DATABASE_ID and ensure the Integration has access to the database"
)
UNAUTHORIZED_HINT = "Check NOTION_API_KEY is correct"


def json_response(
    payload: dict[str, Any],
    status_code: int = 200,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    return JSONResponse(
        content=payload,
        status_code=status_code,
        headers={**CORS_HEADERS, **(headers or {})},
    )


def preflight_response() -> Response:
    return Response(status_code=200, headers=dict(CORS_HEADERS))


def method_not_allowed_response() -> JSONResponse:
    return json_response({"error": "Method not allowed"}, status_code=405)


def missing_configuration_response() -> JSONResponse:
    return json_response(
        {"error": "Missing environment variables", "hint": MISSING_CONFIG_HINT},
        status_code=500,
    )


def upstream_error_response(exc: UpstreamError) -> JSONResponse:
    """Mapeia erro do Notion para status HTTP (404, 401 ou 500)."""
    if exc.code == OBJECT_NOT_FOUND:
        return json_response(
            {"error": "Database not found", "hint": NOT_FOUND_HINT},
            status_code=404,
        )
    if exc.code == UNAUTHORIZED:
        return json_response(
            {"error": "Unauthorized", "hint": UNAUTHORIZED_HINT},
            status_code=401,
        )
    return unexpected_error_response(exc)


def unexpected_error_response(exc: Exception) -> JSONResponse:
    return json_response(
        {"error": "Failed to fetch events", "message": str(exc)},
        status_code=500,
    )


def events_response(result: EventsResult, cache_control: str) -> JSONResponse:
    return json_response(result.to_payload(), headers={"Cache-Control": cache_control})


def debug_response(sample: dict[str, Any]) -> JSONResponse:
    return json_response({"debug": True, "sample": sample})
