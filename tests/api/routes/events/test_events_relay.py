"""Testes do endpoint /api/events."""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest
from starlette.requests import Request

from api.routes.events import relay
from app.bootstrap.dependencies import create_list_events_use_case
from config.settings import CacheSettings, NotionSettings, get_cache_settings, get_notion_settings

_CONFIGURED = NotionSettings(api_key="secret_token", database_id="db-1")


def _build_request(
    *,
    method: str = "GET",
    query_string: str = "",
    headers: dict[str, str] | None = None,
) -> Request:
    header_items = headers or {}
    raw_headers = [(k.lower().encode("utf-8"), v.encode("utf-8")) for k, v in header_items.items()]
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": method,
        "path": "/api/events",
        "raw_path": b"/api/events",
        "query_string": query_string.encode("utf-8"),
        "headers": raw_headers,
    }

    async def _receive() -> dict[str, object]:
        return {"type": "http.request", "body": b"", "more_body": False}

    return Request(scope, _receive)


def _page(page_id: str, name: str) -> dict[str, Any]:
    return {
        "object": "page",
        "id": page_id,
        "created_time": "2026-07-01T00:00:00.000Z",
        "properties": {
            "イベント名": {"type": "title", "title": [{"plain_text": name}]},
            "ジャンル": {"type": "multi_select", "multi_select": [{"name": "🎵 音楽"}]},
        },
    }


def _install_notion(
    monkeypatch: pytest.MonkeyPatch,
    handler,
    settings: NotionSettings = _CONFIGURED,
) -> None:
    transport = httpx.MockTransport(handler)
    monkeypatch.setattr(relay, "get_notion_settings", lambda: settings)
    monkeypatch.setattr(
        relay,
        "create_list_events_use_case",
        lambda notion: create_list_events_use_case(notion, transport=transport),
    )
    monkeypatch.setattr(relay, "get_cache_settings", lambda: CacheSettings())


def _unreachable(request: httpx.Request) -> httpx.Response:
    raise AssertionError(f"unexpected upstream call: {request.url}")


def _payload(response) -> dict[str, Any]:
    return json.loads(response.body.decode("utf-8"))


def _assert_cors(response) -> None:
    assert response.headers["access-control-allow-origin"] == "*"
    assert response.headers["access-control-allow-methods"] == "GET, OPTIONS"
    assert response.headers["access-control-allow-headers"] == "Content-Type"


@pytest.mark.asyncio
async def test_preflight_returns_cors_headers(monkeypatch: pytest.MonkeyPatch) -> None:
    _install_notion(monkeypatch, _unreachable)

    response = await relay.events_endpoint(_build_request(method="OPTIONS"))

    assert response.status_code == 200
    assert response.body == b""
    _assert_cors(response)


@pytest.mark.asyncio
@pytest.mark.parametrize("method", ["POST", "PUT", "DELETE"])
async def test_other_methods_are_rejected(monkeypatch: pytest.MonkeyPatch, method: str) -> None:
    _install_notion(monkeypatch, _unreachable)

    response = await relay.events_endpoint(_build_request(method=method))

    assert response.status_code == 405
    assert _payload(response) == {"error": "Method not allowed"}
    _assert_cors(response)


@pytest.mark.asyncio
async def test_missing_configuration_never_calls_notion(monkeypatch: pytest.MonkeyPatch) -> None:
    _install_notion(monkeypatch, _unreachable, settings=NotionSettings(api_key="", database_id=""))

    response = await relay.events_endpoint(_build_request())

    assert response.status_code == 500
    payload = _payload(response)
    assert payload["error"] == "Missing environment variables"
    assert "NOTION_API_KEY" in payload["hint"]
    _assert_cors(response)


@pytest.mark.asyncio
async def test_success_returns_events_with_cache_headers(monkeypatch: pytest.MonkeyPatch) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json={
                "results": [_page("a", "夏祭り"), _page("b", "夏祭り"), _page("c", "")],
                "has_more": False,
            },
        )

    _install_notion(monkeypatch, handler)

    response = await relay.events_endpoint(_build_request())
    payload = _payload(response)

    assert response.status_code == 200
    assert response.headers["cache-control"] == "s-maxage=60, stale-while-revalidate=300"
    _assert_cors(response)
    assert payload["totalCount"] == 1
    assert payload["events"][0]["id"] == "a"
    assert payload["events"][0]["categories"] == ["音楽"]
    assert payload["cachedAt"].endswith("Z")


@pytest.mark.asyncio
async def test_empty_database(monkeypatch: pytest.MonkeyPatch) -> None:
    _install_notion(
        monkeypatch,
        lambda request: httpx.Response(200, json={"results": [], "has_more": False}),
    )

    payload = _payload(await relay.events_endpoint(_build_request()))

    assert payload["events"] == []
    assert payload["totalCount"] == 0


@pytest.mark.asyncio
async def test_database_not_found(monkeypatch: pytest.MonkeyPatch) -> None:
    _install_notion(
        monkeypatch,
        lambda request: httpx.Response(
            404, json={"object": "error", "code": "object_not_found", "message": "missing"}
        ),
    )

    response = await relay.events_endpoint(_build_request())
    payload = _payload(response)

    assert response.status_code == 404
    assert payload["error"] == "Database not found"
    assert "NOTION_DATABASE_ID" in payload["hint"]
    assert "cache-control" not in response.headers
    _assert_cors(response)


@pytest.mark.asyncio
async def test_unauthorized(monkeypatch: pytest.MonkeyPatch) -> None:
    _install_notion(
        monkeypatch,
        lambda request: httpx.Response(
            401, json={"object": "error", "code": "unauthorized", "message": "invalid token"}
        ),
    )

    response = await relay.events_endpoint(_build_request())

    assert response.status_code == 401
    assert _payload(response) == {
        "error": "Unauthorized",
        "hint": "Check NOTION_API_KEY is correct",
    }


@pytest.mark.asyncio
async def test_other_upstream_error_is_500(monkeypatch: pytest.MonkeyPatch) -> None:
    _install_notion(
        monkeypatch,
        lambda request: httpx.Response(
            503, json={"object": "error", "code": "service_unavailable", "message": "down"}
        ),
    )

    response = await relay.events_endpoint(_build_request())

    assert response.status_code == 500
    assert _payload(response) == {"error": "Failed to fetch events", "message": "down"}


@pytest.mark.asyncio
async def test_transport_failure_is_500(monkeypatch: pytest.MonkeyPatch) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    _install_notion(monkeypatch, handler)

    response = await relay.events_endpoint(_build_request())

    assert response.status_code == 500
    assert _payload(response) == {
        "error": "Failed to fetch events",
        "message": "http_connection_error: refused",
    }
    _assert_cors(response)


@pytest.mark.asyncio
async def test_unexpected_exception_is_500(monkeypatch: pytest.MonkeyPatch) -> None:
    class _Exploding:
        async def execute(self) -> None:
            raise KeyError("boom")

    monkeypatch.setattr(relay, "get_notion_settings", lambda: _CONFIGURED)
    monkeypatch.setattr(relay, "create_list_events_use_case", lambda notion: _Exploding())

    response = await relay.events_endpoint(_build_request())

    assert response.status_code == 500
    assert _payload(response)["error"] == "Failed to fetch events"


@pytest.mark.asyncio
async def test_debug_returns_property_sample(monkeypatch: pytest.MonkeyPatch) -> None:
    bodies: list[dict[str, Any]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        bodies.append(json.loads(request.content))
        return httpx.Response(200, json={"results": [_page("a", "x")], "has_more": True})

    _install_notion(monkeypatch, handler)

    response = await relay.events_endpoint(_build_request(query_string="debug=true"))
    payload = _payload(response)

    assert response.status_code == 200
    assert bodies == [{"page_size": 1}]
    assert payload == {
        "debug": True,
        "sample": {
            "id": "a",
            "propertyNames": ["イベント名", "ジャンル"],
            "propertyTypes": {"イベント名": "title", "ジャンル": "multi_select"},
        },
    }


@pytest.mark.asyncio
async def test_correlation_id_is_echoed(monkeypatch: pytest.MonkeyPatch) -> None:
    _install_notion(monkeypatch, _unreachable)

    response = await relay.events_endpoint(
        _build_request(method="OPTIONS", headers={"x-correlation-id": "req-42"})
    )

    assert response.headers["x-correlation-id"] == "req-42"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("variable", "value"),
    [
        ("NOTION_PAGE_SIZE", "abc"),
        ("NOTION_REQUEST_TIMEOUT_SECONDS", "slow"),
        ("CACHE_SHARED_MAX_AGE_SECONDS", "1m"),
    ],
)
async def test_malformed_numeric_setting_is_json_500(
    monkeypatch: pytest.MonkeyPatch,
    variable: str,
    value: str,
) -> None:
    monkeypatch.setenv("NOTION_API_KEY", "secret_token")
    monkeypatch.setenv("NOTION_DATABASE_ID", "db-1")
    monkeypatch.setenv(variable, value)
    get_notion_settings.cache_clear()
    get_cache_settings.cache_clear()
    monkeypatch.setattr(
        relay,
        "create_list_events_use_case",
        lambda notion: create_list_events_use_case(
            notion, transport=httpx.MockTransport(_unreachable)
        ),
    )

    try:
        response = await relay.events_endpoint(_build_request())
    finally:
        get_notion_settings.cache_clear()
        get_cache_settings.cache_clear()

    assert response.status_code == 500
    assert _payload(response)["error"] == "Failed to fetch events"
    _assert_cors(response)
