import json

import httpx
import pytest

from storefront.errors import ApiError, HttpError, NetworkError
from storefront.integrations.clients.real_http.api_client import ApiClient


def _client(handler, **kwargs):
    return ApiClient("http://backend.test", transport=httpx.MockTransport(handler), **kwargs)


@pytest.mark.asyncio
async def test_returns_parsed_json_and_sends_json_content_type():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["content_type"] = request.headers.get("content-type")
        seen["body"] = json.loads(request.content)
        return httpx.Response(201, json={"id": "product_1", "name": "Cap"})

    result = await _client(handler).post("/api/products", json={"name": "Cap"})

    assert result == {"id": "product_1", "name": "Cap"}
    assert seen["url"] == "http://backend.test/api/products"
    assert seen["content_type"] == "application/json"
    assert seen["body"] == {"name": "Cap"}


@pytest.mark.asyncio
async def test_query_params_and_bearer_token():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["params"] = dict(request.url.params)
        seen["auth"] = request.headers.get("authorization")
        return httpx.Response(200, json=[])

    await _client(handler, auth_token="tok").get("/api/orders", params={"userId": "u1"})

    assert seen["params"] == {"userId": "u1"}
    assert seen["auth"] == "Bearer tok"


@pytest.mark.asyncio
async def test_upload_leaves_content_type_to_httpx():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["content_type"] = request.headers.get("content-type", "")
        return httpx.Response(200, json={"url": "/uploads/a.png"})

    result = await _client(handler).upload("/api/upload", files={"file": ("a.png", b"\x89PNG", "image/png")})

    assert result == {"url": "/uploads/a.png"}
    assert seen["content_type"].startswith("multipart/form-data")


@pytest.mark.asyncio
async def test_http_error_uses_body_message():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"message": "Product not found"})

    with pytest.raises(HttpError) as exc_info:
        await _client(handler).get("/api/products/nope")

    assert exc_info.value.status == 404
    assert exc_info.value.message == "Product not found"
    assert exc_info.value.body == {"message": "Product not found"}


@pytest.mark.asyncio
async def test_http_error_with_non_json_body_falls_back_to_status_text():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, text="<html>bad gateway</html>")

    with pytest.raises(HttpError) as exc_info:
        await _client(handler).get("/api/products")

    assert exc_info.value.status == 502
    assert exc_info.value.message == "HTTP 502: Bad Gateway"
    assert exc_info.value.body == {}


@pytest.mark.asyncio
async def test_transport_failure_is_network_error_without_status():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(NetworkError) as exc_info:
        await _client(handler).get("/api/health")

    assert exc_info.value.status is None
    assert isinstance(exc_info.value, ApiError)


@pytest.mark.asyncio
async def test_empty_body_returns_none_and_invalid_json_raises():
    def empty(request: httpx.Request) -> httpx.Response:
        return httpx.Response(204)

    def garbage(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="not json")

    assert await _client(empty).delete("/api/products/1") is None
    with pytest.raises(ApiError):
        await _client(garbage).get("/api/products")


@pytest.mark.asyncio
async def test_shared_client_lifecycle():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request.url.path)
        return httpx.Response(200, json={"status": "ok"})

    client = _client(handler)
    async with client:
        await client.health_check()
        await client.health_check()
    await client.aclose()

    assert calls == ["/api/health", "/api/health"]
    # still usable after close: falls back to a per-call client
    assert await client.health_check() == {"status": "ok"}


def test_absolute_endpoint_is_used_as_is():
    client = ApiClient("http://backend.test/")
    assert client.build_url("/api/cart") == "http://backend.test/api/cart"
    assert client.build_url("https://pay.example.com/x") == "https://pay.example.com/x"
