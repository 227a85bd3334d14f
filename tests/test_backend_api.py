"""Development backend routes, exercised directly with TestClient."""

import httpx
import pytest
from fastapi.testclient import TestClient

from storefront.api.main import create_app
from storefront.bootstrap import build_services
from storefront.config import StorefrontConfig


def test_health_and_product_routes(backend):
    client = TestClient(backend)

    assert client.get("/api/health").json()["status"] == "healthy"

    response = client.get("/api/products", params={"category": "Clothing"})
    assert [p["id"] for p in response.json()] == ["1", "2"]

    in_stock_under_50 = client.get("/api/products", params={"inStock": "true", "maxPrice": "35"})
    assert [p["id"] for p in in_stock_under_50.json()] == ["1"]

    missing = client.get("/api/products/404")
    assert missing.status_code == 404
    assert missing.json() == {"detail": "Product not found"}

    created = client.post("/api/products", json={"name": "Cap", "price": 15})
    assert created.status_code == 201
    assert client.delete(f"/api/products/{created.json()['id']}").json()["success"] is True


def test_order_routes_validate_status(backend):
    client = TestClient(backend)

    bad = client.patch("/api/orders/1/status", json={"status": "teleported"})
    assert bad.status_code == 422

    updated = client.put("/api/orders/1", json={"shippingMethod": "Express", "orderNumber": "X"})
    assert updated.json()["shippingMethod"] == "Express"
    assert updated.json()["orderNumber"] == "PM-00000001"


def test_email_route_rejects_unknown_types(backend):
    response = TestClient(backend).post("/api/email", json={"type": "spam", "to": "a@example.com"})

    assert response.status_code == 400
    assert backend.state.sent_emails == []


def test_token_protection():
    client = TestClient(create_app(api_token="secret"))

    assert client.get("/api/health").status_code == 200
    assert client.get("/api/products").status_code == 401
    assert client.get("/api/products", headers={"Authorization": "Bearer secret"}).status_code == 200


@pytest.mark.asyncio
async def test_services_with_wrong_token_fall_back_locally(clock):
    app = create_app(api_token="secret")
    config = StorefrontConfig(api_base_url="http://testserver", api_token="wrong")
    services = build_services(config, transport=httpx.ASGITransport(app=app), clock=clock)

    created = await services.products.create_product({"name": "Local only", "price": 1})

    assert services.store.get_product(created["id"]) is not None
    assert app.state.store.get_product(created["id"]) is None


@pytest.mark.asyncio
async def test_backend_state_is_separate_from_client_fallback(online_services, backend):
    created = await online_services.products.create_product({"name": "Remote Cap", "price": 20})

    assert backend.state.store.get_product(created["id"])["name"] == "Remote Cap"
    assert online_services.store.get_product(created["id"]) is None
