import json

import httpx
import pytest

TEE = {"productId": "1", "name": "Peak Mode Performance T-Shirt", "price": 29.99, "quantity": 1, "size": "M"}
SHORTS = {"productId": "2", "name": "Fitness Shorts Pro", "price": 39.99, "quantity": 2}


# --------------------------------------------------------------------------- #
# Local cart
# --------------------------------------------------------------------------- #
@pytest.mark.asyncio
async def test_local_cart_add_merge_update_remove(offline_services):
    cart = offline_services.cart

    await cart.add_to_cart(TEE)
    await cart.add_to_cart(TEE)
    items = await cart.add_to_cart(SHORTS)
    assert [(i["productId"], i["quantity"]) for i in items] == [("1", 2), ("2", 2)]

    touched = await cart.update_cart_item("1-M", 5)
    assert touched["quantity"] == 5

    await cart.remove_from_cart("2")
    assert [i["productId"] for i in await cart.get_cart()] == ["1"]

    assert await cart.update_cart_item("missing", 1) is None
    assert await cart.clear_cart() is True
    assert await cart.get_cart() == []


@pytest.mark.asyncio
async def test_local_cart_update_to_zero_removes_line(offline_services):
    await offline_services.cart.add_to_cart(SHORTS)
    await offline_services.cart.update_cart_item("2", 0)
    assert await offline_services.cart.get_cart() == []


# --------------------------------------------------------------------------- #
# Remote cart (development backend in-process)
# --------------------------------------------------------------------------- #
@pytest.mark.asyncio
async def test_remote_cart_read_modify_write(online_services, backend):
    cart = online_services.cart

    await cart.add_to_cart(TEE)
    result = await cart.add_to_cart(TEE)

    assert result["id"] == "cart_guest"
    assert [(i["productId"], i["quantity"]) for i in result["items"]] == [("1", 2)]
    assert result["total"] == 59.98
    assert result["itemCount"] == 2

    result = await cart.update_cart_item("1", 0)
    assert result["items"] == []
    assert result["itemCount"] == 0
    # the client-side fallback store was never written
    assert online_services.store.get_cart() == []


@pytest.mark.asyncio
async def test_remote_update_of_unknown_line_returns_snapshot_without_writing(mock_backend_services):
    writes = []
    snapshot = {"id": "c1", "items": [dict(SHORTS, id="2")], "total": 79.98, "itemCount": 2}

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/api/health":
            return httpx.Response(200, json={"status": "ok"})
        if request.method == "PUT":
            writes.append(json.loads(request.content))
            return httpx.Response(200, json=writes[-1])
        return httpx.Response(200, json=snapshot)

    services = mock_backend_services(handler)

    assert await services.cart.update_cart_item("missing", 3) == snapshot
    assert writes == []

    await services.cart.update_cart_item("2", 1)
    assert writes[0]["id"] == "c1"
    assert writes[0]["items"][0]["quantity"] == 1
    assert writes[0]["total"] == 39.99


@pytest.mark.asyncio
async def test_remote_cart_is_scoped_by_user(backend, clock):
    from storefront.bootstrap import build_services
    from storefront.config import StorefrontConfig

    config = StorefrontConfig(api_base_url="http://testserver")
    services = build_services(config, transport=httpx.ASGITransport(app=backend), clock=clock, user_id="u42")

    result = await services.cart.add_to_cart(SHORTS)

    assert result["userId"] == "u42"
    assert "u42" in backend.state.carts
    assert "guest" not in backend.state.carts


@pytest.mark.asyncio
async def test_local_cart_accepts_numeric_product_ids(offline_services):
    cart = offline_services.cart

    await cart.add_to_cart({"productId": 7, "price": 10.0})
    items = await cart.add_to_cart({"productId": 7, "price": 10.0})

    assert [(i["productId"], i["quantity"]) for i in items] == [(7, 2)]
    assert (await cart.update_cart_item("7", 4))["quantity"] == 4


@pytest.mark.asyncio
async def test_remote_cart_accepts_loose_item_shapes(online_services, backend):
    cart = online_services.cart

    await cart.add_to_cart({"productId": 7, "price": 10.0, "quantity": 2})
    result = await cart.add_to_cart({"name": "Gift wrap", "price": 2.5})

    assert [i.get("productId") for i in result["items"]] == [7, None]
    assert result["total"] == 22.5
    assert result["itemCount"] == 3
    assert backend.state.carts["guest"]["items"][0]["productId"] == 7
