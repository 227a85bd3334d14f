"""
Cart service.

Remote carts are objects ({id, items, total, itemCount}) read with
GET /api/cart and written back whole with PUT /api/cart. The local cart is
the flat item list persisted by the LocalStore.

Every mutation is a read-modify-write against ONE source: the snapshot is
read from the source that will receive the write, the new item list is
derived from it, and the list is written back. There is no compare-and-swap,
so two overlapping calls resolve as last-write-wins.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from storefront.integrations.clients.mocks.local_store import LocalStore
from storefront.integrations.clients.real_http.api_client import ApiClient
from storefront.integrations.contracts.cart import (
    build_remote_cart,
    cart_items_of,
    normalize_cart_item,
    with_item_added,
    with_quantity,
)
from storefront.integrations.policy.fallback import FallbackRouter

from .base import FallbackService

CART_ENDPOINT = "/api/cart"


class CartService(FallbackService):
    def __init__(
        self,
        api_client: ApiClient,
        store: LocalStore,
        router: FallbackRouter,
        user_id: Optional[str] = None,
        default_currency: str = "SEK",
    ) -> None:
        super().__init__(api_client, store, router)
        self.user_id = user_id
        self.default_currency = default_currency

    def _params(self) -> Optional[Dict[str, str]]:
        return {"userId": self.user_id} if self.user_id else None

    async def _read_remote(self) -> Any:
        return await self.api_client.get(CART_ENDPOINT, params=self._params())

    async def _write_remote(self, snapshot: Any, items) -> Any:
        cart_id = snapshot.get("id") if isinstance(snapshot, dict) else None
        return await self.api_client.put(CART_ENDPOINT, json=build_remote_cart(cart_id, items, self.user_id))

    async def get_cart(self) -> Any:
        return await self.router.run("get_cart", remote=self._read_remote, local=self.store.get_cart)

    async def add_to_cart(self, item: Dict[str, Any]) -> Any:
        line = normalize_cart_item(item, self.default_currency)

        async def remote():
            snapshot = await self._read_remote()
            return await self._write_remote(snapshot, with_item_added(cart_items_of(snapshot), line))

        return await self.router.run("add_to_cart", remote=remote, local=lambda: self.store.add_to_cart(line))

    async def update_cart_item(self, ref: str, quantity: int) -> Any:
        """Set a line's quantity (matched by line id or productId); quantity <= 0 removes it."""

        async def remote():
            snapshot = await self._read_remote()
            items, touched = with_quantity(cart_items_of(snapshot), ref, quantity)
            if touched is None:
                return snapshot
            return await self._write_remote(snapshot, items)

        return await self.router.run(
            "update_cart_item",
            remote=remote,
            local=lambda: self.store.update_cart_item(ref, quantity),
        )

    async def remove_from_cart(self, ref: str) -> Any:
        return await self.update_cart_item(ref, 0)

    async def clear_cart(self) -> Any:
        async def remote():
            snapshot = await self._read_remote()
            return await self._write_remote(snapshot, [])

        return await self.router.run("clear_cart", remote=remote, local=self.store.clear_cart)
