"""
Local Mock Store.

Purpose:
- Stands in for the hosted backend when it is disabled or unreachable
- Keeps products, orders, newsletter subscribers and contact messages in
  process memory, seeded with fixture records
- Keeps the cart in a KeyValueStorage (the localStorage analogue) as one JSON
  list under a single key

Behavior guidelines:
- Operations are synchronous and mirror the shape of the remote endpoints
- Lookups that miss return None; delete returns False. Callers check both.
- Returned records are copies: mutate the store only through its methods

Swap:
Domain services decide per call whether to use this store or the remote
backend; the store itself never talks to the network.
"""

from __future__ import annotations

import copy
import json
import logging
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from storefront.integrations.contracts.cart import (
    normalize_cart_item,
    with_item_added,
    with_quantity,
)
from storefront.integrations.contracts.interfaces import ContactStatus, KeyValueStorage, OrderStatus
from storefront.utils.ids import IdGenerator, isoformat, utc_now

from .fixtures import seed_contact_messages, seed_orders, seed_products, seed_subscribers
from .storage import MemoryKeyValueStorage

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


class LocalStore:
    """
    In-process storefront data store.

    Parameters
    ----------
    cart_storage : KeyValueStorage
        Where the cart blob is persisted. Defaults to process memory.
    cart_key : str
        Key of the cart blob. Default "cart".
    clock : callable
        Returns the current aware datetime; drives ids and timestamps.
    """

    def __init__(
        self,
        cart_storage: Optional[KeyValueStorage] = None,
        *,
        cart_key: str = "cart",
        clock: Callable[[], datetime] = utc_now,
        default_currency: str = "SEK",
        order_number_prefix: str = "PM",
    ) -> None:
        self.cart_storage = cart_storage or MemoryKeyValueStorage()
        self.cart_key = cart_key
        self.default_currency = default_currency
        self.order_number_prefix = order_number_prefix
        self._clock = clock
        self._ids = IdGenerator(clock)

        self._products: List[Record] = []
        self._orders: List[Record] = []
        self._subscribers: List[Record] = []
        self._contact_messages: List[Record] = []

        self.reset(clear_cart=False)
        logger.info("[LOCAL STORE] Initialised with %d products, %d orders", len(self._products), len(self._orders))

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def reset(self, clear_cart: bool = True) -> None:
        """Re-seed every collection with fixture data."""
        self._products = seed_products()
        self._orders = seed_orders()
        self._subscribers = seed_subscribers()
        self._contact_messages = seed_contact_messages()
        if clear_cart:
            self.clear_cart()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _now(self) -> str:
        return isoformat(self._clock())

    def _new_identity(self, prefix: str) -> Dict[str, str]:
        record_id, moment = self._ids.next(prefix)
        stamp = isoformat(moment)
        return {"id": record_id, "createdAt": stamp, "updatedAt": stamp}

    @staticmethod
    def _find(collection: List[Record], field: str, value: Any) -> Optional[Record]:
        return next((r for r in collection if r.get(field) == value), None)

    # ------------------------------------------------------------------
    # Products
    # ------------------------------------------------------------------

    def get_all_products(self) -> List[Record]:
        return copy.deepcopy(self._products)

    def get_product(self, product_id: str) -> Optional[Record]:
        product = self._find(self._products, "id", product_id)
        return copy.deepcopy(product) if product else None

    def create_product(self, data: Record) -> Record:
        product = {**copy.deepcopy(data), **self._new_identity("product")}
        self._products.append(product)
        logger.info("[LOCAL STORE] Product created id=%s name=%s", product["id"], product.get("name"))
        return copy.deepcopy(product)

    def update_product(self, product_id: str, data: Record) -> Optional[Record]:
        product = self._find(self._products, "id", product_id)
        if not product:
            logger.debug("[LOCAL STORE] Product not found id=%s", product_id)
            return None
        updates = {k: v for k, v in copy.deepcopy(data).items() if k not in ("id", "createdAt")}
        product.update(updates)
        product["updatedAt"] = self._now()
        return copy.deepcopy(product)

    def delete_product(self, product_id: str) -> bool:
        for index, product in enumerate(self._products):
            if product.get("id") == product_id:
                del self._products[index]
                logger.info("[LOCAL STORE] Product deleted id=%s", product_id)
                return True
        return False

    # ------------------------------------------------------------------
    # Orders
    # ------------------------------------------------------------------

    def get_all_orders(self, user_id: Optional[str] = None) -> List[Record]:
        orders = self._orders
        if user_id is not None:
            orders = [o for o in orders if o.get("userId") == user_id]
        return copy.deepcopy(orders)

    def get_order(self, order_id: str) -> Optional[Record]:
        order = self._find(self._orders, "id", order_id)
        return copy.deepcopy(order) if order else None

    def create_order(self, data: Record) -> Record:
        identity = self._new_identity("order")
        order = {**copy.deepcopy(data), **identity}
        if not order.get("orderNumber"):
            digits = identity["id"].split("_", 1)[1]
            order["orderNumber"] = f"{self.order_number_prefix}-{digits[-8:]}"
        order.setdefault("status", OrderStatus.PENDING.value)
        self._orders.append(order)
        logger.info("[LOCAL STORE] Order created id=%s number=%s", order["id"], order["orderNumber"])
        return copy.deepcopy(order)

    def update_order(self, order_id: str, data: Record) -> Optional[Record]:
        order = self._find(self._orders, "id", order_id)
        if not order:
            return None
        updates = {k: v for k, v in copy.deepcopy(data).items() if k not in ("id", "orderNumber", "createdAt")}
        if "status" in updates:
            updates["status"] = OrderStatus(updates["status"]).value
        order.update(updates)
        order["updatedAt"] = self._now()
        return copy.deepcopy(order)

    def update_order_status(self, order_id: str, status: OrderStatus) -> Optional[Record]:
        order = self._find(self._orders, "id", order_id)
        if not order:
            logger.debug("[LOCAL STORE] Order not found id=%s", order_id)
            return None
        order["status"] = OrderStatus(status).value
        order["updatedAt"] = self._now()
        return copy.deepcopy(order)

    # ------------------------------------------------------------------
    # Newsletter
    # ------------------------------------------------------------------

    def get_all_subscribers(self) -> List[Record]:
        return copy.deepcopy(self._subscribers)

    def get_subscriber(self, email: str) -> Optional[Record]:
        subscriber = self._find(self._subscribers, "email", email)
        return copy.deepcopy(subscriber) if subscriber else None

    def subscribe(self, email: str, name: Optional[str] = None) -> Record:
        """Upsert: an existing address is flipped back to subscribed."""
        existing = self._find(self._subscribers, "email", email)
        if existing:
            existing["subscribed"] = True
            existing["updatedAt"] = self._now()
            if name:
                existing["name"] = name
            return copy.deepcopy(existing)

        identity = self._new_identity("sub")
        subscriber = {
            "id": identity["id"],
            "email": email,
            "name": name or email.split("@")[0],
            "subscribed": True,
            "createdAt": identity["createdAt"],
        }
        self._subscribers.append(subscriber)
        logger.info("[LOCAL STORE] Subscriber added email=%s", email)
        return copy.deepcopy(subscriber)

    def unsubscribe(self, email: str) -> Optional[Record]:
        subscriber = self._find(self._subscribers, "email", email)
        if not subscriber:
            return None
        subscriber["subscribed"] = False
        subscriber["updatedAt"] = self._now()
        return copy.deepcopy(subscriber)

    # ------------------------------------------------------------------
    # Contact
    # ------------------------------------------------------------------

    def get_all_messages(self) -> List[Record]:
        return copy.deepcopy(self._contact_messages)

    def add_message(self, data: Record) -> Record:
        identity = self._new_identity("msg")
        message = {**copy.deepcopy(data), "id": identity["id"], "createdAt": identity["createdAt"]}
        message.setdefault("status", ContactStatus.NEW.value)
        self._contact_messages.append(message)
        logger.info("[LOCAL STORE] Contact message stored id=%s from=%s", message["id"], message.get("email"))
        return copy.deepcopy(message)

    def update_message_status(self, message_id: str, status: ContactStatus) -> Optional[Record]:
        message = self._find(self._contact_messages, "id", message_id)
        if not message:
            return None
        message["status"] = ContactStatus(status).value
        message["updatedAt"] = self._now()
        return copy.deepcopy(message)

    # ------------------------------------------------------------------
    # Cart (persisted)
    # ------------------------------------------------------------------

    def get_cart(self) -> List[Record]:
        try:
            raw = self.cart_storage.get_item(self.cart_key)
            if not raw:
                return []
            items = json.loads(raw)
        except (ValueError, OSError) as e:
            logger.warning("[LOCAL STORE] Persisted cart could not be read (%s); treating it as empty", e)
            return []
        if not isinstance(items, list):
            logger.warning("[LOCAL STORE] Persisted cart is not a list; treating it as empty")
            return []
        return [i for i in items if isinstance(i, dict)]

    def save_cart(self, items: List[Record]) -> List[Record]:
        self.cart_storage.set_item(self.cart_key, json.dumps(items))
        return copy.deepcopy(items)

    def add_to_cart(self, item: Record) -> List[Record]:
        line = normalize_cart_item(item, self.default_currency)
        return self.save_cart(with_item_added(self.get_cart(), line))

    def update_cart_item(self, ref: str, quantity: int) -> Optional[Record]:
        """Set a line's quantity; <= 0 deletes the line. Returns the touched line or None."""
        items, touched = with_quantity(self.get_cart(), ref, quantity)
        if touched is None:
            return None
        self.save_cart(items)
        return touched

    def remove_from_cart(self, ref: str) -> Optional[Record]:
        return self.update_cart_item(ref, 0)

    def clear_cart(self) -> bool:
        self.cart_storage.remove_item(self.cart_key)
        return True
