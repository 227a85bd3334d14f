"""
Order service.

create_order is a two-phase operation on the remote path: the order write is
committed first, then the confirmation email is dispatched as a best-effort
notification. A failed email is recorded by the NotificationDispatcher and
does not affect the returned order. The local path sends no email.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Dict, Optional

from storefront.integrations.clients.mocks.local_store import LocalStore
from storefront.integrations.clients.real_http.api_client import ApiClient
from storefront.integrations.clients.real_http.email import EmailClient
from storefront.integrations.contracts.cart import line_amount
from storefront.integrations.contracts.interfaces import OrderStatus
from storefront.integrations.policy.fallback import FallbackRouter
from storefront.integrations.policy.notifications import NotificationDispatcher

from .base import FallbackService, path_segment

logger = logging.getLogger(__name__)


def prepare_order(order_data: Dict[str, Any]) -> Dict[str, Any]:
    """Snapshot the line items and fill in status and total. Item shapes pass through unchecked."""
    order = copy.deepcopy(order_data)
    items = order.get("items")
    if not isinstance(items, list):
        items = []
    order["items"] = items
    order["status"] = OrderStatus.PENDING.value
    if order.get("total") is None:
        order["total"] = round(sum(line_amount(i) for i in items if isinstance(i, dict)), 2)
    return order


class OrderService(FallbackService):
    def __init__(
        self,
        api_client: ApiClient,
        store: LocalStore,
        router: FallbackRouter,
        email_client: EmailClient,
        notifications: NotificationDispatcher,
    ) -> None:
        super().__init__(api_client, store, router)
        self.email_client = email_client
        self.notifications = notifications

    async def create_order(self, order_data: Dict[str, Any]) -> Any:
        order = prepare_order(order_data)

        async def confirm(created: Any) -> None:
            document = created if isinstance(created, dict) else order
            await self.notifications.dispatch(
                "order_confirmation",
                lambda: self.email_client.send_order_confirmation(document),
            )

        return await self.router.run(
            "create_order",
            remote=lambda: self.api_client.post("/api/orders", json=order),
            local=lambda: self.store.create_order(order),
            after_remote=confirm,
        )

    async def get_orders(self, user_id: Optional[str] = None) -> Any:
        params = {"userId": user_id} if user_id else None
        return await self.router.run(
            "get_orders",
            remote=lambda: self.api_client.get("/api/orders", params=params),
            local=lambda: self.store.get_all_orders(user_id),
        )

    async def get_order(self, order_id: str) -> Any:
        return await self.router.run(
            "get_order",
            remote=lambda: self.api_client.get(f"/api/orders/{path_segment(order_id)}"),
            local=lambda: self.store.get_order(order_id),
        )

    async def update_order_status(self, order_id: str, status: Any) -> Any:
        """Overwrite the order's status (last write wins). Unknown statuses raise ValueError."""
        new_status = OrderStatus(status)
        logger.info("Updating order %s status to %s", order_id, new_status.value)
        return await self.router.run(
            "update_order_status",
            remote=lambda: self.api_client.patch(
                f"/api/orders/{path_segment(order_id)}/status", json={"status": new_status.value}
            ),
            local=lambda: self.store.update_order_status(order_id, new_status),
        )
