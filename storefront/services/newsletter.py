"""Newsletter subscriptions, keyed by email with upsert semantics."""

from __future__ import annotations

from typing import Any, Dict, Optional

from storefront.integrations.clients.mocks.local_store import LocalStore
from storefront.integrations.clients.real_http.api_client import ApiClient
from storefront.integrations.clients.real_http.email import EmailClient
from storefront.integrations.policy.fallback import FallbackRouter
from storefront.integrations.policy.notifications import NotificationDispatcher

from .base import FallbackService, path_segment


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


class NewsletterService(FallbackService):
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

    async def subscribe(self, email: str, name: Optional[str] = None) -> Any:
        address = normalize_email(email)
        if not address:
            raise ValueError("email is required")
        display_name = name or address.split("@")[0]

        async def welcome(_: Any) -> None:
            await self.notifications.dispatch(
                "newsletter_welcome",
                lambda: self.email_client.send_newsletter_welcome(address, display_name),
            )

        return await self.router.run(
            "subscribe",
            remote=lambda: self.api_client.post("/api/newsletter", json={"email": address, "name": display_name}),
            local=lambda: self.store.subscribe(address, display_name),
            after_remote=welcome,
        )

    async def unsubscribe(self, email: str) -> Any:
        """Idempotent: unsubscribing twice leaves subscribed=False and does not raise."""
        address = normalize_email(email)
        return await self.router.run(
            "unsubscribe",
            remote=lambda: self.api_client.put(
                f"/api/newsletter/{path_segment(address)}", json={"subscribed": False}
            ),
            local=lambda: self.store.unsubscribe(address),
        )

    async def check_subscription(self, email: str) -> Dict[str, bool]:
        address = normalize_email(email)
        record = await self.router.run(
            "check_subscription",
            remote=lambda: self.api_client.get(f"/api/newsletter/{path_segment(address)}"),
            local=lambda: self.store.get_subscriber(address),
        )
        return {"subscribed": bool(record.get("subscribed")) if isinstance(record, dict) else False}

    async def get_subscribers(self) -> Any:
        return await self.router.run(
            "get_subscribers",
            remote=lambda: self.api_client.get("/api/newsletter"),
            local=self.store.get_all_subscribers,
        )
