"""Contact form messages."""

from __future__ import annotations

from typing import Any, Dict

from storefront.integrations.clients.mocks.local_store import LocalStore
from storefront.integrations.clients.real_http.api_client import ApiClient
from storefront.integrations.clients.real_http.email import EmailClient
from storefront.integrations.contracts.interfaces import ContactStatus
from storefront.integrations.policy.fallback import FallbackRouter
from storefront.integrations.policy.notifications import NotificationDispatcher

from .base import FallbackService, path_segment

_REQUIRED_FIELDS = ("name", "email", "message")


class ContactService(FallbackService):
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

    async def send_message(self, message_data: Dict[str, Any]) -> Any:
        missing = [f for f in _REQUIRED_FIELDS if not str(message_data.get(f) or "").strip()]
        if missing:
            raise ValueError(f"Missing required contact fields: {', '.join(missing)}")

        message = {
            "name": message_data["name"],
            "email": message_data["email"],
            "subject": message_data.get("subject", ""),
            "message": message_data["message"],
            "status": ContactStatus.NEW.value,
        }

        async def acknowledge(_: Any) -> None:
            await self.notifications.dispatch(
                "contact_acknowledgment",
                lambda: self.email_client.send_contact_acknowledgment(message),
            )

        return await self.router.run(
            "send_message",
            remote=lambda: self.api_client.post("/api/contact", json=message),
            local=lambda: self.store.add_message(message),
            after_remote=acknowledge,
        )

    async def get_messages(self) -> Any:
        return await self.router.run(
            "get_messages",
            remote=lambda: self.api_client.get("/api/contact"),
            local=self.store.get_all_messages,
        )

    async def update_message_status(self, message_id: str, status: Any) -> Any:
        new_status = ContactStatus(status)
        return await self.router.run(
            "update_message_status",
            remote=lambda: self.api_client.patch(
                f"/api/contact/{path_segment(message_id)}/status", json={"status": new_status.value}
            ),
            local=lambda: self.store.update_message_status(message_id, new_status),
        )
