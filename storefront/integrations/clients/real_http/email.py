"""
Email notification HTTP client.

Sends transactional emails through the backend's email endpoint. Used only as
a secondary effect after a successful remote write (order confirmation,
newsletter welcome, contact acknowledgment).
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from .api_client import ApiClient


class EmailClient:
    ORDER_CONFIRMATION = "order_confirmation"
    NEWSLETTER_WELCOME = "newsletter_welcome"
    CONTACT_ACKNOWLEDGMENT = "contact_acknowledgment"

    def __init__(self, api_client: ApiClient, email_path: str = "/api/email") -> None:
        self.api_client = api_client
        self.email_path = email_path

    async def send_email(self, email_type: str, to: str, data: Optional[Dict[str, Any]] = None) -> Any:
        if not to:
            raise ValueError(f"Cannot send {email_type} email without a recipient.")
        payload: Dict[str, Any] = {"type": email_type, "to": to}
        if data is not None:
            payload["data"] = data
        return await self.api_client.post(self.email_path, json=payload)

    async def send_order_confirmation(self, order: Dict[str, Any]) -> Any:
        address = order.get("shippingAddress") or order.get("customer") or {}
        name = f"{address.get('firstName', '')} {address.get('lastName', '')}".strip()
        data = {
            "name": name,
            "orderId": order.get("orderNumber") or order.get("id"),
            "products": order.get("items", []),
            "total": order.get("total"),
            "shippingAddress": ", ".join(
                part for part in (
                    address.get("address"),
                    f"{address.get('city', '')} {address.get('postalCode', '')}".strip(),
                    address.get("country"),
                ) if part
            ),
        }
        return await self.send_email(self.ORDER_CONFIRMATION, address.get("email", ""), data)

    async def send_newsletter_welcome(self, email: str, name: Optional[str] = None) -> Any:
        return await self.send_email(self.NEWSLETTER_WELCOME, email, {"name": name or email.split("@")[0]})

    async def send_contact_acknowledgment(self, message: Dict[str, Any]) -> Any:
        data = {"name": message.get("name"), "message": message.get("message")}
        return await self.send_email(self.CONTACT_ACKNOWLEDGMENT, message.get("email", ""), data)
