"""
Real Payments HTTP Client.

Talks to the command-oriented payment endpoint:
    POST {payment_path} {"command": "payment" | "create_subscription" | "verify", "data": {...}}
The response carries a boolean `status` and an `error` string on failure.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from storefront.integrations.contracts.payments import (
    PaymentCommand,
    PaymentResult,
    normalize_payment_response,
)

from .api_client import ApiClient

logger = logging.getLogger(__name__)


class PaymentsClient:
    def __init__(self, api_client: ApiClient, payment_path: str = "/api/vornifypay") -> None:
        self.api_client = api_client
        self.payment_path = payment_path

    async def execute(self, command: PaymentCommand, data: Dict[str, Any]) -> PaymentResult:
        logger.info("Sending payment command=%s", command.value)
        raw = await self.api_client.post(self.payment_path, json={"command": command.value, "data": data})
        return normalize_payment_response(raw)

    async def create_payment(self, data: Dict[str, Any]) -> PaymentResult:
        return await self.execute(PaymentCommand.PAYMENT, data)

    async def create_subscription(self, data: Dict[str, Any]) -> PaymentResult:
        return await self.execute(PaymentCommand.CREATE_SUBSCRIPTION, data)

    async def verify_payment(self, payment_intent_id: str) -> PaymentResult:
        return await self.execute(PaymentCommand.VERIFY, {"payment_intent_id": payment_intent_id})
