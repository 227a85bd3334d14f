"""
Payment service.

The one domain service without a local fallback: if the backend is disabled,
the probe fails, the remote call fails, or the provider reports status=false,
a PaymentError is raised. A payment result is never produced locally.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from pydantic import ValidationError

from storefront.errors import PaymentError
from storefront.integrations.clients.real_http.payments import PaymentsClient
from storefront.integrations.contracts.payments import (
    PaymentCommand,
    PaymentRequestData,
    PaymentResult,
    SubscriptionRequestData,
    validate_payment_request,
)
from storefront.integrations.policy.fallback import FallbackRouter

logger = logging.getLogger(__name__)


class PaymentService:
    def __init__(self, payments_client: PaymentsClient, router: FallbackRouter) -> None:
        self.payments_client = payments_client
        self.router = router

    async def _execute(self, command: PaymentCommand, data: Dict[str, Any]) -> PaymentResult:
        result = await self.router.run_remote_only(
            f"payment {command.value}",
            remote=lambda: self.payments_client.execute(command, data),
            error_type=PaymentError,
        )
        if not result.status:
            logger.warning("Payment command %s declined: %s", command.value, result.error)
            raise PaymentError(result.error or f"Payment {command.value} was declined.", payload=result.raw)
        return result

    async def process_payment(self, payment_data: Dict[str, Any]) -> PaymentResult:
        errors = validate_payment_request(payment_data)
        if errors:
            raise PaymentError("; ".join(errors), payload=payment_data)
        request = _validated(PaymentRequestData, payment_data)
        return await self._execute(PaymentCommand.PAYMENT, request.model_dump())

    async def create_subscription(self, subscription_data: Dict[str, Any]) -> PaymentResult:
        errors = validate_payment_request(subscription_data)
        if errors:
            raise PaymentError("; ".join(errors), payload=subscription_data)
        request = _validated(SubscriptionRequestData, subscription_data)
        return await self._execute(PaymentCommand.CREATE_SUBSCRIPTION, request.model_dump(exclude_none=True))

    async def verify_payment(self, payment_intent_id: str) -> PaymentResult:
        if not payment_intent_id:
            raise PaymentError("payment_intent_id is required")
        return await self._execute(PaymentCommand.VERIFY, {"payment_intent_id": payment_intent_id})


def _validated(model_type, data: Dict[str, Any]):
    try:
        return model_type(**data)
    except ValidationError as exc:
        raise PaymentError(f"Invalid payment request: {exc}", payload=data) from exc
