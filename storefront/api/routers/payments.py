"""
Payment command endpoint (development stub).

Accepts the same {"command", "data"} envelope as the hosted payment backend
and answers with the same response shape. Nothing is charged: intents are
fabricated and verification always reports success for ids this process
issued.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Request
from pydantic import BaseModel, Field

from storefront.integrations.contracts.payments import PaymentCommand, validate_payment_request
from storefront.utils.ids import IdGenerator

logger = logging.getLogger(__name__)

api = APIRouter()

_ids = IdGenerator()


class PaymentCommandRequest(BaseModel):
    command: str
    data: Dict[str, Any] = Field(default_factory=dict)


def _failure(error: str) -> Dict[str, Any]:
    return {"status": False, "error": error}


@api.post("/vornifypay", tags=["Payments"])
async def payment_command(payload: PaymentCommandRequest, request: Request):
    issued = request.app.state.payment_intents
    try:
        command = PaymentCommand(payload.command)
    except ValueError:
        return _failure(f"Unknown payment command: {payload.command}")

    if command is PaymentCommand.VERIFY:
        intent_id = payload.data.get("payment_intent_id")
        intent = issued.get(intent_id)
        if not intent:
            return _failure("Payment intent not found")
        return {"status": True, "payment_intent_id": intent_id, "payment_status": "succeeded", **intent}

    errors = validate_payment_request(payload.data)
    if command is PaymentCommand.CREATE_SUBSCRIPTION and not payload.data.get("customer_email"):
        errors.append("customer_email is required")
    if errors:
        return _failure("; ".join(errors))

    prefix = "pi" if command is PaymentCommand.PAYMENT else "sub"
    intent_id, _ = _ids.next(prefix)
    intent = {"amount": float(payload.data["amount"]), "currency": payload.data["currency"]}
    issued[intent_id] = intent
    logger.info("[PAYMENTS] %s accepted id=%s amount=%s", command.value, intent_id, intent["amount"])
    return {
        "status": True,
        "payment_intent_id": intent_id,
        "client_secret": f"{intent_id}_secret",
        "public_key": "pk_test_storefront",
        **intent,
    }
