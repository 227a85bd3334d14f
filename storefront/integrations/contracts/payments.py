"""
Payment contracts.

Defines the command-oriented payment endpoint's request/response structures:
- one-time payment (command "payment")
- subscription (command "create_subscription")
- verification (command "verify")

There is deliberately no mock counterpart under clients/mocks/: a payment
result must always come from the real payment backend.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from storefront.errors import PaymentError


class PaymentCommand(str, Enum):
    PAYMENT = "payment"
    CREATE_SUBSCRIPTION = "create_subscription"
    VERIFY = "verify"


class PaymentRequestData(BaseModel):
    model_config = ConfigDict(extra="allow")

    amount: float
    currency: str
    payment_type: str = "one_time"
    product_data: Dict[str, Any] = Field(default_factory=dict)


class SubscriptionRequestData(BaseModel):
    model_config = ConfigDict(extra="allow")

    customer_email: str
    amount: float
    currency: str
    billing_interval: Literal["month", "year"] = "month"
    trial_days: Optional[int] = Field(default=None, ge=0)
    product_data: Dict[str, Any] = Field(default_factory=dict)


class PaymentResult(BaseModel):
    model_config = ConfigDict(extra="allow")

    status: bool
    error: Optional[str] = None
    payment_intent_id: Optional[str] = None
    client_secret: Optional[str] = None
    public_key: Optional[str] = None
    amount: Optional[float] = None
    currency: Optional[str] = None
    raw: Dict[str, Any] = Field(default_factory=dict)


# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------

def validate_payment_request(data: Dict[str, Any]) -> List[str]:
    """
    Return a list of validation errors.
    Empty list means the request is valid.
    """
    errors: List[str] = []

    try:
        amount = float(data.get("amount"))
    except (TypeError, ValueError):
        errors.append("amount must be a number")
    else:
        if amount <= 0:
            errors.append("amount must be greater than zero")
    if not data.get("currency"):
        errors.append("currency is required")

    return errors


def normalize_payment_response(raw: Any) -> PaymentResult:
    """Map a payment endpoint body onto PaymentResult, raising PaymentError on garbage."""
    if not isinstance(raw, dict):
        raise PaymentError(f"Unexpected payment response: {raw!r}")
    payload = {key: value for key, value in raw.items() if key != "raw"}
    payload["status"] = bool(raw.get("status") or raw.get("success"))
    try:
        return PaymentResult(**payload, raw=raw)
    except ValidationError as exc:
        raise PaymentError(f"Payment response validation failed: {exc}", payload=raw) from exc
