"""
Transactional email endpoint.

The development backend does not deliver mail: it validates the request and
appends it to `app.state.sent_emails` so flows and tests can inspect it.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from storefront.api.dependencies import get_sent_emails
from storefront.integrations.clients.real_http.email import EmailClient
from storefront.utils.ids import isoformat, utc_now

logger = logging.getLogger(__name__)

api = APIRouter()

EMAIL_TYPES = {
    EmailClient.ORDER_CONFIRMATION,
    EmailClient.NEWSLETTER_WELCOME,
    EmailClient.CONTACT_ACKNOWLEDGMENT,
}


class EmailRequest(BaseModel):
    type: str
    to: str
    data: Optional[Dict[str, Any]] = None


@api.post("/email", tags=["Email"])
async def send_email(payload: EmailRequest, sent_emails=Depends(get_sent_emails)):
    if payload.type not in EMAIL_TYPES:
        raise HTTPException(status_code=400, detail=f"Unknown email type: {payload.type}")
    if "@" not in payload.to:
        raise HTTPException(status_code=400, detail="A valid recipient address is required")

    record = {**payload.model_dump(), "sentAt": isoformat(utc_now())}
    sent_emails.append(record)
    logger.info("[EMAIL] Recorded %s email to %s", payload.type, payload.to)
    return {"success": True, "message": f"{payload.type} email queued"}
