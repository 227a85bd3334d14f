import hmac
import logging
from typing import Any, Dict, List

from fastapi import Header, HTTPException, Request, status

from storefront.integrations.clients.mocks.local_store import LocalStore

logger = logging.getLogger(__name__)

_ALLOWLIST_PATHS = {
    "/api/health",
    "/docs",
    "/openapi.json",
}


def get_store(request: Request) -> LocalStore:
    return request.app.state.store


def get_carts(request: Request) -> Dict[str, Dict[str, Any]]:
    return request.app.state.carts


def get_sent_emails(request: Request) -> List[Dict[str, Any]]:
    return request.app.state.sent_emails


async def bearer_token_protection(
    request: Request,
    authorization: str = Header(default=None),
):
    """Require `Authorization: Bearer <token>` when the app was created with a token."""
    expected = getattr(request.app.state, "api_token", None)
    if not expected or request.url.path in _ALLOWLIST_PATHS:
        return

    scheme, _, candidate = (authorization or "").partition(" ")
    ok = scheme.lower() == "bearer" and bool(candidate) and hmac.compare_digest(candidate.strip(), expected)
    if not ok:
        logger.info("Rejected request without a valid bearer token: path=%s", request.url.path)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or missing bearer token",
        )
