"""
FastAPI application - development backend for the storefront.

Serves the REST surface the storefront's remote clients talk to, backed by
its own LocalStore. It never shares state with the client-side fallback
store: when this backend is down, the client falls back to ITS OWN copy.

Run:
    uvicorn storefront.api.main:app --port 3001
"""

from dotenv import load_dotenv

load_dotenv()

import logging
import os
from typing import Optional

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront import __version__
from storefront.api.dependencies import bearer_token_protection
from storefront.api.routers.cart import api as cart_api
from storefront.api.routers.contact import api as contact_api
from storefront.api.routers.email import api as email_api
from storefront.api.routers.newsletter import api as newsletter_api
from storefront.api.routers.orders import api as orders_api
from storefront.api.routers.payments import api as payments_api
from storefront.api.routers.products import api as products_api
from storefront.integrations.clients.mocks.local_store import LocalStore
from storefront.utils.ids import isoformat, utc_now

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def create_app(store: Optional[LocalStore] = None, api_token: Optional[str] = None) -> FastAPI:
    """Build the backend app. `api_token` enables bearer-token protection on every route but health."""
    app = FastAPI(
        title="Storefront Backend API",
        description="Development backend for the storefront data-access layer",
        version=__version__,
        dependencies=[Depends(bearer_token_protection)],
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.store = store or LocalStore()
    app.state.carts = {}
    app.state.sent_emails = []
    app.state.payment_intents = {}
    app.state.api_token = api_token

    @app.get("/api/health", tags=["Health"])
    async def health_check():
        return {"status": "healthy", "service": app.title, "timestamp": isoformat(utc_now())}

    app.include_router(products_api, prefix="/api")
    app.include_router(cart_api, prefix="/api")
    app.include_router(orders_api, prefix="/api")
    app.include_router(newsletter_api, prefix="/api")
    app.include_router(contact_api, prefix="/api")
    app.include_router(email_api, prefix="/api")
    app.include_router(payments_api, prefix="/api")

    logger.info("Storefront backend ready (token protection: %s)", bool(api_token))
    return app


app = create_app(api_token=os.getenv("STOREFRONT_API_TOKEN") or None)
