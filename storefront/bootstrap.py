"""
Storefront wiring.

Purpose:
- Build the remote clients, the local store and the routing policy from one
  StorefrontConfig
- Hand every domain service the SAME LocalStore and FallbackRouter

Usage:
    services = build_services()
    products = await services.products.get_all_products()

Swap:
Pass `store=` to share a pre-seeded LocalStore, or `transport=` (an httpx
transport) to point the remote clients at an in-process app or a mock.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

import httpx

from storefront.config import StorefrontConfig, load_storefront_config
from storefront.integrations.clients.mocks import FileKeyValueStorage, LocalStore, MemoryKeyValueStorage
from storefront.integrations.clients.real_http import ApiClient, EmailClient, PaymentsClient
from storefront.integrations.policy import AvailabilityProber, FallbackRouter, NotificationDispatcher
from storefront.services import (
    CartService,
    ContactService,
    NewsletterService,
    OrderService,
    PaymentService,
    ProductService,
)
from storefront.utils.ids import utc_now

logger = logging.getLogger(__name__)


@dataclass
class StorefrontServices:
    config: StorefrontConfig
    api_client: ApiClient
    store: LocalStore
    router: FallbackRouter
    notifications: NotificationDispatcher
    email: EmailClient
    products: ProductService
    cart: CartService
    orders: OrderService
    newsletter: NewsletterService
    contact: ContactService
    payments: PaymentService


def build_local_store(config: StorefrontConfig, clock: Callable[[], datetime] = utc_now) -> LocalStore:
    if config.cart_storage_dir:
        cart_storage = FileKeyValueStorage(Path(config.cart_storage_dir))
    else:
        cart_storage = MemoryKeyValueStorage()
    return LocalStore(
        cart_storage,
        cart_key=config.cart_storage_key,
        clock=clock,
        default_currency=config.default_currency,
        order_number_prefix=config.order_number_prefix,
    )


def build_services(
    config: Optional[StorefrontConfig] = None,
    *,
    store: Optional[LocalStore] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    clock: Callable[[], datetime] = utc_now,
    user_id: Optional[str] = None,
) -> StorefrontServices:
    config = config or load_storefront_config()
    store = store or build_local_store(config, clock)

    api_client = ApiClient.from_config(config, transport=transport)
    prober = AvailabilityProber(
        api_client,
        timeout_seconds=config.probe_timeout_seconds,
        production=config.is_production,
    )
    router = FallbackRouter(prober, backend_enabled=config.backend_enabled, production=config.is_production)
    notifications = NotificationDispatcher(timeout_seconds=config.notification_timeout_seconds)
    email = EmailClient(api_client, email_path=config.email_path)
    payments_client = PaymentsClient(api_client, payment_path=config.payment_path)

    logger.info(
        "Storefront services wired: backend_enabled=%s api=%s",
        config.backend_enabled,
        config.api_base_url,
    )

    return StorefrontServices(
        config=config,
        api_client=api_client,
        store=store,
        router=router,
        notifications=notifications,
        email=email,
        products=ProductService(api_client, store, router),
        cart=CartService(api_client, store, router, user_id=user_id, default_currency=config.default_currency),
        orders=OrderService(api_client, store, router, email, notifications),
        newsletter=NewsletterService(api_client, store, router, email, notifications),
        contact=ContactService(api_client, store, router, email, notifications),
        payments=PaymentService(payments_client, router),
    )
