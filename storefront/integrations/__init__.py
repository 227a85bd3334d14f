"""
Integrations layer.
This package contains all code used to reach the storefront's data sources:
- the hosted backend (REST endpoints, email endpoint, payment commands)
- the local mock store (seeded in-memory data plus the persisted cart)
- the routing policy that picks one of them per call

Key rule:
- Domain services MUST NOT call httpx or the local store's collections directly
  from outside this package's clients.
- Remote vs local is decided per call by FallbackRouter; payments never fall back.

Wiring:
- Clients, store and router are built in ONE place (storefront/bootstrap.py).
"""

from .contracts.interfaces import (
    CartItem,
    ContactMessage,
    ContactStatus,
    KeyValueStorage,
    NewsletterSubscription,
    Order,
    OrderItem,
    OrderStatus,
    Product,
    ShippingAddress,
)
from .contracts.catalog import ProductFilter, filter_products, search_products
from .contracts.payments import (
    PaymentCommand,
    PaymentRequestData,
    PaymentResult,
    SubscriptionRequestData,
    validate_payment_request,
)

__all__ = [
    # records
    "CartItem", "ContactMessage", "ContactStatus", "KeyValueStorage",
    "NewsletterSubscription", "Order", "OrderItem", "OrderStatus",
    "Product", "ShippingAddress",
    # catalog
    "ProductFilter", "filter_products", "search_products",
    # payments
    "PaymentCommand", "PaymentRequestData", "PaymentResult",
    "SubscriptionRequestData", "validate_payment_request",
]
