"""
Domain services.

Each service exposes the storefront's async operations and delegates the
remote-or-local decision to the FallbackRouter it is built with. Build them
through storefront.bootstrap.build_services rather than by hand.
"""

from .cart import CartService
from .contact import ContactService
from .newsletter import NewsletterService
from .orders import OrderService
from .payments import PaymentService
from .products import ProductService

__all__ = [
    "CartService",
    "ContactService",
    "NewsletterService",
    "OrderService",
    "PaymentService",
    "ProductService",
]
