"""Seed data loaded into every LocalStore on construction and reset."""

from __future__ import annotations

from typing import Any, Dict, List

from storefront.integrations.contracts.interfaces import (
    ContactMessage,
    ContactStatus,
    NewsletterSubscription,
    Order,
    OrderItem,
    OrderStatus,
    Product,
    ShippingAddress,
)


# ---------------------------------------------------------------------------
# Seed data
# ---------------------------------------------------------------------------

_SEED_PRODUCTS: List[Product] = [
    Product(
        id="1",
        name="Peak Mode Performance T-Shirt",
        description="Premium Swedish fitness apparel designed for athletes who demand performance and style.",
        price=29.99,
        original_price=39.99,
        images=["/placeholder.svg"],
        category="Clothing",
        tags=["fitness", "performance", "swedish"],
        sizes=["S", "M", "L", "XL"],
        colors=["Black", "White", "Navy"],
        in_stock=True,
        featured=True,
        is_new=True,
        rating=4.8,
        review_count=127,
        created_at="2024-01-01T00:00:00Z",
        updated_at="2024-01-15T00:00:00Z",
    ),
    Product(
        id="2",
        name="Fitness Shorts Pro",
        description="High-performance shorts designed for maximum comfort during intense workouts.",
        price=39.99,
        images=["/placeholder.svg"],
        category="Clothing",
        tags=["fitness", "shorts", "workout"],
        sizes=["S", "M", "L", "XL"],
        colors=["Black", "Gray", "Blue"],
        in_stock=True,
        featured=False,
        is_new=False,
        rating=4.6,
        review_count=89,
        created_at="2024-01-01T00:00:00Z",
        updated_at="2024-01-10T00:00:00Z",
    ),
    Product(
        id="3",
        name="Running Shoes Elite",
        description="Professional running shoes with advanced cushioning technology.",
        price=89.99,
        original_price=119.99,
        images=["/placeholder.svg"],
        category="Footwear",
        tags=["running", "shoes", "professional"],
        sizes=["7", "8", "9", "10", "11", "12"],
        colors=["Black", "White", "Red"],
        in_stock=False,
        featured=True,
        is_new=False,
        rating=4.9,
        review_count=234,
        created_at="2024-01-01T00:00:00Z",
        updated_at="2024-01-12T00:00:00Z",
    ),
]

_SEED_ORDERS: List[Order] = [
    Order(
        id="1",
        order_number="PM-00000001",
        shipping_address=ShippingAddress(
            first_name="John",
            last_name="Doe",
            email="john.doe@example.com",
            phone="+46 70 123 4567",
            address="123 Main St",
            city="Stockholm",
            postal_code="11122",
            country="Sweden",
        ),
        items=[
            OrderItem(product_id="1", name="Peak Mode Performance T-Shirt", price=29.99,
                      quantity=2, size="M", color="Black", image="/placeholder.svg"),
        ],
        total=69.98,
        shipping=5.99,
        tax=6.99,
        status=OrderStatus.PENDING,
        payment_method="Credit Card",
        shipping_method="Standard",
        created_at="2024-01-15T10:30:00Z",
        updated_at="2024-01-15T10:30:00Z",
    ),
    Order(
        id="2",
        order_number="PM-00000002",
        shipping_address=ShippingAddress(
            first_name="Jane",
            last_name="Smith",
            email="jane.smith@example.com",
            phone="+46 70 987 6543",
            address="456 Oak Ave",
            city="Gothenburg",
            postal_code="41301",
            country="Sweden",
        ),
        items=[
            OrderItem(product_id="2", name="Fitness Shorts Pro", price=39.99,
                      quantity=1, size="S", color="Black", image="/placeholder.svg"),
            OrderItem(product_id="3", name="Running Shoes Elite", price=89.99,
                      quantity=1, size="8", color="Black", image="/placeholder.svg"),
        ],
        total=129.97,
        shipping=5.99,
        tax=12.99,
        status=OrderStatus.SHIPPED,
        payment_method="PayPal",
        shipping_method="Express",
        created_at="2024-01-14T14:20:00Z",
        updated_at="2024-01-15T09:15:00Z",
    ),
]

_SEED_SUBSCRIBERS: List[NewsletterSubscription] = [
    NewsletterSubscription(id="1", email="john.doe@example.com", subscribed=True, created_at="2024-01-01T00:00:00Z"),
    NewsletterSubscription(id="2", email="newsletter@example.com", subscribed=True, created_at="2024-01-05T00:00:00Z"),
]

_SEED_CONTACT_MESSAGES: List[ContactMessage] = [
    ContactMessage(
        id="1",
        name="Customer Support",
        email="support@example.com",
        subject="Product Inquiry",
        message="I would like to know more about your fitness shorts.",
        status=ContactStatus.NEW,
        created_at="2024-01-15T08:00:00Z",
    ),
]


def _dump(records) -> List[Dict[str, Any]]:
    return [r.model_dump(by_alias=True, mode="json") for r in records]


def seed_products() -> List[Dict[str, Any]]:
    return _dump(_SEED_PRODUCTS)


def seed_orders() -> List[Dict[str, Any]]:
    return _dump(_SEED_ORDERS)


def seed_subscribers() -> List[Dict[str, Any]]:
    return _dump(_SEED_SUBSCRIBERS)


def seed_contact_messages() -> List[Dict[str, Any]]:
    return _dump(_SEED_CONTACT_MESSAGES)
