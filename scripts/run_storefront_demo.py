#!/usr/bin/env python3
"""
Run a browse → cart → checkout → newsletter flow and print each stage.

By default the development backend runs in-process (httpx ASGI transport), so
every call is served remotely. With --offline the backend is disabled and the
same flow is served by the local store.

Usage (from repo root):
  python scripts/run_storefront_demo.py
  python scripts/run_storefront_demo.py --offline
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

import httpx

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from storefront.api.main import create_app
from storefront.bootstrap import build_services
from storefront.config import load_storefront_config
from storefront.errors import PaymentError


def setup_logging():
    """Log to terminal at INFO so every stage is visible."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


def print_stage(title: str, data: dict | list | str):
    """Print a stage header and data to the terminal."""
    print("\n" + "=" * 60)
    print(f"  {title}")
    print("=" * 60)
    if isinstance(data, (dict, list)):
        print(json.dumps(data, indent=2, default=str))
    else:
        print(data)
    print()


async def main(offline: bool = False):
    setup_logging()
    config = load_storefront_config()
    config = config.model_copy(update={"backend_enabled": not offline, "api_base_url": "http://storefront.local"})

    backend = create_app()
    services = build_services(config, transport=httpx.ASGITransport(app=backend))

    products = await services.products.get_featured_products()
    print_stage("FEATURED PRODUCTS", products)

    found = await services.products.search_products("shorts")
    print_stage("SEARCH: 'shorts'", found)

    product = found[0]
    cart = await services.cart.add_to_cart(
        {"productId": product["id"], "name": product["name"], "price": product["price"], "quantity": 2, "size": "M"}
    )
    print_stage("CART AFTER ADD", cart)

    cart = await services.cart.update_cart_item(product["id"], 1)
    print_stage("CART AFTER QUANTITY UPDATE", cart)

    order = await services.orders.create_order(
        {
            "items": [{"productId": product["id"], "name": product["name"], "price": product["price"], "quantity": 1}],
            "shippingAddress": {
                "firstName": "Jane",
                "lastName": "Demo",
                "email": "jane@example.com",
                "address": "Storgatan 1",
                "city": "Stockholm",
                "postalCode": "111 22",
                "country": "SE",
            },
            "paymentMethod": "card",
            "shippingMethod": "standard",
        }
    )
    print_stage("ORDER CREATED", order)

    try:
        payment = await services.payments.process_payment({"amount": order["total"], "currency": "SEK"})
        print_stage("PAYMENT", payment.model_dump(exclude={"raw"}))
    except PaymentError as e:
        print_stage("PAYMENT FAILED (no local fallback)", str(e))

    await services.cart.clear_cart()
    subscription = await services.newsletter.subscribe("Jane@Example.com", "Jane")
    print_stage("NEWSLETTER SUBSCRIPTION", subscription)

    outcomes = [
        {"name": o.name, "delivered": o.delivered, "error": o.error} for o in services.notifications.outcomes
    ]
    print_stage("NOTIFICATIONS", outcomes)
    if not offline:
        print_stage("EMAILS RECORDED BY BACKEND", backend.state.sent_emails)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Storefront data-layer demo flow")
    parser.add_argument("--offline", action="store_true", help="Disable the backend and use the local store")
    args = parser.parse_args()
    asyncio.run(main(offline=args.offline))
