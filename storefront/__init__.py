"""
Storefront data-access layer.

Domain services that serve products, cart, orders, newsletter and contact
data from a hosted backend when it is reachable, and from a local seeded
store when it is not. Payments are remote-only.
"""

__version__ = "1.0.0"
