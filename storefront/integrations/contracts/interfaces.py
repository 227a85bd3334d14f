from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class OrderStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class ContactStatus(str, Enum):
    NEW = "new"
    PENDING = "pending"
    READ = "read"
    REPLIED = "replied"


# ---------------------------------------------------------------------------
# Shared record models (camelCase on the wire)
# ---------------------------------------------------------------------------

class _Record(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")


class Product(_Record):
    id: str
    name: str
    description: str = ""
    price: float
    original_price: Optional[float] = Field(default=None, alias="originalPrice")
    images: List[str] = Field(default_factory=list)
    category: str = ""
    subcategory: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    sizes: List[str] = Field(default_factory=list)
    colors: List[str] = Field(default_factory=list)
    in_stock: bool = Field(default=True, alias="inStock")
    stock_quantity: Optional[int] = Field(default=None, alias="stockQuantity")
    featured: bool = False
    is_new: bool = Field(default=False, alias="new")
    rating: float = 0.0
    review_count: int = Field(default=0, alias="reviewCount")
    created_at: Optional[str] = Field(default=None, alias="createdAt")
    updated_at: Optional[str] = Field(default=None, alias="updatedAt")


class CartItem(_Record):
    id: str
    product_id: str = Field(alias="productId")
    name: str = ""
    price: float = 0.0
    quantity: int = Field(default=1, ge=0)
    size: Optional[str] = None
    color: Optional[str] = None
    image: str = ""
    currency: str = "SEK"
    source: Optional[str] = None


class ShippingAddress(_Record):
    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(default="", alias="lastName")
    email: str = ""
    phone: Optional[str] = None
    address: str = ""
    city: str = ""
    postal_code: str = Field(default="", alias="postalCode")
    country: str = ""


class OrderItem(_Record):
    """Price/variant snapshot taken at purchase time."""

    model_config = ConfigDict(populate_by_name=True, extra="allow", frozen=True)

    product_id: str = Field(alias="productId")
    name: str = ""
    price: float = 0.0
    quantity: int = Field(default=1, ge=0)
    size: Optional[str] = None
    color: Optional[str] = None
    image: Optional[str] = None


class Order(_Record):
    id: str
    order_number: Optional[str] = Field(default=None, alias="orderNumber")
    user_id: Optional[str] = Field(default=None, alias="userId")
    items: List[OrderItem] = Field(default_factory=list)
    shipping_address: Optional[ShippingAddress] = Field(default=None, alias="shippingAddress")
    payment_method: Optional[str] = Field(default=None, alias="paymentMethod")
    shipping_method: Optional[str] = Field(default=None, alias="shippingMethod")
    status: OrderStatus = OrderStatus.PENDING
    total: float = 0.0
    shipping: float = 0.0
    tax: float = 0.0
    created_at: Optional[str] = Field(default=None, alias="createdAt")
    updated_at: Optional[str] = Field(default=None, alias="updatedAt")


class NewsletterSubscription(_Record):
    id: str
    email: str
    name: Optional[str] = None
    subscribed: bool = True
    created_at: Optional[str] = Field(default=None, alias="createdAt")
    updated_at: Optional[str] = Field(default=None, alias="updatedAt")


class ContactMessage(_Record):
    id: str
    name: str
    email: str
    subject: str = ""
    message: str = ""
    status: ContactStatus = ContactStatus.NEW
    created_at: Optional[str] = Field(default=None, alias="createdAt")


# ---------------------------------------------------------------------------
# Abstract persistence interface
# ---------------------------------------------------------------------------

class KeyValueStorage(ABC):
    """Browser-localStorage-like string storage used for the persisted cart."""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Return the stored string, or None when the key is absent."""

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store a string under key, replacing any previous value."""

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Delete key. Removing an absent key is a no-op."""
