"""
Cart endpoints.

The backend keeps one cart object per user ({id, items, total, itemCount});
anonymous callers share the "guest" cart. PUT replaces the whole object and
recomputes the totals from the submitted items.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from storefront.api.dependencies import get_carts
from storefront.integrations.contracts.cart import build_remote_cart

api = APIRouter()

GUEST_CART = "guest"


class CartPayload(BaseModel):
    id: Optional[str] = None
    user_id: Optional[str] = Field(default=None, alias="userId")
    items: List[Dict[str, Any]] = Field(default_factory=list)


def _empty_cart(owner: str, user_id: Optional[str]) -> Dict[str, Any]:
    return build_remote_cart(f"cart_{owner}", [], user_id)


@api.get("/cart", tags=["Cart"])
async def get_cart(userId: Optional[str] = None, carts=Depends(get_carts)):
    owner = userId or GUEST_CART
    return carts.get(owner) or _empty_cart(owner, userId)


@api.put("/cart", tags=["Cart"])
async def replace_cart(payload: CartPayload, carts=Depends(get_carts)):
    owner = payload.user_id or GUEST_CART
    cart = build_remote_cart(payload.id or f"cart_{owner}", payload.items, payload.user_id)
    carts[owner] = cart
    return cart
