"""
Cart contract.

The local store keeps the cart as a flat list of item records; the remote
backend keeps it as an object {id, items, total, itemCount}. The pure helpers
below derive a new item list from a snapshot and are used by both sides, so a
quantity update means the same thing whichever source serves the call.

Items are passed through as given: only the line id, currency and quantity
are filled in, and any other field (including a numeric or missing
productId) is kept unchecked.
"""

from __future__ import annotations

import copy
from typing import Any, Dict, List, Optional, Tuple

CartKey = Tuple[Any, Any, Any, Any]


def _number(value: Any, default: float = 0.0) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def item_quantity(item: Dict[str, Any]) -> int:
    return int(_number(item.get("quantity", 1), 0.0))


def line_amount(item: Dict[str, Any]) -> float:
    """price * quantity, with unparseable values counted as zero."""
    return _number(item.get("price", 0)) * item_quantity(item)


def normalize_cart_item(item: Dict[str, Any], default_currency: str = "SEK") -> Dict[str, Any]:
    """Fill in the line id, quantity and currency of an incoming cart item."""
    data = copy.deepcopy(dict(item))
    if not data.get("id"):
        parts = (data.get("productId"), data.get("size"), data.get("color"))
        data["id"] = "-".join(str(p) for p in parts if p not in (None, ""))
    data.setdefault("quantity", 1)
    data.setdefault("currency", default_currency)
    return data


def cart_item_key(item: Dict[str, Any]) -> CartKey:
    """A cart line is identified by product, variant and source."""
    return (item.get("productId"), item.get("size"), item.get("color"), item.get("source"))


def matches_ref(item: Dict[str, Any], ref: Any) -> bool:
    ref = str(ref)
    return any(item.get(field) is not None and str(item.get(field)) == ref for field in ("id", "productId"))


def cart_items_of(cart: Any) -> List[Dict[str, Any]]:
    """Return the item list of either cart representation."""
    if isinstance(cart, list):
        return cart
    if isinstance(cart, dict):
        items = cart.get("items")
        return items if isinstance(items, list) else []
    return []


def cart_totals(items: List[Dict[str, Any]]) -> Dict[str, float]:
    lines = [i for i in items if isinstance(i, dict)]
    total = sum(line_amount(i) for i in lines)
    item_count = sum(item_quantity(i) for i in lines)
    return {"total": round(total, 2), "itemCount": item_count}


def with_item_added(items: List[Dict[str, Any]], item: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Merge item into the list, adding quantities on a key match."""
    result = copy.deepcopy(items)
    key = cart_item_key(item)
    for existing in result:
        if isinstance(existing, dict) and cart_item_key(existing) == key:
            existing["quantity"] = item_quantity(existing) + item_quantity(item)
            return result
    new_item = dict(item)
    new_item.setdefault("quantity", 1)
    result.append(new_item)
    return result


def with_quantity(items: List[Dict[str, Any]], ref: str, quantity: int) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
    """
    Set the quantity of the first line matching ref (line id or productId).

    A quantity <= 0 drops the line. Returns the new list and the touched line
    (None when nothing matched, in which case the list is unchanged).
    """
    result = copy.deepcopy(items)
    for index, existing in enumerate(result):
        if not isinstance(existing, dict) or not matches_ref(existing, ref):
            continue
        if quantity <= 0:
            return result[:index] + result[index + 1:], existing
        existing["quantity"] = quantity
        return result, existing
    return result, None


def build_remote_cart(cart_id: Optional[str], items: List[Dict[str, Any]], user_id: Optional[str] = None) -> Dict[str, Any]:
    """Object shape written back to PUT /api/cart."""
    payload: Dict[str, Any] = {"id": cart_id, "items": items, **cart_totals(items)}
    if user_id is not None:
        payload["userId"] = user_id
    return payload
