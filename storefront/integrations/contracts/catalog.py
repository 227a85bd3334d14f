from dataclasses import dataclass
from typing import Any, Dict, List, Optional

"""
Product catalog contract: filters and helpers shared by the remote product
endpoints and the local mock store.

The remote backend applies the same filters server-side via query params
(category, featured); the local store applies them in-process with
filter_products().
"""


# ---------------------------------------------------------------------------
# Filters
# ---------------------------------------------------------------------------

@dataclass
class ProductFilter:
    """Optional filters when querying the product catalog."""
    category: Optional[str] = None
    featured: Optional[bool] = None
    in_stock: Optional[bool] = None
    max_price: Optional[float] = None

    def to_params(self) -> Dict[str, str]:
        """Query params understood by GET /api/products."""
        params: Dict[str, str] = {}
        if self.category is not None:
            params["category"] = self.category
        if self.featured is not None:
            params["featured"] = "true" if self.featured else "false"
        if self.in_stock is not None:
            params["inStock"] = "true" if self.in_stock else "false"
        if self.max_price is not None:
            params["maxPrice"] = str(self.max_price)
        return params


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def filter_products(products: List[Dict[str, Any]], f: ProductFilter) -> List[Dict[str, Any]]:
    """Apply a ProductFilter to a list of product records and return matching ones."""
    result = products

    if f.category is not None:
        wanted = f.category.lower()
        result = [p for p in result if str(p.get("category", "")).lower() == wanted]
    if f.featured is not None:
        result = [p for p in result if bool(p.get("featured")) == f.featured]
    if f.in_stock is not None:
        result = [p for p in result if bool(p.get("inStock")) == f.in_stock]
    if f.max_price is not None:
        result = [p for p in result if float(p.get("price", 0)) <= f.max_price]

    return result


def search_products(products: List[Dict[str, Any]], query: str) -> List[Dict[str, Any]]:
    """Case-insensitive substring match over product name and description."""
    needle = (query or "").strip().lower()
    if not needle:
        return list(products)
    return [
        p for p in products
        if needle in str(p.get("name", "")).lower() or needle in str(p.get("description", "")).lower()
    ]
