from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, HTTPException

from storefront.api.dependencies import get_store
from storefront.integrations.contracts.catalog import ProductFilter, filter_products

api = APIRouter()


@api.get("/products", tags=["Products"])
async def list_products(
    category: Optional[str] = None,
    featured: Optional[bool] = None,
    inStock: Optional[bool] = None,
    maxPrice: Optional[float] = None,
    store=Depends(get_store),
):
    product_filter = ProductFilter(category=category, featured=featured, in_stock=inStock, max_price=maxPrice)
    return filter_products(store.get_all_products(), product_filter)


@api.post("/products", tags=["Products"], status_code=201)
async def create_product(payload: Dict[str, Any] = Body(...), store=Depends(get_store)):
    if not payload.get("name"):
        raise HTTPException(status_code=400, detail="Product name is required")
    return store.create_product(payload)


@api.get("/products/{product_id}", tags=["Products"])
async def get_product(product_id: str, store=Depends(get_store)):
    product = store.get_product(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@api.put("/products/{product_id}", tags=["Products"])
async def update_product(product_id: str, payload: Dict[str, Any] = Body(...), store=Depends(get_store)):
    product = store.update_product(product_id, payload)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@api.delete("/products/{product_id}", tags=["Products"])
async def delete_product(product_id: str, store=Depends(get_store)):
    if not store.delete_product(product_id):
        raise HTTPException(status_code=404, detail="Product not found")
    return {"success": True, "id": product_id}
