from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, HTTPException
from pydantic import BaseModel

from storefront.api.dependencies import get_store
from storefront.integrations.contracts.interfaces import OrderStatus

api = APIRouter()


class OrderStatusUpdate(BaseModel):
    status: OrderStatus


@api.get("/orders", tags=["Orders"])
async def list_orders(userId: Optional[str] = None, store=Depends(get_store)):
    return store.get_all_orders(userId)


@api.post("/orders", tags=["Orders"], status_code=201)
async def create_order(payload: Dict[str, Any] = Body(...), store=Depends(get_store)):
    if not payload.get("items"):
        raise HTTPException(status_code=400, detail="Order must contain at least one item")
    return store.create_order(payload)


@api.get("/orders/{order_id}", tags=["Orders"])
async def get_order(order_id: str, store=Depends(get_store)):
    order = store.get_order(order_id)
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return order


@api.put("/orders/{order_id}", tags=["Orders"])
async def update_order(order_id: str, payload: Dict[str, Any] = Body(...), store=Depends(get_store)):
    try:
        order = store.update_order(order_id, payload)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return order


@api.patch("/orders/{order_id}/status", tags=["Orders"])
async def update_order_status(order_id: str, payload: OrderStatusUpdate, store=Depends(get_store)):
    order = store.update_order_status(order_id, payload.status)
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return order
