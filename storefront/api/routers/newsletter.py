from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from storefront.api.dependencies import get_store

api = APIRouter()


class SubscribeRequest(BaseModel):
    email: str
    name: Optional[str] = None


class SubscriptionUpdate(BaseModel):
    subscribed: bool
    name: Optional[str] = None


@api.get("/newsletter", tags=["Newsletter"])
async def list_subscribers(store=Depends(get_store)):
    return store.get_all_subscribers()


@api.post("/newsletter", tags=["Newsletter"])
async def subscribe(payload: SubscribeRequest, store=Depends(get_store)):
    email = payload.email.strip().lower()
    if "@" not in email:
        raise HTTPException(status_code=400, detail="A valid email address is required")
    return store.subscribe(email, payload.name)


@api.get("/newsletter/{email}", tags=["Newsletter"])
async def get_subscriber(email: str, store=Depends(get_store)):
    subscriber = store.get_subscriber(email.strip().lower())
    if not subscriber:
        raise HTTPException(status_code=404, detail="Subscriber not found")
    return subscriber


@api.put("/newsletter/{email}", tags=["Newsletter"])
async def update_subscription(email: str, payload: SubscriptionUpdate, store=Depends(get_store)):
    address = email.strip().lower()
    if payload.subscribed:
        return store.subscribe(address, payload.name)
    subscriber = store.unsubscribe(address)
    if not subscriber:
        raise HTTPException(status_code=404, detail="Subscriber not found")
    return subscriber
