from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from storefront.api.dependencies import get_store
from storefront.integrations.contracts.interfaces import ContactStatus

api = APIRouter()


class ContactRequest(BaseModel):
    name: str
    email: str
    subject: str = ""
    message: str


class ContactStatusUpdate(BaseModel):
    status: ContactStatus


@api.get("/contact", tags=["Contact"])
async def list_messages(store=Depends(get_store)):
    return store.get_all_messages()


@api.post("/contact", tags=["Contact"], status_code=201)
async def add_message(payload: ContactRequest, store=Depends(get_store)):
    return store.add_message(payload.model_dump())


@api.patch("/contact/{message_id}/status", tags=["Contact"])
async def update_message_status(message_id: str, payload: ContactStatusUpdate, store=Depends(get_store)):
    message = store.update_message_status(message_id, payload.status)
    if not message:
        raise HTTPException(status_code=404, detail="Message not found")
    return message
