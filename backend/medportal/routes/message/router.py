from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List, Optional

from medportal.db.session import get_store
from medportal.db.store import EntityStore
from medportal.db.models.message import MessageModel
from medportal.db.crud.message import (
    create_message,
    get_messages_by_user,
    mark_message_as_read,
)
from medportal.routes.params import require_param
from medportal.schemas.message import MessageCreate

router = APIRouter(prefix="/messages", tags=["messages"])


@router.get("", response_model=List[MessageModel])
async def get_messages_route(
    user_id: Optional[int] = Query(None, alias="userId"),
    store: EntityStore = Depends(get_store),
):
    """Inbox and outbox of a user"""
    user_id = require_param("userId", user_id)
    return get_messages_by_user(store, user_id)


@router.post("", response_model=MessageModel, status_code=201)
async def create_message_route(
    message: MessageCreate,
    store: EntityStore = Depends(get_store),
):
    return create_message(store, message)


@router.patch("/{message_id}/read", response_model=MessageModel)
async def mark_message_read_route(
    message_id: int,
    store: EntityStore = Depends(get_store),
):
    message = mark_message_as_read(store, message_id)
    if not message:
        raise HTTPException(status_code=404, detail="Message not found")
    return message
