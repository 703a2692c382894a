"""
Folio Backend - Chat Route Handlers
====================================

What:  The chat log: list (oldest first), post, delete.
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.chat import ChatMessageCreate, ChatMessageResponse
from app.schemas.common import ErrorResponse, MessageResponse
from app.services.chat_service import chat_service

router = APIRouter(prefix="/api/chat", tags=["Chat"])


@router.get("", response_model=List[ChatMessageResponse], summary="List chat messages (oldest first)")
async def list_messages(db: AsyncSession = Depends(get_db_session)):
    return await chat_service.list_messages(db)


@router.post(
    "",
    status_code=201,
    response_model=ChatMessageResponse,
    responses={400: {"description": "Unknown sender or empty text", "model": ErrorResponse}},
    summary="Post a chat message",
)
async def post_message(payload: ChatMessageCreate, db: AsyncSession = Depends(get_db_session)):
    return await chat_service.post_message(db, payload)


@router.delete(
    "/{message_id}",
    response_model=MessageResponse,
    responses={404: {"description": "Chat message not found", "model": ErrorResponse}},
    summary="Delete a chat message",
)
async def delete_message(
    message_id: UUID, db: AsyncSession = Depends(get_db_session)
) -> MessageResponse:
    await chat_service.delete_message(db, message_id)
    return MessageResponse(message="Chat message deleted successfully")
