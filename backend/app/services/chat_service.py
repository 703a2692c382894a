"""
Folio Backend - Chat Service
=============================

Append-only message log, listed oldest first.
"""

import uuid
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.chat_message import ChatMessage
from app.schemas.chat import ChatMessageCreate
from app.services.record_store import RecordStore

chat_store: RecordStore[ChatMessage] = RecordStore(ChatMessage, resource="Chat message")


class ChatService:
    async def list_messages(self, db: AsyncSession) -> List[ChatMessage]:
        return await chat_store.find_many(db, descending=False)

    async def post_message(self, db: AsyncSession, payload: ChatMessageCreate) -> ChatMessage:
        return await chat_store.create(db, {"sender": payload.sender, "text": payload.text})

    async def delete_message(self, db: AsyncSession, message_id: uuid.UUID) -> None:
        await chat_store.delete(db, message_id)


chat_service = ChatService()
