"""
Folio Backend - Chat Message Schemas
=====================================

The wire field is `from`; Python code uses `sender`.
"""

from typing import Literal

from pydantic import Field

from app.schemas.common import InputModel, RecordResponse

ChatSender = Literal["user", "admin", "bot"]


class ChatMessageCreate(InputModel):
    """Body of POST /api/chat, e.g. {"from": "user", "text": "Hi there"}."""

    sender: ChatSender = Field(alias="from")
    text: str = Field(min_length=1)


class ChatMessageResponse(RecordResponse):
    sender: str = Field(serialization_alias="from")
    text: str
