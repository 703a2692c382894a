"""
Folio Backend - ChatMessage SQLAlchemy Model
=============================================

What:  ORM model for the `chat_messages` table.
How:   Messages are append-only (created and deleted, never edited) and are
       listed oldest first for chronological display.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base

CHAT_SENDERS = ("user", "admin", "bot")


class ChatMessage(Base):
    __tablename__ = "chat_messages"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    # "from" is a Python keyword; the API exposes this column as "from".
    sender: Mapped[str] = mapped_column(String(16), nullable=False)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    __table_args__ = (
        Index("idx_chat_messages_created_at", created_at),
    )

    def __repr__(self) -> str:
        return f"<ChatMessage(id={self.id}, sender='{self.sender}')>"
