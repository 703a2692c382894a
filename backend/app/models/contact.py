"""
Folio Backend - Contact SQLAlchemy Model
=========================================

What:  ORM model for the `contacts` table (contact-form submissions).
Who:   Written by ContactService on form submit; listed and deleted by operators.

Lifecycle:
    Created on submit, deleted explicitly, never updated.
    All fields are optional: the form is stored as sent.
"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Contact(Base):
    __tablename__ = "contacts"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    email: Mapped[Optional[str]] = mapped_column(String(320), nullable=True)
    message: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        comment="Submission time (UTC)",
    )

    __table_args__ = (
        Index("idx_contacts_created_at", created_at.desc()),
    )

    def __repr__(self) -> str:
        return f"<Contact(id={self.id}, email='{self.email}')>"
