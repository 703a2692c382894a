"""
Folio Backend - JobPosting SQLAlchemy Model
============================================

What:  ORM model for the `job_postings` table.
Who:   Used by JobService for CRUD operations and by Alembic for schema management.

Table Design:
    - type: one of JOB_TYPES, default "Full-time" (validated in the schema layer,
      stored as a plain string)
    - requirements / benefits: JSON lists of strings
    - salary: JSON object {min, max, currency}; currency defaults to USD
    - is_active: public listing only shows active postings
"""

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy import JSON, Boolean, DateTime, Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base

JOB_TYPES = ("Full-time", "Part-time", "Contract", "Internship")


class JobPosting(Base):
    __tablename__ = "job_postings"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    title: Mapped[str] = mapped_column(String(300), nullable=False)
    company: Mapped[str] = mapped_column(String(255), nullable=False)
    location: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    type: Mapped[str] = mapped_column(String(32), nullable=False, default=JOB_TYPES[0])
    description: Mapped[str] = mapped_column(Text, nullable=False)

    requirements: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    benefits: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    salary: Mapped[Optional[Dict[str, Any]]] = mapped_column(JSON, nullable=True)

    application_deadline: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    apply_url: Mapped[str] = mapped_column(String(1024), nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    __table_args__ = (
        Index("idx_job_postings_created_at", created_at.desc()),
    )

    def __repr__(self) -> str:
        return f"<JobPosting(id={self.id}, title='{self.title}', is_active={self.is_active})>"
