"""
Folio Backend - BlogPost SQLAlchemy Model
==========================================

What:  ORM model for the `blog_posts` table.
Who:   Used by BlogService for CRUD operations and by Alembic for schema management.

Table Design:
    - slug: unique, derived from the title at creation time only
    - tags: ordered list of strings, stored as a JSON column
    - image: durable Cloudinary URL, "" when the post has no image
    - published: public endpoints only ever return rows with published = true

Query Patterns:
    - Public list:   WHERE published ORDER BY created_at DESC
    - Public detail: WHERE slug = :slug AND published
    - Admin list:    ORDER BY created_at DESC
"""

import uuid
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import JSON, Boolean, DateTime, Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class BlogPost(Base):
    """A blog article, optionally illustrated with one hosted image."""

    __tablename__ = "blog_posts"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    # ── Content ───────────────────────────────────────────────────────────
    title: Mapped[str] = mapped_column(String(300), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    excerpt: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    author: Mapped[str] = mapped_column(String(255), nullable=False)

    # ── Presentation ──────────────────────────────────────────────────────
    image: Mapped[str] = mapped_column(String(1024), nullable=False, default="")
    tags: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)

    # ── Visibility & Identity ─────────────────────────────────────────────
    published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    slug: Mapped[str] = mapped_column(
        String(320),
        nullable=False,
        unique=True,
        comment="URL-safe identifier derived from the title",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    __table_args__ = (
        Index("idx_blog_posts_created_at", created_at.desc()),
    )

    def __repr__(self) -> str:
        return f"<BlogPost(id={self.id}, slug='{self.slug}', published={self.published})>"
