"""Create content tables

Revision ID: 001
Revises: None
Create Date: 2024-05-01 00:00:00.000000+00:00

What:  Creates contacts, blog_posts, job_postings, products and chat_messages.
How:   UUID primary keys and TIMESTAMP WITH TIME ZONE creation times; list and
       object fields (tags, requirements, benefits, salary) are JSON columns.

Rollback: downgrade() drops all five tables (destructive).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id_column() -> sa.Column:
    return sa.Column(
        "id",
        postgresql.UUID(as_uuid=True),
        server_default=sa.text("gen_random_uuid()"),
        nullable=False,
    )


def _created_at_column() -> sa.Column:
    return sa.Column(
        "created_at",
        sa.TIMESTAMP(timezone=True),
        server_default=sa.text("CURRENT_TIMESTAMP"),
        nullable=False,
        comment="Creation time (UTC); serialized as `date`",
    )


def upgrade() -> None:
    # ── contacts ──────────────────────────────────────────────────────────
    op.create_table(
        "contacts",
        _id_column(),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("email", sa.String(320), nullable=True),
        sa.Column("message", sa.Text(), nullable=True),
        _created_at_column(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_contacts_created_at", "contacts", [sa.text("created_at DESC")])

    # ── blog_posts ────────────────────────────────────────────────────────
    op.create_table(
        "blog_posts",
        _id_column(),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("excerpt", sa.Text(), nullable=True),
        sa.Column("author", sa.String(255), nullable=False),
        sa.Column("image", sa.String(1024), nullable=False, server_default=sa.text("''")),
        sa.Column("tags", sa.JSON(), nullable=False, server_default=sa.text("'[]'")),
        sa.Column("published", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column(
            "slug",
            sa.String(320),
            nullable=False,
            comment="URL-safe identifier derived from the title",
        ),
        _created_at_column(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug", name="uq_blog_posts_slug"),
    )
    op.create_index("idx_blog_posts_created_at", "blog_posts", [sa.text("created_at DESC")])

    # ── job_postings ──────────────────────────────────────────────────────
    op.create_table(
        "job_postings",
        _id_column(),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("company", sa.String(255), nullable=False),
        sa.Column("location", sa.String(255), nullable=True),
        sa.Column("type", sa.String(32), nullable=False, server_default=sa.text("'Full-time'")),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("requirements", sa.JSON(), nullable=False, server_default=sa.text("'[]'")),
        sa.Column("benefits", sa.JSON(), nullable=False, server_default=sa.text("'[]'")),
        sa.Column("salary", sa.JSON(), nullable=True),
        sa.Column("application_deadline", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("apply_url", sa.String(1024), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        _created_at_column(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_job_postings_created_at", "job_postings", [sa.text("created_at DESC")])

    # ── products ──────────────────────────────────────────────────────────
    op.create_table(
        "products",
        _id_column(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("category", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("image", sa.String(1024), nullable=False, server_default=sa.text("''")),
        _created_at_column(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_products_created_at", "products", [sa.text("created_at DESC")])

    # ── chat_messages ─────────────────────────────────────────────────────
    # Read oldest first, so the index is ascending
    op.create_table(
        "chat_messages",
        _id_column(),
        sa.Column("sender", sa.String(16), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        _created_at_column(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_chat_messages_created_at", "chat_messages", ["created_at"])


def downgrade() -> None:
    """Drop every content table. All data is lost."""
    for table in ("chat_messages", "products", "job_postings", "blog_posts", "contacts"):
        op.drop_index(f"idx_{table}_created_at", table_name=table)
        op.drop_table(table)
