"""
Folio Backend - Blog Service
=============================

What:  Business logic for blog posts: slugs, visibility, cover images.
Who:   Called by the public blog routes and the admin listing route.

Rules:
    - The slug is derived from the title once, at creation. Renaming a post
      keeps its URL stable.
    - Slugs are unique. A second post whose title produces an existing slug
      is rejected by the store (DuplicateRecordError → 500).
    - Public reads only see published posts; the admin listing sees all.
    - On update the cover image is replaced only when a new file is sent.
    - Create and update commit inside the upload's staged scope, so a failed
      insert, update or commit discards the image that was just uploaded.
"""

import logging
import re
import uuid
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import ValidationError
from app.models.blog_post import BlogPost
from app.schemas.blog import BlogPostInput
from app.services.media_service import media_service
from app.services.record_store import RecordStore

logger = logging.getLogger(__name__)

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(title: str) -> str:
    """
    URL-safe slug: lowercase, runs of non-[a-z0-9] collapsed to "-", no edge dashes.

    Example:
        slugify("Hello, World! 2024") → "hello-world-2024"
    """
    return _NON_ALNUM.sub("-", title.lower()).strip("-")


blog_store: RecordStore[BlogPost] = RecordStore(BlogPost, resource="Blog post")


class BlogService:
    async def list_published(self, db: AsyncSession) -> List[BlogPost]:
        return await blog_store.find_many(db, {"published": True})

    async def list_all(self, db: AsyncSession) -> List[BlogPost]:
        return await blog_store.find_many(db)

    async def get_published(self, db: AsyncSession, slug: str) -> BlogPost:
        """Raises NotFoundError for unknown slugs and for drafts."""
        return await blog_store.find_by(db, slug=slug, published=True)

    async def create_post(
        self, db: AsyncSession, payload: BlogPostInput, image: Optional[bytes] = None
    ) -> BlogPost:
        """
        Create a post, uploading the cover image first when one is given.

        Raises:
            ValidationError: the title yields an empty slug
            MediaUploadError: the cover image could not be uploaded
            DuplicateRecordError: another post already uses the slug
        """
        slug = slugify(payload.title)
        if not slug:
            raise ValidationError(
                message="title must contain at least one letter or digit",
                field="title",
            )

        async with media_service.staged(image) as asset:
            post = await blog_store.create(
                db,
                {
                    **payload.model_dump(),
                    "image": asset.url if asset else "",
                    "slug": slug,
                },
            )
            await blog_store.commit(db)
        return post

    async def update_post(
        self,
        db: AsyncSession,
        post_id: uuid.UUID,
        payload: BlogPostInput,
        image: Optional[bytes] = None,
    ) -> BlogPost:
        """Full replace of the editable fields; the slug is left unchanged."""
        # Fail before uploading anything when the post does not exist.
        await blog_store.find_one(db, post_id)

        async with media_service.staged(image) as asset:
            fields = payload.model_dump()
            if asset:
                fields["image"] = asset.url
            post = await blog_store.update(db, post_id, fields)
            await blog_store.commit(db)
        return post

    async def delete_post(self, db: AsyncSession, post_id: uuid.UUID) -> None:
        await blog_store.delete(db, post_id)


blog_service = BlogService()
