"""
Folio Backend - Blog Route Handlers
====================================

What:  Public blog reads and the editor's create/update/delete endpoints.
How:   Create and update are multipart/form-data so the optional cover image
       (field name `image`) travels with the post fields.

Request Flow (POST /api/blog):
    1. FastAPI parses the multipart form and the optional file
    2. Form values are validated into BlogPostInput (tags split, flag coerced)
    3. BlogService uploads the image (if any), derives the slug and stores the post
    4. 201 Created with the stored post
"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, File, Form, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.blog import BlogPostInput, BlogPostResponse
from app.schemas.common import ErrorResponse, MessageResponse, validate_input
from app.services.blog_service import blog_service
from app.services.media_service import read_upload

router = APIRouter(prefix="/api/blog", tags=["Blog"])


@router.get(
    "",
    response_model=List[BlogPostResponse],
    summary="List published posts (newest first)",
)
async def list_posts(db: AsyncSession = Depends(get_db_session)):
    return await blog_service.list_published(db)


@router.get(
    "/{slug}",
    response_model=BlogPostResponse,
    responses={404: {"description": "No published post with this slug", "model": ErrorResponse}},
    summary="Get a published post by slug",
)
async def get_post(slug: str, db: AsyncSession = Depends(get_db_session)):
    return await blog_service.get_published(db, slug)


@router.post(
    "",
    status_code=201,
    response_model=BlogPostResponse,
    responses={
        400: {"description": "Missing or invalid fields", "model": ErrorResponse},
        500: {"description": "Upload or storage failed (including duplicate slug)", "model": ErrorResponse},
    },
    summary="Create a blog post",
)
async def create_post(
    title: Optional[str] = Form(None),
    content: Optional[str] = Form(None),
    author: Optional[str] = Form(None),
    excerpt: Optional[str] = Form(None),
    tags: Optional[str] = Form(None),
    published: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    db: AsyncSession = Depends(get_db_session),
):
    payload = validate_input(
        BlogPostInput,
        {
            "title": title,
            "content": content,
            "author": author,
            "excerpt": excerpt,
            "tags": tags,
            "published": published,
        },
    )
    image_content = await read_upload(image)
    return await blog_service.create_post(db, payload, image_content)


@router.put(
    "/{post_id}",
    response_model=BlogPostResponse,
    responses={
        400: {"description": "Missing or invalid fields", "model": ErrorResponse},
        404: {"description": "Blog post not found", "model": ErrorResponse},
    },
    summary="Replace a blog post's fields (image only if a new file is sent)",
)
async def update_post(
    post_id: UUID,
    title: Optional[str] = Form(None),
    content: Optional[str] = Form(None),
    author: Optional[str] = Form(None),
    excerpt: Optional[str] = Form(None),
    tags: Optional[str] = Form(None),
    published: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    db: AsyncSession = Depends(get_db_session),
):
    payload = validate_input(
        BlogPostInput,
        {
            "title": title,
            "content": content,
            "author": author,
            "excerpt": excerpt,
            "tags": tags,
            "published": published,
        },
    )
    image_content = await read_upload(image)
    return await blog_service.update_post(db, post_id, payload, image_content)


@router.delete(
    "/{post_id}",
    response_model=MessageResponse,
    responses={404: {"description": "Blog post not found", "model": ErrorResponse}},
    summary="Delete a blog post",
)
async def delete_post(post_id: UUID, db: AsyncSession = Depends(get_db_session)) -> MessageResponse:
    await blog_service.delete_post(db, post_id)
    return MessageResponse(message="Blog post deleted successfully")
