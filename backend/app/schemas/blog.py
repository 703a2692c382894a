"""
Folio Backend - Blog Post Schemas
==================================

What:  Request/response contracts for blog posts.
How:   BlogPostInput is built from multipart form fields (the admin editor
       uploads the cover image in the same request), so tags arrive as a
       comma-separated string and `published` as the string "true"/"false".

Example form:
    title=Hello, World!  content=...  author=Ada  tags=python, web  published=true
    → BlogPostInput(title="Hello, World!", tags=["python", "web"], published=True, ...)
"""

from typing import Any, List, Optional

from pydantic import Field, field_validator

from app.schemas.common import InputModel, RecordResponse, coerce_flag, split_list


class BlogPostInput(InputModel):
    """Editable fields of a blog post (create and full-replace update)."""

    title: str = Field(min_length=1, max_length=300)
    content: str = Field(min_length=1)
    author: str = Field(min_length=1, max_length=255)
    excerpt: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    published: bool = False

    @field_validator("tags", mode="before")
    @classmethod
    def normalize_tags(cls, v: Any) -> List[str]:
        return split_list(v)

    @field_validator("published", mode="before")
    @classmethod
    def normalize_published(cls, v: Any) -> bool:
        return coerce_flag(v)


class BlogPostResponse(RecordResponse):
    title: str
    content: str
    excerpt: Optional[str] = None
    author: str
    image: str = ""
    tags: List[str] = Field(default_factory=list)
    published: bool
    slug: str
