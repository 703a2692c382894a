"""
Folio Backend - Product Schemas
================================

What:  Request/response contracts for catalog products (multipart forms).
"""

from pydantic import Field

from app.schemas.common import InputModel, RecordResponse


class ProductInput(InputModel):
    """Editable fields of a product (create and full-replace update)."""

    name: str = Field(min_length=1, max_length=255)
    category: str = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1)


class ProductResponse(RecordResponse):
    name: str
    category: str
    description: str
    image: str = ""
