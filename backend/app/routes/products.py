"""
Folio Backend - Product Route Handlers
=======================================

What:  Catalog listing and the editor's create/update/delete endpoints.
How:   Create and update are multipart/form-data with an optional `image` file.
"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, File, Form, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.common import ErrorResponse, MessageResponse, validate_input
from app.schemas.product import ProductInput, ProductResponse
from app.services.media_service import read_upload
from app.services.product_service import product_service

router = APIRouter(prefix="/api/products", tags=["Products"])


@router.get("", response_model=List[ProductResponse], summary="List products (newest first)")
async def list_products(db: AsyncSession = Depends(get_db_session)):
    return await product_service.list_products(db)


@router.post(
    "",
    status_code=201,
    response_model=ProductResponse,
    responses={400: {"description": "Missing or invalid fields", "model": ErrorResponse}},
    summary="Create a product",
)
async def create_product(
    name: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    db: AsyncSession = Depends(get_db_session),
):
    payload = validate_input(
        ProductInput, {"name": name, "category": category, "description": description}
    )
    return await product_service.create_product(db, payload, await read_upload(image))


@router.put(
    "/{product_id}",
    response_model=ProductResponse,
    responses={
        400: {"description": "Missing or invalid fields", "model": ErrorResponse},
        404: {"description": "Product not found", "model": ErrorResponse},
    },
    summary="Replace a product's fields (image only if a new file is sent)",
)
async def update_product(
    product_id: UUID,
    name: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    db: AsyncSession = Depends(get_db_session),
):
    payload = validate_input(
        ProductInput, {"name": name, "category": category, "description": description}
    )
    return await product_service.update_product(db, product_id, payload, await read_upload(image))


@router.delete(
    "/{product_id}",
    response_model=MessageResponse,
    responses={404: {"description": "Product not found", "model": ErrorResponse}},
    summary="Delete a product",
)
async def delete_product(
    product_id: UUID, db: AsyncSession = Depends(get_db_session)
) -> MessageResponse:
    await product_service.delete_product(db, product_id)
    return MessageResponse(message="Product deleted successfully")
