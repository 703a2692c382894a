"""
Folio Backend - Product Service
================================

What:  Catalog CRUD with an optional product image.
How:   Same image rules as blog posts: "" when created without a file,
       unchanged when updated without a file.
       Writes commit inside the staged upload scope (see BlogService).
"""

import uuid
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.product import Product
from app.schemas.product import ProductInput
from app.services.media_service import media_service
from app.services.record_store import RecordStore

product_store: RecordStore[Product] = RecordStore(Product, resource="Product")


class ProductService:
    async def list_products(self, db: AsyncSession) -> List[Product]:
        return await product_store.find_many(db)

    async def create_product(
        self, db: AsyncSession, payload: ProductInput, image: Optional[bytes] = None
    ) -> Product:
        async with media_service.staged(image) as asset:
            product = await product_store.create(
                db, {**payload.model_dump(), "image": asset.url if asset else ""}
            )
            await product_store.commit(db)
        return product

    async def update_product(
        self,
        db: AsyncSession,
        product_id: uuid.UUID,
        payload: ProductInput,
        image: Optional[bytes] = None,
    ) -> Product:
        await product_store.find_one(db, product_id)

        async with media_service.staged(image) as asset:
            fields = payload.model_dump()
            if asset:
                fields["image"] = asset.url
            product = await product_store.update(db, product_id, fields)
            await product_store.commit(db)
        return product

    async def delete_product(self, db: AsyncSession, product_id: uuid.UUID) -> None:
        await product_store.delete(db, product_id)


product_service = ProductService()
