"""
Folio Backend - Media Upload Service
=====================================

What:  Uploads images to Cloudinary and returns their durable HTTPS URL.
How:   The Cloudinary SDK is synchronous; each call runs in a worker thread
       (asyncio.to_thread) so the event loop keeps serving other requests.
Who:   Called by BlogService and ProductService for the optional `image` field.
When:  Before the record is persisted; the response waits for the upload.

Upload lifecycle:
    1. Route reads the optional multipart file → read_upload()
    2. Size check on the declared part size, then on the bytes read → validate()
    3. Cloudinary upload (resource_type="auto") → UploadedAsset(secure_url, public_id)
    4. Service persists and commits the record inside `staged()`
    5. If the insert or the commit fails, the asset is destroyed again (best effort)

    A failure after step 4 (for example a dropped connection while the
    response is sent) cannot be compensated; the record is already durable.
"""

import asyncio
import io
import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator, Optional

import cloudinary
import cloudinary.uploader
from fastapi import UploadFile

from app.config import settings
from app.exceptions import MediaUploadError, ValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UploadedAsset:
    """A file stored on the media host."""

    url: str
    public_id: str
    resource_type: str = "image"


def check_upload_size(size: int) -> None:
    """
    Raises:
        ValidationError if `size` bytes exceeds settings.max_upload_size
    """
    if size > settings.max_upload_size:
        max_mb = settings.max_upload_size / (1024 * 1024)
        raise ValidationError(
            message=f"Image exceeds the maximum size of {max_mb:.0f}MB",
            field="image",
            context={"size": size, "max_size": settings.max_upload_size},
        )


async def read_upload(file: Optional[UploadFile]) -> Optional[bytes]:
    """
    Read an optional multipart file field.

    Returns None when no file was sent. Browsers submit an empty part
    (filename="") for an untouched file input; that also counts as no file.

    The declared part size is checked before reading, so an oversized file
    is rejected without being loaded into memory.

    Raises:
        ValidationError: the part is larger than settings.max_upload_size
    """
    if file is None:
        return None
    try:
        if not file.filename:
            return None
        if file.size is not None:
            check_upload_size(file.size)
        content = await file.read()
        return content or None
    finally:
        await file.close()


class MediaService:
    """
    Thin wrapper around the Cloudinary uploader.

    Configures the SDK once from settings; the credentials do not change
    at runtime.
    """

    def __init__(self):
        if settings.cloudinary_configured:
            cloudinary.config(
                cloud_name=settings.cloudinary_cloud_name,
                api_key=settings.cloudinary_api_key,
                api_secret=settings.cloudinary_api_secret,
                secure=True,
            )
        else:
            logger.warning("Cloudinary credentials are not configured; image uploads will fail")

    def validate(self, content: bytes) -> None:
        """Size check on the bytes actually read (the declared size can be absent)."""
        check_upload_size(len(content))

    async def upload(self, content: bytes) -> UploadedAsset:
        """
        Upload raw bytes and return the hosted asset.

        Raises:
            ValidationError: file too large (→ 400)
            MediaUploadError: Cloudinary rejected or failed the upload (→ 500)
        """
        self.validate(content)

        try:
            result = await asyncio.to_thread(
                cloudinary.uploader.upload,
                io.BytesIO(content),
                resource_type="auto",
            )
        except Exception as e:
            logger.error("Cloudinary upload error: %s", str(e), exc_info=True)
            raise MediaUploadError(context={"error_type": type(e).__name__, "size": len(content)})

        asset = UploadedAsset(
            url=result["secure_url"],
            public_id=result["public_id"],
            resource_type=result.get("resource_type", "image"),
        )
        logger.info("Uploaded %d bytes to Cloudinary as %s", len(content), asset.public_id)
        return asset

    async def discard(self, asset: UploadedAsset) -> None:
        """
        Delete an uploaded asset. Best effort: failures are logged, not raised,
        so the original error reaches the client unchanged.
        """
        try:
            await asyncio.to_thread(
                cloudinary.uploader.destroy,
                asset.public_id,
                resource_type=asset.resource_type,
            )
            logger.info("Discarded orphaned upload %s", asset.public_id)
        except Exception as e:
            logger.warning("Failed to discard upload %s: %s", asset.public_id, str(e))

    @asynccontextmanager
    async def staged(self, content: Optional[bytes]) -> AsyncIterator[Optional[UploadedAsset]]:
        """
        Upload `content` (if any) for the duration of a persist step.

        Usage:
            async with media_service.staged(image) as asset:
                await store.create(db, {..., "image": asset.url if asset else ""})

        If the block raises, the asset is discarded and the error re-raised.
        """
        asset = await self.upload(content) if content else None
        try:
            yield asset
        except Exception:
            if asset is not None:
                await self.discard(asset)
            raise


media_service = MediaService()
