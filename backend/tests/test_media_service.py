"""
Folio Backend - Media Service Unit Tests
=========================================

What:  Cloudinary upload wrapper: size limit, error mapping, staged cleanup.
How:   The `cloudinary` module is patched inside app.services.media_service;
       no network calls are made.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from app.config import settings
from app.exceptions import MediaUploadError, ValidationError
from app.services.media_service import MediaService, UploadedAsset, read_upload

UPLOAD_RESULT = {
    "secure_url": "https://res.cloudinary.com/folio/image/upload/v1/abc.png",
    "public_id": "abc",
    "resource_type": "image",
}


class TestUpload:
    def setup_method(self):
        self.service = MediaService()

    @pytest.mark.asyncio
    async def test_upload_returns_secure_url(self):
        with patch("app.services.media_service.cloudinary") as mock_cloudinary:
            mock_cloudinary.uploader.upload.return_value = UPLOAD_RESULT

            asset = await self.service.upload(b"image bytes")

        assert asset == UploadedAsset(url=UPLOAD_RESULT["secure_url"], public_id="abc")
        _, kwargs = mock_cloudinary.uploader.upload.call_args
        assert kwargs["resource_type"] == "auto"

    @pytest.mark.asyncio
    async def test_provider_failure_becomes_media_upload_error(self):
        with patch("app.services.media_service.cloudinary") as mock_cloudinary:
            mock_cloudinary.uploader.upload.side_effect = RuntimeError("Invalid image file")

            with pytest.raises(MediaUploadError) as exc_info:
                await self.service.upload(b"image bytes")

        assert exc_info.value.context["error_type"] == "RuntimeError"

    @pytest.mark.asyncio
    async def test_oversized_file_rejected_before_upload(self):
        with patch.object(settings, "max_upload_size", 4), \
             patch("app.services.media_service.cloudinary") as mock_cloudinary:
            with pytest.raises(ValidationError) as exc_info:
                await self.service.upload(b"12345")

        assert exc_info.value.field == "image"
        mock_cloudinary.uploader.upload.assert_not_called()


class TestDiscard:
    @pytest.mark.asyncio
    async def test_discard_destroys_asset(self):
        service = MediaService()
        with patch("app.services.media_service.cloudinary") as mock_cloudinary:
            await service.discard(UploadedAsset(url="https://x", public_id="abc"))

        mock_cloudinary.uploader.destroy.assert_called_once_with("abc", resource_type="image")

    @pytest.mark.asyncio
    async def test_discard_failure_is_swallowed(self):
        service = MediaService()
        with patch("app.services.media_service.cloudinary") as mock_cloudinary:
            mock_cloudinary.uploader.destroy.side_effect = RuntimeError("network down")
            await service.discard(UploadedAsset(url="https://x", public_id="abc"))


class TestStaged:
    def setup_method(self):
        self.service = MediaService()
        self.asset = UploadedAsset(url="https://x", public_id="abc")

    @pytest.mark.asyncio
    async def test_no_content_yields_none(self):
        with patch.object(self.service, "upload", AsyncMock()) as upload:
            async with self.service.staged(None) as asset:
                assert asset is None
        upload.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_success_keeps_asset(self):
        with patch.object(self.service, "upload", AsyncMock(return_value=self.asset)), \
             patch.object(self.service, "discard", AsyncMock()) as discard:
            async with self.service.staged(b"img") as asset:
                assert asset == self.asset
        discard.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_failure_discards_and_reraises(self):
        with patch.object(self.service, "upload", AsyncMock(return_value=self.asset)), \
             patch.object(self.service, "discard", AsyncMock()) as discard:
            with pytest.raises(LookupError):
                async with self.service.staged(b"img"):
                    raise LookupError("insert failed")
        discard.assert_awaited_once_with(self.asset)


class TestReadUpload:
    @pytest.mark.asyncio
    async def test_missing_file(self):
        assert await read_upload(None) is None

    @pytest.mark.asyncio
    async def test_empty_file_part(self):
        upload = MagicMock(filename="")
        upload.close = AsyncMock()
        assert await read_upload(upload) is None
        upload.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_reads_content(self):
        upload = MagicMock(filename="cover.png", size=3)
        upload.read = AsyncMock(return_value=b"png")
        upload.close = AsyncMock()
        assert await read_upload(upload) == b"png"

    @pytest.mark.asyncio
    async def test_unknown_size_is_read(self):
        upload = MagicMock(filename="cover.png", size=None)
        upload.read = AsyncMock(return_value=b"png")
        upload.close = AsyncMock()
        assert await read_upload(upload) == b"png"

    @pytest.mark.asyncio
    async def test_oversized_declared_size_rejected_before_read(self):
        upload = MagicMock(filename="huge.png", size=settings.max_upload_size * 50)
        upload.read = AsyncMock(return_value=b"never read")
        upload.close = AsyncMock()

        with pytest.raises(ValidationError) as exc_info:
            await read_upload(upload)

        assert exc_info.value.field == "image"
        upload.read.assert_not_awaited()
        upload.close.assert_awaited_once()
