"""
Folio Backend - Product Endpoint Tests
=======================================

What:  /api/products over HTTP (multipart forms with an optional image).
"""

import uuid

import pytest

from app.exceptions import MediaUploadError
from app.services.media_service import UploadedAsset

PRODUCT_FORM = {"name": "Folio Pro", "category": "Software", "description": "Publishing suite"}


class TestProducts:
    @pytest.mark.asyncio
    async def test_create_and_list_newest_first(self, test_client):
        for name in ("Basic", "Pro"):
            response = await test_client.post("/api/products", data={**PRODUCT_FORM, "name": name})
            assert response.status_code == 201

        body = (await test_client.get("/api/products")).json()

        assert [p["name"] for p in body] == ["Pro", "Basic"]
        assert body[0]["image"] == ""
        assert set(body[0]) == {"_id", "date", "name", "category", "description", "image"}

    @pytest.mark.asyncio
    async def test_missing_field(self, test_client):
        response = await test_client.post("/api/products", data={"name": "Folio Pro"})
        assert response.status_code == 400
        assert "category" in response.json()["message"]

    @pytest.mark.asyncio
    async def test_upload_failure_stores_nothing(self, test_client, mock_media, sample_image_bytes):
        mock_media.upload.side_effect = MediaUploadError()

        response = await test_client.post(
            "/api/products",
            data=PRODUCT_FORM,
            files={"image": ("p.png", sample_image_bytes, "image/png")},
        )

        assert response.status_code == 500
        assert response.json() == {"message": "An error occurred"}
        assert (await test_client.get("/api/products")).json() == []

    @pytest.mark.asyncio
    async def test_update_image_preserved_then_replaced(
        self, test_client, mock_media, cover_asset, sample_image_bytes
    ):
        created = (
            await test_client.post(
                "/api/products",
                data=PRODUCT_FORM,
                files={"image": ("p.png", sample_image_bytes, "image/png")},
            )
        ).json()
        url = f"/api/products/{created['_id']}"

        kept = (await test_client.put(url, data={**PRODUCT_FORM, "name": "Folio Max"})).json()
        assert kept["name"] == "Folio Max"
        assert kept["image"] == cover_asset.url

        mock_media.upload.return_value = UploadedAsset(url="https://cdn.test/max.png", public_id="max")
        replaced = (
            await test_client.put(
                url,
                data=PRODUCT_FORM,
                files={"image": ("max.png", b"new bytes", "image/png")},
            )
        ).json()
        assert replaced["image"] == "https://cdn.test/max.png"

    @pytest.mark.asyncio
    async def test_update_unknown_id(self, test_client):
        response = await test_client.put(f"/api/products/{uuid.uuid4()}", data=PRODUCT_FORM)
        assert response.status_code == 404
        assert response.json() == {"message": "Product not found"}

    @pytest.mark.asyncio
    async def test_delete(self, test_client):
        created = (await test_client.post("/api/products", data=PRODUCT_FORM)).json()

        response = await test_client.delete(f"/api/products/{created['_id']}")
        again = await test_client.delete(f"/api/products/{created['_id']}")

        assert response.json() == {"message": "Product deleted successfully"}
        assert again.status_code == 404
