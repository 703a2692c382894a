"""
Folio Backend - Blog & Admin Endpoint Tests
============================================

What:  /api/blog and /api/admin/blogs over HTTP (multipart forms).
"""

import uuid

import pytest

POST_FORM = {
    "title": "Hello, World! 2024",
    "content": "First post",
    "author": "Ada",
    "excerpt": "Intro",
    "tags": "python, web ,",
    "published": "true",
}


async def _create(client, **overrides):
    response = await client.post("/api/blog", data={**POST_FORM, **overrides})
    assert response.status_code == 201, response.text
    return response.json()


class TestCreate:
    @pytest.mark.asyncio
    async def test_create_returns_wire_shape(self, test_client):
        body = await _create(test_client)

        assert uuid.UUID(body["_id"])
        assert body["date"]
        assert body["slug"] == "hello-world-2024"
        assert body["tags"] == ["python", "web"]
        assert body["published"] is True
        assert body["image"] == ""
        assert "created_at" not in body

    @pytest.mark.asyncio
    async def test_create_with_image(self, test_client, cover_asset, sample_image_bytes):
        response = await test_client.post(
            "/api/blog",
            data=POST_FORM,
            files={"image": ("cover.png", sample_image_bytes, "image/png")},
        )

        assert response.status_code == 201
        assert response.json()["image"] == cover_asset.url

    @pytest.mark.asyncio
    async def test_missing_required_field(self, test_client):
        form = {k: v for k, v in POST_FORM.items() if k != "author"}

        response = await test_client.post("/api/blog", data=form)

        assert response.status_code == 400
        assert "author" in response.json()["message"]

    @pytest.mark.asyncio
    async def test_duplicate_slug_is_server_error(self, test_client):
        await _create(test_client)

        response = await test_client.post("/api/blog", data={**POST_FORM, "title": "hello world 2024"})

        assert response.status_code == 500
        assert response.json() == {"message": "An error occurred"}

    @pytest.mark.asyncio
    async def test_published_defaults_to_false(self, test_client):
        form = {k: v for k, v in POST_FORM.items() if k != "published"}

        response = await test_client.post("/api/blog", data=form)

        assert response.status_code == 201
        assert response.json()["published"] is False


class TestPublicReads:
    @pytest.mark.asyncio
    async def test_list_only_published_newest_first(self, test_client):
        await _create(test_client, title="Older")
        await _create(test_client, title="Draft", published="false")
        await _create(test_client, title="Newer")

        response = await test_client.get("/api/blog")

        assert response.status_code == 200
        assert [p["slug"] for p in response.json()] == ["newer", "older"]

    @pytest.mark.asyncio
    async def test_get_by_slug(self, test_client):
        await _create(test_client)

        response = await test_client.get("/api/blog/hello-world-2024")

        assert response.status_code == 200
        assert response.json()["title"] == "Hello, World! 2024"

    @pytest.mark.asyncio
    async def test_draft_slug_not_found(self, test_client):
        await _create(test_client, title="Secret", published="false")

        response = await test_client.get("/api/blog/secret")

        assert response.status_code == 404
        assert response.json() == {"message": "Blog post not found"}

    @pytest.mark.asyncio
    async def test_admin_list_includes_drafts(self, test_client):
        await _create(test_client, title="Live")
        await _create(test_client, title="Draft", published="false")

        response = await test_client.get("/api/admin/blogs")

        assert [p["slug"] for p in response.json()] == ["draft", "live"]


class TestUpdateDelete:
    @pytest.mark.asyncio
    async def test_update_keeps_slug_and_image(self, test_client, cover_asset, sample_image_bytes):
        created = (
            await test_client.post(
                "/api/blog",
                data=POST_FORM,
                files={"image": ("cover.png", sample_image_bytes, "image/png")},
            )
        ).json()

        response = await test_client.put(
            f"/api/blog/{created['_id']}", data={**POST_FORM, "title": "Renamed", "tags": "news"}
        )

        body = response.json()
        assert response.status_code == 200
        assert body["title"] == "Renamed"
        assert body["slug"] == "hello-world-2024"
        assert body["image"] == cover_asset.url
        assert body["tags"] == ["news"]

    @pytest.mark.asyncio
    async def test_update_unknown_id(self, test_client):
        response = await test_client.put(f"/api/blog/{uuid.uuid4()}", data=POST_FORM)
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_malformed_id_is_validation_error(self, test_client):
        response = await test_client.put("/api/blog/not-a-uuid", data=POST_FORM)
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_delete(self, test_client):
        created = await _create(test_client)

        response = await test_client.delete(f"/api/blog/{created['_id']}")

        assert response.status_code == 200
        assert response.json() == {"message": "Blog post deleted successfully"}
        assert (await test_client.get("/api/blog")).json() == []

    @pytest.mark.asyncio
    async def test_delete_unknown_id(self, test_client):
        response = await test_client.delete(f"/api/blog/{uuid.uuid4()}")
        assert response.status_code == 404
