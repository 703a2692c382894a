"""
Folio Backend - Contact Endpoint Tests
=======================================

What:  /api/contact over HTTP; the SMTP notifier is the mock_mail fixture.
"""

import uuid

import pytest

from app.exceptions import NotificationError


class TestSubmit:
    @pytest.mark.asyncio
    async def test_submit_stores_and_notifies(self, test_client, mock_mail):
        response = await test_client.post(
            "/api/contact",
            json={"name": "Ada", "email": "ada@lovelace.io", "message": "Hello there"},
        )

        assert response.status_code == 200
        assert response.json() == {"message": "Message sent successfully"}
        mock_mail.assert_awaited_once_with(
            from_address="ada@lovelace.io",
            to_address="owner@folio.test",
            subject="New Contact Form Submission",
            body="Name: Ada\nEmail: ada@lovelace.io\nMessage: Hello there",
        )

    @pytest.mark.asyncio
    async def test_empty_submission_uses_mailer_address(self, test_client, mock_mail):
        response = await test_client.post("/api/contact", json={})

        assert response.status_code == 200
        assert mock_mail.call_args.kwargs["from_address"] == "mailer@folio.test"

    @pytest.mark.asyncio
    async def test_invalid_email(self, test_client, mock_mail):
        response = await test_client.post("/api/contact", json={"email": "nope"})

        assert response.status_code == 400
        mock_mail.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_mail_failure_keeps_submission(self, test_client, mock_mail):
        mock_mail.side_effect = NotificationError()

        response = await test_client.post(
            "/api/contact", json={"name": "Ada", "email": "ada@lovelace.io", "message": "Hi"}
        )

        assert response.status_code == 500
        assert response.json() == {"message": "An error occurred"}
        stored = (await test_client.get("/api/contact")).json()
        assert [c["name"] for c in stored] == ["Ada"]


class TestManage:
    @pytest.mark.asyncio
    async def test_list_newest_first_and_delete(self, test_client):
        for name in ("First", "Second"):
            await test_client.post("/api/contact", json={"name": name})

        contacts = (await test_client.get("/api/contact")).json()
        assert [c["name"] for c in contacts] == ["Second", "First"]

        response = await test_client.delete(f"/api/contact/{contacts[0]['_id']}")
        assert response.json() == {"message": "Contact deleted successfully"}
        assert len((await test_client.get("/api/contact")).json()) == 1

    @pytest.mark.asyncio
    async def test_delete_unknown_id(self, test_client):
        response = await test_client.delete(f"/api/contact/{uuid.uuid4()}")
        assert response.status_code == 404
