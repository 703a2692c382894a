"""
Folio Backend - Contact Service
================================

What:  Stores contact-form submissions and emails the site owner about them.

Submission flow (POST /api/contact):
    ┌──────────┐    ┌──────────────┐    ┌──────────┐    ┌──────────────┐
    │  Route   │───▶│  Store (DB)  │───▶│  Commit  │───▶│  Send email  │
    └──────────┘    └──────────────┘    └──────────┘    └──────────────┘

    The record is committed before the email goes out, so a delivery
    failure (NotificationError → 500) never loses the submission itself.
"""

import logging
import uuid
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.models.contact import Contact
from app.schemas.contact import ContactCreate
from app.services.mail_service import mail_service
from app.services.record_store import RecordStore

logger = logging.getLogger(__name__)

NOTIFICATION_SUBJECT = "New Contact Form Submission"

contact_store: RecordStore[Contact] = RecordStore(Contact, resource="Contact")


def render_notification(contact: Contact) -> str:
    return f"Name: {contact.name}\nEmail: {contact.email}\nMessage: {contact.message}"


class ContactService:
    async def submit(self, db: AsyncSession, payload: ContactCreate) -> Contact:
        """
        Persist the submission, then notify REC_EMAIL.

        Raises:
            DatabaseError: the submission could not be stored
            NotificationError: stored, but the email could not be delivered
        """
        contact = await contact_store.create(db, payload.model_dump())
        await db.commit()

        await mail_service.send(
            from_address=contact.email or settings.email_user,
            to_address=settings.rec_email,
            subject=NOTIFICATION_SUBJECT,
            body=render_notification(contact),
        )
        return contact

    async def list_contacts(self, db: AsyncSession) -> List[Contact]:
        return await contact_store.find_many(db)

    async def delete_contact(self, db: AsyncSession, contact_id: uuid.UUID) -> None:
        await contact_store.delete(db, contact_id)


contact_service = ContactService()
