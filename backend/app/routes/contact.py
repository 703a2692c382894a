"""
Folio Backend - Contact Route Handlers
=======================================

What:  Contact-form submission (public) and the operator's inbox (list/delete).
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.common import ErrorResponse, MessageResponse
from app.schemas.contact import ContactCreate, ContactResponse
from app.services.contact_service import contact_service

router = APIRouter(prefix="/api/contact", tags=["Contact"])


@router.post(
    "",
    response_model=MessageResponse,
    responses={
        400: {"description": "Invalid email address", "model": ErrorResponse},
        500: {"description": "Storage or email delivery failed", "model": ErrorResponse},
    },
    summary="Submit the contact form",
)
async def submit_contact(
    payload: ContactCreate,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    """Stores the submission and emails the site owner."""
    await contact_service.submit(db, payload)
    return MessageResponse(message="Message sent successfully")


@router.get(
    "",
    response_model=List[ContactResponse],
    summary="List contact submissions (newest first)",
)
async def list_contacts(db: AsyncSession = Depends(get_db_session)):
    return await contact_service.list_contacts(db)


@router.delete(
    "/{contact_id}",
    response_model=MessageResponse,
    responses={404: {"description": "Contact not found", "model": ErrorResponse}},
    summary="Delete a contact submission",
)
async def delete_contact(
    contact_id: UUID,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    await contact_service.delete_contact(db, contact_id)
    return MessageResponse(message="Contact deleted successfully")
