"""
Folio Backend - Contact Schemas
================================

What:  Request/response contracts for the contact form.
How:   Every field is optional (the form is stored as sent); a present
       email must still be a syntactically valid address.
"""

from typing import Any, Optional

from pydantic import EmailStr, field_validator

from app.schemas.common import InputModel, RecordResponse


class ContactCreate(InputModel):
    """Body of POST /api/contact."""

    name: Optional[str] = None
    email: Optional[EmailStr] = None
    message: Optional[str] = None

    @field_validator("email", mode="before")
    @classmethod
    def blank_email_is_missing(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v


class ContactResponse(RecordResponse):
    name: Optional[str] = None
    email: Optional[str] = None
    message: Optional[str] = None
