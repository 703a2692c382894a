"""
Folio Backend - Job Posting Schemas
====================================

What:  Request/response contracts for job postings (JSON bodies).

Normalization (identical for create and update):
    requirements / benefits: ["a", "b"] or "a, b" → ["a", "b"]
    type: null or "" → "Full-time"
    applicationDeadline: "" → null

isActive:
    create: absent keeps the default (active); present is coerced
    update: coerced, so an absent flag deactivates the posting
"""

from datetime import datetime
from typing import Any, List, Literal, Optional

from pydantic import Field, field_validator

from app.models.job_posting import JOB_TYPES
from app.schemas.common import InputModel, RecordResponse, coerce_flag, split_list

JobType = Literal["Full-time", "Part-time", "Contract", "Internship"]


class Salary(InputModel):
    min: Optional[float] = None
    max: Optional[float] = None
    currency: str = "USD"

    @field_validator("currency", mode="before")
    @classmethod
    def default_currency(cls, v: Any) -> Any:
        return v or "USD"


class JobPostingInput(InputModel):
    """Fields shared by create and update."""

    title: str = Field(min_length=1, max_length=300)
    company: str = Field(min_length=1, max_length=255)
    location: Optional[str] = None
    type: JobType = "Full-time"
    description: str = Field(min_length=1)
    requirements: List[str] = Field(default_factory=list)
    benefits: List[str] = Field(default_factory=list)
    salary: Optional[Salary] = None
    application_deadline: Optional[datetime] = None
    apply_url: str = Field(min_length=1, max_length=1024)

    @field_validator("requirements", "benefits", mode="before")
    @classmethod
    def normalize_list(cls, v: Any) -> List[str]:
        return split_list(v)

    @field_validator("type", mode="before")
    @classmethod
    def default_type(cls, v: Any) -> Any:
        return v or JOB_TYPES[0]

    @field_validator("application_deadline", mode="before")
    @classmethod
    def blank_deadline_is_missing(cls, v: Any) -> Any:
        return v or None


class JobPostingCreate(JobPostingInput):
    is_active: bool = True

    @field_validator("is_active", mode="before")
    @classmethod
    def normalize_is_active(cls, v: Any) -> bool:
        return coerce_flag(v)


class JobPostingUpdate(JobPostingInput):
    is_active: bool = False

    @field_validator("is_active", mode="before")
    @classmethod
    def normalize_is_active(cls, v: Any) -> bool:
        return coerce_flag(v)


class JobPostingResponse(RecordResponse):
    title: str
    company: str
    location: Optional[str] = None
    type: str
    description: str
    requirements: List[str] = Field(default_factory=list)
    benefits: List[str] = Field(default_factory=list)
    salary: Optional[Salary] = None
    application_deadline: Optional[datetime] = None
    apply_url: str
    is_active: bool
