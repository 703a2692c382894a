"""
Folio Backend - Job Posting Route Handlers
===========================================

What:  Public job board reads and the editor's create/update/delete endpoints.
How:   JSON bodies. `requirements` / `benefits` may be a list or a
       comma-separated string on both create and update.
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.common import ErrorResponse, MessageResponse
from app.schemas.job import JobPostingCreate, JobPostingResponse, JobPostingUpdate
from app.services.job_service import job_service

router = APIRouter(prefix="/api/jobs", tags=["Jobs"])


@router.get("", response_model=List[JobPostingResponse], summary="List active job postings")
async def list_jobs(db: AsyncSession = Depends(get_db_session)):
    return await job_service.list_active(db)


@router.get(
    "/{job_id}",
    response_model=JobPostingResponse,
    responses={404: {"description": "Job posting not found", "model": ErrorResponse}},
    summary="Get a job posting by ID (active or not)",
)
async def get_job(job_id: UUID, db: AsyncSession = Depends(get_db_session)):
    return await job_service.get_job(db, job_id)


@router.post(
    "",
    status_code=201,
    response_model=JobPostingResponse,
    responses={400: {"description": "Missing or invalid fields", "model": ErrorResponse}},
    summary="Create a job posting",
)
async def create_job(payload: JobPostingCreate, db: AsyncSession = Depends(get_db_session)):
    return await job_service.create_job(db, payload)


@router.put(
    "/{job_id}",
    response_model=JobPostingResponse,
    responses={
        400: {"description": "Missing or invalid fields", "model": ErrorResponse},
        404: {"description": "Job posting not found", "model": ErrorResponse},
    },
    summary="Replace a job posting",
)
async def update_job(
    job_id: UUID,
    payload: JobPostingUpdate,
    db: AsyncSession = Depends(get_db_session),
):
    return await job_service.update_job(db, job_id, payload)


@router.delete(
    "/{job_id}",
    response_model=MessageResponse,
    responses={404: {"description": "Job posting not found", "model": ErrorResponse}},
    summary="Delete a job posting",
)
async def delete_job(job_id: UUID, db: AsyncSession = Depends(get_db_session)) -> MessageResponse:
    await job_service.delete_job(db, job_id)
    return MessageResponse(message="Job posting deleted successfully")
