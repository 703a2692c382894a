"""
Folio Backend - Job Posting Service
====================================

What:  CRUD for job postings plus the active/inactive visibility split.
How:   List normalization (requirements, benefits) already happened in the
       schema layer; this service maps validated payloads onto columns.

Visibility:
    list_active()  → GET /api/jobs         (is_active = true only)
    list_all()     → GET /api/admin/jobs   (everything)
    get_job()      → GET /api/jobs/{id}    (any status)
"""

import uuid
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.job_posting import JobPosting
from app.schemas.job import JobPostingCreate, JobPostingUpdate
from app.services.record_store import RecordStore

job_store: RecordStore[JobPosting] = RecordStore(JobPosting, resource="Job posting")


class JobService:
    async def list_active(self, db: AsyncSession) -> List[JobPosting]:
        return await job_store.find_many(db, {"is_active": True})

    async def list_all(self, db: AsyncSession) -> List[JobPosting]:
        return await job_store.find_many(db)

    async def get_job(self, db: AsyncSession, job_id: uuid.UUID) -> JobPosting:
        return await job_store.find_one(db, job_id)

    async def create_job(self, db: AsyncSession, payload: JobPostingCreate) -> JobPosting:
        return await job_store.create(db, payload.model_dump())

    async def update_job(
        self, db: AsyncSession, job_id: uuid.UUID, payload: JobPostingUpdate
    ) -> JobPosting:
        return await job_store.update(db, job_id, payload.model_dump())

    async def delete_job(self, db: AsyncSession, job_id: uuid.UUID) -> None:
        await job_store.delete(db, job_id)


job_service = JobService()
