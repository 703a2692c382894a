"""
Folio Backend - Admin Listing Routes
=====================================

What:  Unfiltered listings for the editor: drafts and inactive postings included.
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.blog import BlogPostResponse
from app.schemas.job import JobPostingResponse
from app.services.blog_service import blog_service
from app.services.job_service import job_service

router = APIRouter(prefix="/api/admin", tags=["Admin"])


@router.get("/blogs", response_model=List[BlogPostResponse], summary="List all blog posts")
async def list_all_posts(db: AsyncSession = Depends(get_db_session)):
    return await blog_service.list_all(db)


@router.get("/jobs", response_model=List[JobPostingResponse], summary="List all job postings")
async def list_all_jobs(db: AsyncSession = Depends(get_db_session)):
    return await job_service.list_all(db)
