"""
Public job search.
"""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session

from recruitme.core import config
from recruitme.db.session import get_db
from recruitme.schemas.job import JobSearchResponse
from recruitme.services.search_service import search_open_jobs

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/jobs", tags=["Jobs"])


@router.get("/search", response_model=JobSearchResponse)
def search_jobs(
    skill: Optional[str] = Query(None, description="Filter by required skill (partial match)"),
    company: Optional[str] = Query(None, description="Filter by company name (partial match)"),
    offset: int = Query(0, ge=0, description="Number of jobs to skip"),
    limit: int = Query(config.DEFAULT_PAGE_LIMIT, ge=1, le=config.MAX_PAGE_LIMIT, description="Page size"),
    db: Session = Depends(get_db)
):
    """
    Search open jobs.

    Draft and closed jobs are never returned.
    """
    try:
        return search_open_jobs(db, skill=skill, company=company, offset=offset, limit=limit)
    except Exception as e:
        logger.error(f"Failed to search jobs: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to search jobs"
        )
