"""
Company endpoints: profile, job lifecycle, applicants, ratings and offers.

Every endpoint requires a company token. Jobs owned by another company are
reported as 404, never 403.
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session

from recruitme.core import config
from recruitme.core.auth_dependency import require_company
from recruitme.core.security import Identity
from recruitme.db.session import get_db
from recruitme.schemas.application import ApplicantListResponse, RatingUpdate
from recruitme.schemas.common import IdResponse, MessageResponse
from recruitme.schemas.job import JobCreate, JobSummary
from recruitme.schemas.profile import CompanyProfile, CompanyProfileUpdate
from recruitme.services import application_lifecycle, job_lifecycle, profile_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/company", tags=["Company"])


def internal_error(action: str, e: Exception) -> HTTPException:
    logger.error(f"Failed to {action}: {e}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to {action}"
    )


@router.get("/profile", response_model=CompanyProfile)
def get_profile(
    company: Identity = Depends(require_company),
    db: Session = Depends(get_db)
):
    """Company profile with every job and its applicant / hired counts."""
    try:
        return profile_service.get_company_profile(db, company)
    except HTTPException:
        raise
    except Exception as e:
        raise internal_error("get company profile", e)


@router.put("/profile", response_model=MessageResponse)
def update_profile(
    profile: CompanyProfileUpdate,
    company: Identity = Depends(require_company),
    db: Session = Depends(get_db)
):
    try:
        return profile_service.update_company_profile(db, company, profile.name)
    except HTTPException:
        db.rollback()
        raise
    except Exception as e:
        db.rollback()
        raise internal_error("update company profile", e)


@router.post("/job", response_model=IdResponse)
def create_job(
    job_data: JobCreate,
    company: Identity = Depends(require_company),
    db: Session = Depends(get_db)
):
    """
    Create a new job in draft status.

    The job is not visible to applicants until it is activated.
    """
    try:
        job = job_lifecycle.create_job(
            db,
            company,
            title=job_data.title,
            description=job_data.description,
            salary=job_data.salary,
            skills=job_data.skills,
        )
        return {"id": job.id}
    except HTTPException:
        db.rollback()
        raise
    except Exception as e:
        db.rollback()
        raise internal_error("create job", e)


@router.get("/job/{job_id}", response_model=JobSummary)
def get_job(
    job_id: str,
    company: Identity = Depends(require_company),
    db: Session = Depends(get_db)
):
    try:
        return dict(job_lifecycle.get_job(db, job_id, company)._mapping)
    except HTTPException:
        raise
    except Exception as e:
        raise internal_error("get job", e)


@router.post("/job/{job_id}/activate", response_model=MessageResponse)
def activate_job(
    job_id: str,
    company: Identity = Depends(require_company),
    db: Session = Depends(get_db)
):
    """Open a draft, open or closed job and stamp a fresh post_date."""
    try:
        return job_lifecycle.activate_job(db, job_id, company)
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        raise internal_error("activate job", e)


@router.post("/job/{job_id}/close", response_model=MessageResponse)
def close_job(
    job_id: str,
    company: Identity = Depends(require_company),
    db: Session = Depends(get_db)
):
    """Close a job. Pending applications and offers are not touched."""
    try:
        return job_lifecycle.close_job(db, job_id, company)
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        raise internal_error("close job", e)


@router.post("/job/{job_id}/reopen", response_model=MessageResponse)
def reopen_job(
    job_id: str,
    company: Identity = Depends(require_company),
    db: Session = Depends(get_db)
):
    """Reopen a closed job, keeping its original post_date."""
    try:
        return job_lifecycle.reopen_job(db, job_id, company)
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        raise internal_error("reopen job", e)


@router.get("/job/{job_id}/applicants", response_model=ApplicantListResponse)
def get_applicants(
    job_id: str,
    offset: int = Query(0, ge=0, description="Number of applicants to skip"),
    limit: int = Query(config.DEFAULT_PAGE_LIMIT, ge=1, le=config.MAX_PAGE_LIMIT, description="Page size"),
    company: Identity = Depends(require_company),
    db: Session = Depends(get_db)
):
    try:
        return application_lifecycle.list_applicants(db, job_id, company, offset=offset, limit=limit)
    except HTTPException:
        raise
    except Exception as e:
        raise internal_error("list applicants", e)


@router.put("/job/{job_id}/applicant/{applicant_id}/rating", response_model=MessageResponse)
def rate_applicant(
    job_id: str,
    applicant_id: str,
    rating_data: RatingUpdate,
    company: Identity = Depends(require_company),
    db: Session = Depends(get_db)
):
    try:
        return application_lifecycle.rate_applicant(db, job_id, applicant_id, rating_data.rating, company)
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        raise internal_error("rate applicant", e)


@router.post("/job/{job_id}/applicant/{applicant_id}/offer", response_model=MessageResponse)
def extend_offer(
    job_id: str,
    applicant_id: str,
    company: Identity = Depends(require_company),
    db: Session = Depends(get_db)
):
    """Extend an offer, whatever the application's current offer status."""
    try:
        return application_lifecycle.extend_offer(db, job_id, applicant_id, company)
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        raise internal_error("extend offer", e)


@router.delete("/job/{job_id}/applicant/{applicant_id}/offer", response_model=MessageResponse)
def rescind_offer(
    job_id: str,
    applicant_id: str,
    company: Identity = Depends(require_company),
    db: Session = Depends(get_db)
):
    """Reset the offer to none, even if the applicant already accepted."""
    try:
        return application_lifecycle.rescind_offer(db, job_id, applicant_id, company)
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        raise internal_error("rescind offer", e)
