"""
Applicant endpoints: profile, apply / withdraw, and offer responses.

The applicant id always comes from the token, so an applicant can only act
on their own applications.
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from recruitme.core.auth_dependency import require_applicant
from recruitme.core.security import Identity
from recruitme.db.session import get_db
from recruitme.schemas.common import CreatedResponse, MessageResponse
from recruitme.schemas.profile import ApplicantProfile, ApplicantProfileUpdate
from recruitme.services import application_lifecycle, profile_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/applicant", tags=["Applicant"])


def internal_error(action: str, e: Exception) -> HTTPException:
    logger.error(f"Failed to {action}: {e}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to {action}"
    )


@router.get("/profile", response_model=ApplicantProfile)
def get_profile(
    applicant: Identity = Depends(require_applicant),
    db: Session = Depends(get_db)
):
    """Applicant profile with skills and every application's current status."""
    try:
        return profile_service.get_applicant_profile(db, applicant)
    except HTTPException:
        raise
    except Exception as e:
        raise internal_error("get applicant profile", e)


@router.put("/profile", response_model=MessageResponse)
def update_profile(
    profile: ApplicantProfileUpdate,
    applicant: Identity = Depends(require_applicant),
    db: Session = Depends(get_db)
):
    try:
        return profile_service.update_applicant_profile(db, applicant, name=profile.name, skills=profile.skills)
    except HTTPException:
        db.rollback()
        raise
    except Exception as e:
        db.rollback()
        raise internal_error("update applicant profile", e)


@router.post("/job/{job_id}/apply", response_model=CreatedResponse)
def apply(
    job_id: str,
    applicant: Identity = Depends(require_applicant),
    db: Session = Depends(get_db)
):
    """
    Apply to an open job.

    Returns 404 if the job does not exist or is not open, 400 if already applied.
    """
    try:
        return application_lifecycle.apply_to_job(db, job_id, applicant)
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        raise internal_error("apply to job", e)


@router.delete("/job/{job_id}/apply", response_model=MessageResponse)
def withdraw(
    job_id: str,
    applicant: Identity = Depends(require_applicant),
    db: Session = Depends(get_db)
):
    """Withdraw (delete) the application, even after accepting an offer."""
    try:
        return application_lifecycle.withdraw_application(db, job_id, applicant)
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        raise internal_error("withdraw application", e)


@router.post("/job/{job_id}/offer/accept", response_model=MessageResponse)
def accept_offer(
    job_id: str,
    applicant: Identity = Depends(require_applicant),
    db: Session = Depends(get_db)
):
    try:
        return application_lifecycle.accept_offer(db, job_id, applicant)
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        raise internal_error("accept offer", e)


@router.delete("/job/{job_id}/offer/accept", response_model=MessageResponse)
def rescind_acceptance(
    job_id: str,
    applicant: Identity = Depends(require_applicant),
    db: Session = Depends(get_db)
):
    """Take back an acceptance; the offer goes back to offered."""
    try:
        return application_lifecycle.rescind_acceptance(db, job_id, applicant)
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        raise internal_error("rescind acceptance", e)


@router.post("/job/{job_id}/offer/reject", response_model=MessageResponse)
def reject_offer(
    job_id: str,
    applicant: Identity = Depends(require_applicant),
    db: Session = Depends(get_db)
):
    try:
        return application_lifecycle.reject_offer(db, job_id, applicant)
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        raise internal_error("reject offer", e)
