"""
Admin reporting endpoints (read-only).
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session

from recruitme.core import config
from recruitme.core.auth_dependency import require_admin
from recruitme.core.security import Identity
from recruitme.db.session import get_db
from recruitme.schemas.admin import (
    ApplicantStatsListResponse,
    CompanyJobStatsListResponse,
    CompanyListResponse,
    JobStatsListResponse,
)
from recruitme.services import admin_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["Admin"])


def internal_error(action: str, e: Exception) -> HTTPException:
    logger.error(f"Failed to {action}: {e}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to {action}"
    )


@router.get("/companies", response_model=CompanyListResponse)
def get_companies(
    offset: int = Query(0, ge=0),
    limit: int = Query(config.DEFAULT_PAGE_LIMIT, ge=1, le=config.MAX_PAGE_LIMIT),
    admin: Identity = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Companies with job, application and hire counts."""
    try:
        return admin_service.list_companies(db, admin, offset=offset, limit=limit)
    except HTTPException:
        raise
    except Exception as e:
        raise internal_error("list companies", e)


@router.get("/jobs", response_model=JobStatsListResponse)
def get_jobs(
    offset: int = Query(0, ge=0),
    limit: int = Query(config.DEFAULT_PAGE_LIMIT, ge=1, le=config.MAX_PAGE_LIMIT),
    admin: Identity = Depends(require_admin),
    db: Session = Depends(get_db)
):
    try:
        return admin_service.list_jobs(db, admin, offset=offset, limit=limit)
    except HTTPException:
        raise
    except Exception as e:
        raise internal_error("list jobs", e)


@router.get("/company/{company_id}/jobs", response_model=CompanyJobStatsListResponse)
def get_company_jobs(
    company_id: str,
    offset: int = Query(0, ge=0),
    limit: int = Query(config.DEFAULT_PAGE_LIMIT, ge=1, le=config.MAX_PAGE_LIMIT),
    admin: Identity = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Jobs of one company. Returns 404 if the id is not a company account."""
    try:
        return admin_service.list_company_jobs(db, admin, company_id, offset=offset, limit=limit)
    except HTTPException:
        raise
    except Exception as e:
        raise internal_error("list company jobs", e)


@router.get("/applicants", response_model=ApplicantStatsListResponse)
def get_applicants(
    offset: int = Query(0, ge=0),
    limit: int = Query(config.DEFAULT_PAGE_LIMIT, ge=1, le=config.MAX_PAGE_LIMIT),
    admin: Identity = Depends(require_admin),
    db: Session = Depends(get_db)
):
    try:
        return admin_service.list_applicants(db, admin, offset=offset, limit=limit)
    except HTTPException:
        raise
    except Exception as e:
        raise internal_error("list applicants", e)
