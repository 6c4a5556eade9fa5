"""
Read-only aggregate reports for administrators.
"""
import logging
from typing import Dict
from sqlalchemy import distinct, func
from sqlalchemy.orm import Session

from recruitme.core.errors import NotFound
from recruitme.core.gating import enforce_role
from recruitme.core.security import Identity
from recruitme.db.models import Application, Job, Role, User
from recruitme.services.application_lifecycle import skills_by_applicant
from recruitme.services.job_stats import applicant_count, hired_count

logger = logging.getLogger(__name__)


def list_companies(db: Session, admin: Identity, offset: int = 0, limit: int = 20) -> Dict:
    enforce_role(admin, [Role.ADMIN])

    rows = (
        db.query(
            User.id,
            User.name,
            func.count(distinct(Job.id)).label("job_count"),
            applicant_count("application_count"),
            hired_count(),
        )
        .outerjoin(Job, Job.company_id == User.id)
        .outerjoin(Application, Application.job_id == Job.id)
        .filter(User.role == Role.COMPANY)
        .group_by(User.id, User.name)
        .order_by(User.name)
        .offset(offset)
        .limit(limit)
        .all()
    )
    total = db.query(User).filter(User.role == Role.COMPANY).count()

    return {"companies": [dict(row._mapping) for row in rows], "total": total}


def list_jobs(db: Session, admin: Identity, offset: int = 0, limit: int = 20) -> Dict:
    enforce_role(admin, [Role.ADMIN])

    rows = (
        db.query(
            Job.id,
            User.name.label("company_name"),
            Job.title,
            Job.status,
            applicant_count(),
            hired_count(),
        )
        .join(User, User.id == Job.company_id)
        .outerjoin(Application, Application.job_id == Job.id)
        .group_by(Job.id, User.name, Job.title, Job.status)
        .order_by(User.name, Job.title)
        .offset(offset)
        .limit(limit)
        .all()
    )
    total = db.query(Job).count()

    return {"jobs": [dict(row._mapping) for row in rows], "total": total}


def list_company_jobs(db: Session, admin: Identity, company_id: str, offset: int = 0, limit: int = 20) -> Dict:
    """
    Raises:
        NotFound: if company_id is not a company account
    """
    enforce_role(admin, [Role.ADMIN])

    company = db.query(User.id).filter(User.id == company_id, User.role == Role.COMPANY).first()
    if not company:
        raise NotFound("Company not found")

    rows = (
        db.query(Job.id, Job.title, Job.status, applicant_count(), hired_count())
        .outerjoin(Application, Application.job_id == Job.id)
        .filter(Job.company_id == company_id)
        .group_by(Job.id, Job.title, Job.status)
        .order_by(Job.title)
        .offset(offset)
        .limit(limit)
        .all()
    )
    total = db.query(Job).filter(Job.company_id == company_id).count()

    return {"jobs": [dict(row._mapping) for row in rows], "total": total}


def list_applicants(db: Session, admin: Identity, offset: int = 0, limit: int = 20) -> Dict:
    enforce_role(admin, [Role.ADMIN])

    rows = (
        db.query(User.id, User.name, func.count(distinct(Application.id)).label("application_count"))
        .outerjoin(Application, Application.applicant_id == User.id)
        .filter(User.role == Role.APPLICANT)
        .group_by(User.id, User.name)
        .order_by(User.name)
        .offset(offset)
        .limit(limit)
        .all()
    )
    total = db.query(User).filter(User.role == Role.APPLICANT).count()
    skills = skills_by_applicant(db, [row.id for row in rows])

    logger.debug(f"Admin applicant report: total={total}, offset={offset}")

    return {
        "applicants": [
            {
                "id": row.id,
                "name": row.name,
                "application_count": row.application_count,
                "skills": skills[row.id],
            }
            for row in rows
        ],
        "total": total,
    }
