"""
Company and applicant profiles.
"""
import logging
from typing import Dict, Iterable, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session, aliased

from recruitme.core.errors import NotFound
from recruitme.core.gating import enforce_role
from recruitme.core.security import Identity
from recruitme.db.models import Application, ApplicantSkill, Job, OfferStatus, Role, User
from recruitme.services.job_stats import applicant_count, hired_count
from recruitme.services.skills import normalize_skills

logger = logging.getLogger(__name__)


def _get_user(db: Session, identity: Identity) -> User:
    user = db.query(User).filter(User.id == identity.id).first()
    if not user:
        raise NotFound("User not found")
    return user


def application_status(offer_status: OfferStatus) -> str:
    """Status shown to applicants: an application without an offer is pending."""
    if offer_status == OfferStatus.NONE:
        return "pending"
    return OfferStatus(offer_status).value


def get_company_profile(db: Session, company: Identity) -> Dict:
    enforce_role(company, [Role.COMPANY])
    user = _get_user(db, company)

    jobs = (
        db.query(Job.id, Job.title, Job.post_date, Job.status, applicant_count(), hired_count())
        .outerjoin(Application, Application.job_id == Job.id)
        .filter(Job.company_id == company.id)
        .group_by(Job.id, Job.title, Job.post_date, Job.status)
        .order_by(Job.title)
        .all()
    )

    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "jobs": [dict(row._mapping) for row in jobs],
    }


def update_name(db: Session, identity: Identity, name: str) -> Dict[str, str]:
    user = _get_user(db, identity)
    user.name = name
    db.commit()
    logger.info(f"Profile updated: user_id={identity.id}")
    return {"message": "Profile updated"}


def update_company_profile(db: Session, company: Identity, name: str) -> Dict[str, str]:
    enforce_role(company, [Role.COMPANY])
    return update_name(db, company, name)


def get_applicant_profile(db: Session, applicant: Identity) -> Dict:
    enforce_role(applicant, [Role.APPLICANT])
    user = _get_user(db, applicant)

    skills = [
        skill
        for (skill,) in db.query(ApplicantSkill.skill)
        .filter(ApplicantSkill.applicant_id == applicant.id)
        .order_by(ApplicantSkill.skill)
    ]

    company = aliased(User)
    job_applicants = (
        db.query(func.count(Application.id))
        .filter(Application.job_id == Job.id)
        .correlate(Job)
        .scalar_subquery()
    )
    own_application = aliased(Application)
    rows = (
        db.query(
            Job.id.label("job_id"),
            company.name.label("company_name"),
            Job.title.label("job_title"),
            own_application.offer_status,
            Job.post_date,
            own_application.apply_date,
            job_applicants.label("applicant_count"),
        )
        .select_from(own_application)
        .join(Job, Job.id == own_application.job_id)
        .join(company, company.id == Job.company_id)
        .filter(own_application.applicant_id == applicant.id)
        .order_by(own_application.apply_date.desc())
        .all()
    )

    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "skills": skills,
        "applications": [
            {
                "job_id": row.job_id,
                "company_name": row.company_name,
                "job_title": row.job_title,
                "status": application_status(row.offer_status),
                "post_date": row.post_date,
                "apply_date": row.apply_date,
                "applicant_count": row.applicant_count,
            }
            for row in rows
        ],
    }


def update_applicant_profile(
    db: Session,
    applicant: Identity,
    name: Optional[str] = None,
    skills: Optional[Iterable[str]] = None,
) -> Dict[str, str]:
    """Update the name and/or replace the whole skill list."""
    enforce_role(applicant, [Role.APPLICANT])
    user = _get_user(db, applicant)

    if name:
        user.name = name

    if skills is not None:
        skills = normalize_skills(skills)
        db.query(ApplicantSkill).filter(ApplicantSkill.applicant_id == applicant.id).delete(
            synchronize_session=False
        )
        db.add_all(
            ApplicantSkill(applicant_id=applicant.id, skill=skill) for skill in skills
        )

    db.commit()
    logger.info(f"Applicant profile updated: user_id={applicant.id}, skills_replaced={skills is not None}")
    return {"message": "Profile updated"}
