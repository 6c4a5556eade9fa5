"""
Open-job search for applicants.
"""
import logging
from typing import Dict, List, Optional
from sqlalchemy.orm import Session

from recruitme.db.models import Job, JobSkill, JobStatus, User

logger = logging.getLogger(__name__)


def skills_by_job(db: Session, job_ids: List[str]) -> Dict[str, List[str]]:
    skills: Dict[str, List[str]] = {job_id: [] for job_id in job_ids}
    if not job_ids:
        return skills

    rows = (
        db.query(JobSkill.job_id, JobSkill.skill)
        .filter(JobSkill.job_id.in_(job_ids))
        .order_by(JobSkill.skill)
        .all()
    )
    for job_id, skill in rows:
        skills[job_id].append(skill)
    return skills


def search_open_jobs(
    db: Session,
    skill: Optional[str] = None,
    company: Optional[str] = None,
    offset: int = 0,
    limit: int = 20,
) -> Dict:
    """
    Search open jobs by skill and/or company name (case-insensitive substring).

    Only open jobs are returned; drafts and closed jobs are never visible.
    """
    query = (
        db.query(Job.id, Job.title, User.name.label("company_name"), Job.description)
        .join(User, User.id == Job.company_id)
        .filter(Job.status == JobStatus.OPEN)
    )

    if skill:
        query = query.filter(
            Job.skills.any(JobSkill.skill.ilike(f"%{skill}%"))
        )

    if company:
        query = query.filter(User.name.ilike(f"%{company}%"))

    total = query.count()
    rows = query.order_by(Job.post_date.desc(), Job.title).offset(offset).limit(limit).all()
    skills = skills_by_job(db, [row.id for row in rows])

    logger.debug(f"Job search: skill={skill!r}, company={company!r}, total={total}")

    return {
        "jobs": [
            {
                "id": row.id,
                "title": row.title,
                "company_name": row.company_name,
                "description": row.description,
                "skills": skills[row.id],
            }
            for row in rows
        ],
        "total": total,
    }
