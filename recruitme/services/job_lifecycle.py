"""
Job lifecycle service.

Owns the job status machine:

    draft -> open -> closed -> open -> closed ...

Each transition is a single conditional UPDATE on (job id, owning company,
allowed source statuses). When no row matches, the job is missing, owned by
another company, or in a state the transition cannot start from; all three
are reported as NotFound.
"""
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from typing import Dict, FrozenSet, Iterable, Optional
from sqlalchemy.orm import Session

from recruitme.core.errors import NotFound
from recruitme.core.gating import enforce_role
from recruitme.core.ownership import owned_job_criteria
from recruitme.core.security import Identity
from recruitme.db.models import Application, Job, JobSkill, JobStatus, Role
from recruitme.services.job_stats import applicant_count, hired_count
from recruitme.services.skills import normalize_skills

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class JobTransition:
    name: str
    sources: FrozenSet[JobStatus]
    target: JobStatus
    refresh_post_date: bool
    message: str


JOB_TRANSITIONS: Dict[str, JobTransition] = {
    # Activating an open job is allowed and only refreshes post_date
    "activate": JobTransition(
        name="activate",
        sources=frozenset({JobStatus.DRAFT, JobStatus.OPEN, JobStatus.CLOSED}),
        target=JobStatus.OPEN,
        refresh_post_date=True,
        message="Job activated",
    ),
    "close": JobTransition(
        name="close",
        sources=frozenset({JobStatus.DRAFT, JobStatus.OPEN, JobStatus.CLOSED}),
        target=JobStatus.CLOSED,
        refresh_post_date=False,
        message="Job closed",
    ),
    # Unlike activate, reopening keeps the original post_date
    "reopen": JobTransition(
        name="reopen",
        sources=frozenset({JobStatus.CLOSED}),
        target=JobStatus.OPEN,
        refresh_post_date=False,
        message="Job reopened",
    ),
}


def can_transition(transition: JobTransition, current: JobStatus) -> bool:
    return current in transition.sources


def create_job(
    db: Session,
    company: Identity,
    title: str,
    description: Optional[str] = None,
    salary: Optional[Decimal] = None,
    skills: Optional[Iterable[str]] = None,
) -> Job:
    """Create a draft job owned by the calling company, with its skills."""
    enforce_role(company, [Role.COMPANY])
    skills = normalize_skills(skills)

    job = Job(
        company_id=company.id,
        title=title,
        description=description,
        salary=salary,
        status=JobStatus.DRAFT,
    )
    for skill in skills:
        job.skills.append(JobSkill(skill=skill))

    db.add(job)
    db.commit()
    db.refresh(job)

    logger.info(f"Job created: job_id={job.id}, company_id={company.id}, skills={len(job.skills)}")
    return job


def transition_job(db: Session, job_id: str, company: Identity, transition: JobTransition) -> Dict[str, str]:
    """
    Apply a status transition as one conditional UPDATE.

    Raises:
        NotFound: if no job matched id, owner and allowed source status
    """
    enforce_role(company, [Role.COMPANY])

    values = {Job.status: transition.target}
    if transition.refresh_post_date:
        values[Job.post_date] = datetime.now(timezone.utc)

    updated = (
        db.query(Job)
        .filter(*owned_job_criteria(job_id, company), Job.status.in_(transition.sources))
        .update(values, synchronize_session=False)
    )

    if updated == 0:
        db.rollback()
        logger.info(
            f"Job transition rejected: transition={transition.name}, job_id={job_id}, company_id={company.id}"
        )
        raise NotFound("Job not found")

    db.commit()
    logger.info(
        f"Job transition applied: transition={transition.name}, job_id={job_id}, "
        f"company_id={company.id}, status={transition.target.value}"
    )
    return {"message": transition.message}


def activate_job(db: Session, job_id: str, company: Identity) -> Dict[str, str]:
    return transition_job(db, job_id, company, JOB_TRANSITIONS["activate"])


def close_job(db: Session, job_id: str, company: Identity) -> Dict[str, str]:
    """Close a job. Existing applications and offers are left as they are."""
    return transition_job(db, job_id, company, JOB_TRANSITIONS["close"])


def reopen_job(db: Session, job_id: str, company: Identity) -> Dict[str, str]:
    return transition_job(db, job_id, company, JOB_TRANSITIONS["reopen"])


def get_job(db: Session, job_id: str, company: Identity):
    """
    Get one of the company's jobs with applicant and hired counts.

    Raises:
        NotFound: if the job does not exist or belongs to another company
    """
    enforce_role(company, [Role.COMPANY])

    row = (
        db.query(Job.id, Job.title, Job.post_date, Job.status, applicant_count(), hired_count())
        .outerjoin(Application, Application.job_id == Job.id)
        .filter(*owned_job_criteria(job_id, company))
        .group_by(Job.id, Job.title, Job.post_date, Job.status)
        .first()
    )
    if row is None:
        raise NotFound("Job not found")
    return row
