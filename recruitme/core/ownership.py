"""
Ownership guard.

A company may only touch its own jobs (and the applications to them); an
applicant may only touch applications whose applicant_id is their own id
from the verified token. A resource owned by someone else is reported as
NotFound, exactly like a missing one.
"""
import logging
from typing import List
from sqlalchemy.orm import Session
from sqlalchemy.sql.elements import ColumnElement

from recruitme.core.errors import NotFound
from recruitme.core.security import Identity
from recruitme.db.models import Job, Application

logger = logging.getLogger(__name__)


def owned_job_criteria(job_id: str, company: Identity) -> List[ColumnElement]:
    """Predicate selecting the job only if `company` owns it."""
    return [Job.id == job_id, Job.company_id == company.id]


def own_application_criteria(job_id: str, applicant: Identity) -> List[ColumnElement]:
    """Predicate selecting the caller's own application to `job_id`."""
    return [Application.job_id == job_id, Application.applicant_id == applicant.id]


def get_owned_job(db: Session, job_id: str, company: Identity) -> Job:
    """
    Fetch a job owned by the calling company.

    Raises:
        NotFound: if the job does not exist or belongs to another company
    """
    job = db.query(Job).filter(*owned_job_criteria(job_id, company)).first()
    if not job:
        logger.debug(f"Ownership check failed: job_id={job_id}, company_id={company.id}")
        raise NotFound("Job not found")
    return job
