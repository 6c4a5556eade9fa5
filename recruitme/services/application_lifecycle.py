"""
Application lifecycle service.

An application row moves along two small machines:

Existence:  absent -> present (apply) -> absent (withdraw)

Offer:      none -> offered -> accepted | rejected
            accepted -> offered   (applicant rescinds acceptance)
            any -> offered | none (company extends / rescinds)

Every write is a single conditional statement whose WHERE clause carries the
required source state. Zero affected rows means NotFound; there is no
read-then-write, so of two racing conflicting calls exactly one wins.
"""
import logging
from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Optional
from sqlalchemy import insert, literal, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from recruitme.core.errors import Conflict, NotFound, Unauthenticated
from recruitme.core.gating import enforce_role
from recruitme.core.ownership import get_owned_job, own_application_criteria
from recruitme.core.security import Identity
from recruitme.db.models import (
    Application,
    ApplicantSkill,
    Job,
    JobStatus,
    OfferStatus,
    Rating,
    Role,
    User,
)
from recruitme.db.models.user import new_uuid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OfferTransition:
    name: str
    actor: Role
    sources: Optional[FrozenSet[OfferStatus]]  # None: allowed from any state
    target: OfferStatus
    message: str
    not_found: str


OFFER_TRANSITIONS: Dict[str, OfferTransition] = {
    # The company can always reset the offer, whatever the applicant did
    "extend_offer": OfferTransition(
        name="extend_offer",
        actor=Role.COMPANY,
        sources=None,
        target=OfferStatus.OFFERED,
        message="Offer extended",
        not_found="Application not found",
    ),
    "rescind_offer": OfferTransition(
        name="rescind_offer",
        actor=Role.COMPANY,
        sources=None,
        target=OfferStatus.NONE,
        message="Offer rescinded",
        not_found="Application not found",
    ),
    "accept_offer": OfferTransition(
        name="accept_offer",
        actor=Role.APPLICANT,
        sources=frozenset({OfferStatus.OFFERED}),
        target=OfferStatus.ACCEPTED,
        message="Offer accepted",
        not_found="Offer not found",
    ),
    "reject_offer": OfferTransition(
        name="reject_offer",
        actor=Role.APPLICANT,
        sources=frozenset({OfferStatus.OFFERED}),
        target=OfferStatus.REJECTED,
        message="Offer rejected",
        not_found="Offer not found",
    ),
    "rescind_acceptance": OfferTransition(
        name="rescind_acceptance",
        actor=Role.APPLICANT,
        sources=frozenset({OfferStatus.ACCEPTED}),
        target=OfferStatus.OFFERED,
        message="Acceptance rescinded",
        not_found="Accepted offer not found",
    ),
}


def can_transition(transition: OfferTransition, current: OfferStatus) -> bool:
    return transition.sources is None or current in transition.sources


def _update_offer(db: Session, transition: OfferTransition, criteria: list, actor: Identity) -> Dict[str, str]:
    criteria = list(criteria)
    if transition.sources is not None:
        criteria.append(Application.offer_status.in_(transition.sources))

    updated = (
        db.query(Application)
        .filter(*criteria)
        .update({Application.offer_status: transition.target}, synchronize_session=False)
    )

    if updated == 0:
        db.rollback()
        logger.info(f"Offer transition rejected: transition={transition.name}, actor_id={actor.id}")
        raise NotFound(transition.not_found)

    db.commit()
    logger.info(
        f"Offer transition applied: transition={transition.name}, actor_id={actor.id}, "
        f"offer_status={transition.target.value}"
    )
    return {"message": transition.message}


def _company_offer_transition(
    db: Session, job_id: str, applicant_id: str, company: Identity, transition: OfferTransition
) -> Dict[str, str]:
    enforce_role(company, [transition.actor])
    job = get_owned_job(db, job_id, company)
    criteria = [Application.job_id == job.id, Application.applicant_id == applicant_id]
    return _update_offer(db, transition, criteria, company)


def _applicant_offer_transition(
    db: Session, job_id: str, applicant: Identity, transition: OfferTransition
) -> Dict[str, str]:
    enforce_role(applicant, [transition.actor])
    return _update_offer(db, transition, own_application_criteria(job_id, applicant), applicant)


def extend_offer(db: Session, job_id: str, applicant_id: str, company: Identity) -> Dict[str, str]:
    return _company_offer_transition(db, job_id, applicant_id, company, OFFER_TRANSITIONS["extend_offer"])


def rescind_offer(db: Session, job_id: str, applicant_id: str, company: Identity) -> Dict[str, str]:
    return _company_offer_transition(db, job_id, applicant_id, company, OFFER_TRANSITIONS["rescind_offer"])


def accept_offer(db: Session, job_id: str, applicant: Identity) -> Dict[str, str]:
    return _applicant_offer_transition(db, job_id, applicant, OFFER_TRANSITIONS["accept_offer"])


def reject_offer(db: Session, job_id: str, applicant: Identity) -> Dict[str, str]:
    return _applicant_offer_transition(db, job_id, applicant, OFFER_TRANSITIONS["reject_offer"])


def rescind_acceptance(db: Session, job_id: str, applicant: Identity) -> Dict[str, str]:
    return _applicant_offer_transition(db, job_id, applicant, OFFER_TRANSITIONS["rescind_acceptance"])


def apply_to_job(db: Session, job_id: str, applicant: Identity) -> Dict[str, str]:
    """
    Create the caller's application to an open job.

    The open-status check and the insert are one INSERT ... SELECT, so a job
    closed concurrently cannot receive the application.

    Raises:
        NotFound: if the job does not exist or is not open
        Conflict: if the caller already applied to this job
        Unauthenticated: if the token belongs to an account that was deleted
    """
    enforce_role(applicant, [Role.APPLICANT])

    application_id = new_uuid()
    open_job = select(literal(application_id), Job.id, literal(applicant.id)).where(
        Job.id == job_id,
        Job.status == JobStatus.OPEN,
    )
    statement = insert(Application.__table__).from_select(["id", "job_id", "applicant_id"], open_job)

    try:
        result = db.execute(statement)
    except IntegrityError:
        db.rollback()
        already_applied = (
            db.query(Application.id).filter(*own_application_criteria(job_id, applicant)).first()
        )
        if already_applied:
            logger.info(f"Duplicate application: job_id={job_id}, applicant_id={applicant.id}")
            raise Conflict("Already applied")
        if not db.query(User.id).filter(User.id == applicant.id).first():
            logger.warning(f"Apply with token for missing account: applicant_id={applicant.id}")
            raise Unauthenticated("Account no longer exists")
        raise

    if result.rowcount == 0:
        db.rollback()
        raise NotFound("Job not found or not open")

    db.commit()
    logger.info(f"Application submitted: application_id={application_id}, job_id={job_id}, applicant_id={applicant.id}")
    return {"id": application_id, "message": "Application submitted"}


def withdraw_application(db: Session, job_id: str, applicant: Identity) -> Dict[str, str]:
    """
    Delete the caller's application, whatever its offer status.

    Raises:
        NotFound: if the caller has no application to this job
    """
    enforce_role(applicant, [Role.APPLICANT])

    deleted = (
        db.query(Application)
        .filter(*own_application_criteria(job_id, applicant))
        .delete(synchronize_session=False)
    )
    if deleted == 0:
        db.rollback()
        raise NotFound("Application not found")

    db.commit()
    logger.info(f"Application withdrawn: job_id={job_id}, applicant_id={applicant.id}")
    return {"message": "Application withdrawn"}


def rate_applicant(db: Session, job_id: str, applicant_id: str, rating: Rating, company: Identity) -> Dict[str, str]:
    """Overwrite the company's rating of an application. Rating does not gate anything."""
    enforce_role(company, [Role.COMPANY])
    job = get_owned_job(db, job_id, company)

    updated = (
        db.query(Application)
        .filter(Application.job_id == job.id, Application.applicant_id == applicant_id)
        .update({Application.rating: Rating(rating)}, synchronize_session=False)
    )
    if updated == 0:
        db.rollback()
        raise NotFound("Application not found")

    db.commit()
    logger.info(f"Applicant rated: job_id={job_id}, applicant_id={applicant_id}, rating={Rating(rating).value}")
    return {"message": "Rating updated"}


def skills_by_applicant(db: Session, applicant_ids: List[str]) -> Dict[str, List[str]]:
    skills: Dict[str, List[str]] = {applicant_id: [] for applicant_id in applicant_ids}
    if not applicant_ids:
        return skills

    rows = (
        db.query(ApplicantSkill.applicant_id, ApplicantSkill.skill)
        .filter(ApplicantSkill.applicant_id.in_(applicant_ids))
        .order_by(ApplicantSkill.skill)
        .all()
    )
    for applicant_id, skill in rows:
        skills[applicant_id].append(skill)
    return skills


def list_applicants(db: Session, job_id: str, company: Identity, offset: int = 0, limit: int = 20) -> Dict:
    """
    List applicants of one of the company's jobs.

    Raises:
        NotFound: if the job does not exist or belongs to another company
    """
    enforce_role(company, [Role.COMPANY])
    job = get_owned_job(db, job_id, company)

    query = (
        db.query(User.id, User.name, Application.rating, Application.offer_status)
        .join(Application, Application.applicant_id == User.id)
        .filter(Application.job_id == job.id)
    )
    total = query.count()
    rows = query.order_by(Application.apply_date, User.name).offset(offset).limit(limit).all()
    skills = skills_by_applicant(db, [row.id for row in rows])

    logger.debug(f"Applicants listed: job_id={job_id}, total={total}, offset={offset}")

    return {
        "applicants": [
            {
                "id": row.id,
                "name": row.name,
                "rating": row.rating,
                "offer_status": row.offer_status,
                "skills": skills[row.id],
            }
            for row in rows
        ],
        "total": total,
    }
