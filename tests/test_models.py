"""
Tests for schema constraints and delete cascades.
"""
import pytest
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError

from recruitme.db.models import ApplicantSkill, Application, Job, JobSkill, Role, User
from recruitme.services import application_lifecycle

from conftest import create_user


def test_enum_values_are_stored_lowercase(db, company):
    stored = db.execute(text("SELECT role FROM users WHERE id = :id"), {"id": company.id}).scalar()
    assert stored == "company"


def test_duplicate_application_row_is_rejected_by_the_database(db, applicant, open_job):
    db.add(Application(job_id=open_job.id, applicant_id=applicant.id))
    db.commit()

    db.add(Application(job_id=open_job.id, applicant_id=applicant.id))
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()


def test_application_needs_existing_job(db, applicant):
    db.add(Application(job_id="no-such-job", applicant_id=applicant.id))
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()


def test_deleting_job_cascades_to_applications_and_skills(db, company, applicant, open_job):
    db.add(JobSkill(job_id=open_job.id, skill="python"))
    db.commit()
    application_lifecycle.apply_to_job(db, open_job.id, applicant)

    db.query(Job).filter(Job.id == open_job.id).delete(synchronize_session=False)
    db.commit()

    assert db.query(Application).count() == 0
    assert db.query(JobSkill).count() == 0
    assert db.query(User).filter(User.id == applicant.id).count() == 1


def test_deleting_company_cascades_to_jobs_and_their_applications(db, company, applicant, open_job):
    application_lifecycle.apply_to_job(db, open_job.id, applicant)

    db.query(User).filter(User.id == company.id).delete(synchronize_session=False)
    db.commit()

    assert db.query(Job).count() == 0
    assert db.query(Application).count() == 0


def test_deleting_applicant_cascades_to_applications_and_skills(db, applicant, open_job):
    db.add(ApplicantSkill(applicant_id=applicant.id, skill="sql"))
    db.commit()
    application_lifecycle.apply_to_job(db, open_job.id, applicant)

    db.query(User).filter(User.id == applicant.id).delete(synchronize_session=False)
    db.commit()

    assert db.query(Application).count() == 0
    assert db.query(ApplicantSkill).count() == 0
    assert db.query(Job).filter(Job.id == open_job.id).count() == 1


def test_email_is_unique(db, applicant):
    with pytest.raises(IntegrityError):
        create_user(db, Role.COMPANY, "Someone Else", applicant.email)
    db.rollback()
