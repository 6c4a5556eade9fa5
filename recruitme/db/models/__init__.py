"""
Database models module.

This module imports all database models to ensure they are registered with SQLAlchemy's Base.metadata
before table creation.

All models must be imported here to be included in database migrations and table creation.
"""
from recruitme.db.models.user import User, Role, ApplicantSkill
from recruitme.db.models.job import Job, JobStatus, JobSkill
from recruitme.db.models.application import Application, OfferStatus, Rating

# Explicitly export all models for clarity
__all__ = [
    "User",
    "Role",
    "ApplicantSkill",
    "Job",
    "JobStatus",
    "JobSkill",
    "Application",
    "OfferStatus",
    "Rating",
]
