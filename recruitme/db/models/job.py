"""
Job posting model.

A job starts as a draft and is moved between open and closed by its owning
company only. Transitions live in recruitme.services.job_lifecycle.
"""
import enum
from sqlalchemy import Column, String, Text, Numeric, DateTime, ForeignKey, Enum, Index
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from recruitme.db.base import Base
from recruitme.db.models.user import new_uuid, enum_values


class JobStatus(str, enum.Enum):
    DRAFT = "draft"
    OPEN = "open"
    CLOSED = "closed"


class Job(Base):
    __tablename__ = "jobs"

    id = Column(String(36), primary_key=True, default=new_uuid)
    company_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    # Posting details
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    salary = Column(Numeric(10, 2), nullable=True)

    # Lifecycle
    status = Column(
        Enum(JobStatus, name="job_status", values_callable=enum_values, native_enum=False, create_constraint=True),
        nullable=False,
        default=JobStatus.DRAFT,
        server_default=JobStatus.DRAFT.value,
    )
    post_date = Column(DateTime(timezone=True), nullable=True)  # set on activation

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # Relationships
    company = relationship("User", back_populates="jobs")
    applications = relationship(
        "Application", back_populates="job", cascade="all, delete-orphan", passive_deletes=True
    )
    skills = relationship("JobSkill", back_populates="job", cascade="all, delete-orphan", passive_deletes=True)

    __table_args__ = (
        Index("idx_jobs_company_status", "company_id", "status"),
    )

    def __repr__(self):
        return f"<Job(id={self.id}, title='{self.title}', status='{self.status}')>"


class JobSkill(Base):
    __tablename__ = "job_skills"

    job_id = Column(String(36), ForeignKey("jobs.id", ondelete="CASCADE"), primary_key=True)
    skill = Column(String(100), primary_key=True)

    job = relationship("Job", back_populates="skills")
