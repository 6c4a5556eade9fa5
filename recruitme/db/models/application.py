"""
Application model: one row per (job, applicant) pair.

offer_status moves along the offer table in
recruitme.services.application_lifecycle; rating is informational only.
"""
import enum
from sqlalchemy import Column, String, DateTime, ForeignKey, Enum, UniqueConstraint
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from recruitme.db.base import Base
from recruitme.db.models.user import new_uuid, enum_values


class OfferStatus(str, enum.Enum):
    NONE = "none"
    OFFERED = "offered"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class Rating(str, enum.Enum):
    UNRATED = "unrated"
    HIRABLE = "hirable"
    WAIT = "wait"
    UNACCEPTABLE = "unacceptable"


class Application(Base):
    __tablename__ = "applications"

    id = Column(String(36), primary_key=True, default=new_uuid)
    job_id = Column(String(36), ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, index=True)
    applicant_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    rating = Column(
        Enum(Rating, name="application_rating", values_callable=enum_values, native_enum=False, create_constraint=True),
        nullable=False,
        default=Rating.UNRATED,
        server_default=Rating.UNRATED.value,
    )
    offer_status = Column(
        Enum(OfferStatus, name="offer_status", values_callable=enum_values, native_enum=False, create_constraint=True),
        nullable=False,
        default=OfferStatus.NONE,
        server_default=OfferStatus.NONE.value,
    )

    apply_date = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # Relationships
    job = relationship("Job", back_populates="applications")
    applicant = relationship("User", back_populates="applications")

    __table_args__ = (
        UniqueConstraint("job_id", "applicant_id", name="uq_applications_job_applicant"),
    )

    def __repr__(self):
        return f"<Application(id={self.id}, job_id={self.job_id}, offer_status='{self.offer_status}')>"
