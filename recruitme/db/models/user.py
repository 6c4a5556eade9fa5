"""
User model and the closed set of roles a user can hold.
"""
import enum
import uuid
from sqlalchemy import Column, String, DateTime, ForeignKey, Enum
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from recruitme.db.base import Base


def new_uuid() -> str:
    return str(uuid.uuid4())


def enum_values(enum_cls):
    """Persist enum values ("company") rather than member names ("COMPANY")."""
    return [member.value for member in enum_cls]


class Role(str, enum.Enum):
    """Roles are fixed at registration and never change."""
    APPLICANT = "applicant"
    COMPANY = "company"
    ADMIN = "admin"


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=new_uuid)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    role = Column(
        Enum(Role, name="user_role", values_callable=enum_values, native_enum=False, create_constraint=True),
        nullable=False,
        index=True,
    )
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    jobs = relationship("Job", back_populates="company", cascade="all, delete-orphan", passive_deletes=True)
    applications = relationship(
        "Application", back_populates="applicant", cascade="all, delete-orphan", passive_deletes=True
    )
    skills = relationship(
        "ApplicantSkill", back_populates="applicant", cascade="all, delete-orphan", passive_deletes=True
    )

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}', role='{self.role}')>"


class ApplicantSkill(Base):
    __tablename__ = "applicant_skills"

    applicant_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    skill = Column(String(100), primary_key=True)

    applicant = relationship("User", back_populates="skills")
