"""
Pydantic schemas for company and applicant profiles.
"""
from typing import List, Optional
from pydantic import BaseModel, Field

from recruitme.schemas.application import ApplicationItem
from recruitme.schemas.job import JobSummary


class CompanyProfile(BaseModel):
    id: str
    name: str
    email: str
    jobs: List[JobSummary] = Field(default_factory=list)


class CompanyProfileUpdate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)


class ApplicantProfile(BaseModel):
    id: str
    name: str
    email: str
    skills: List[str] = Field(default_factory=list)
    applications: List[ApplicationItem] = Field(default_factory=list)


class ApplicantProfileUpdate(BaseModel):
    """Only provided fields are updated; `skills` replaces the whole list."""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    skills: Optional[List[str]] = Field(None, description="Full replacement skill list")
