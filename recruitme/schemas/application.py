"""
Pydantic schemas for application, offer and rating endpoints.
"""
from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel, Field

from recruitme.db.models.application import OfferStatus, Rating


class RatingUpdate(BaseModel):
    rating: Rating = Field(..., description="hirable, wait, unacceptable or unrated")


class ApplicantItem(BaseModel):
    """An applicant to one of the company's jobs."""
    id: str
    name: str
    rating: Rating
    offer_status: OfferStatus
    skills: List[str] = Field(default_factory=list)


class ApplicantListResponse(BaseModel):
    applicants: List[ApplicantItem]
    total: int


class ApplicationItem(BaseModel):
    """One of the applicant's own applications, as shown on their profile."""
    job_id: str
    company_name: str
    job_title: str
    status: str = Field(..., description="pending, offered, accepted or rejected")
    post_date: Optional[datetime] = None
    apply_date: Optional[datetime] = None
    applicant_count: int = 0
