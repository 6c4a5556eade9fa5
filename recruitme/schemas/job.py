"""
Pydantic schemas for job endpoints.
"""
from typing import List, Optional
from datetime import datetime
from decimal import Decimal
from pydantic import BaseModel, Field

from recruitme.db.models.job import JobStatus


class JobCreate(BaseModel):
    """Schema for creating a new (draft) job."""
    title: str = Field(..., description="Job title", min_length=1, max_length=255)
    description: Optional[str] = Field(None, description="Job description")
    salary: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2, description="Salary")
    skills: List[str] = Field(default_factory=list, description="Required skills")

    class Config:
        json_schema_extra = {
            "example": {
                "title": "Backend Engineer",
                "description": "Build and run our hiring APIs.",
                "salary": "120000.00",
                "skills": ["python", "postgresql"]
            }
        }


class JobSummary(BaseModel):
    """A company's job with its applicant and hire counts."""
    id: str
    title: str
    post_date: Optional[datetime] = None
    status: JobStatus
    applicant_count: int = 0
    hired_count: int = 0

    class Config:
        from_attributes = True


class JobSearchItem(BaseModel):
    id: str
    title: str
    company_name: str
    description: Optional[str] = None
    skills: List[str] = Field(default_factory=list)


class JobSearchResponse(BaseModel):
    jobs: List[JobSearchItem]
    total: int = Field(..., description="Total number of matching jobs")
